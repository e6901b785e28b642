from flask_smorest import Api
from common.celery_app import celery_app

api = Api()

redis_client = None

mongo_client = None
mongo_db = None

media_storage = None

celery = celery_app
