"""
VidTube Application
Flask 기반 영상 공유 서비스 백엔드
"""

from urllib.parse import quote_plus

from flask import Flask
from flask_cors import CORS
from pymongo import MongoClient
import redis
import logging
import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration
from sentry_sdk.integrations.redis import RedisIntegration
from sentry_sdk.integrations.celery import CeleryIntegration
from common.extensions import api
import common.extensions as extensions
from common.celery_app import init_celery
from common.utils.logging_utils import setup_logger
from common.utils.media_storage import MediaStorage


def _mongo_uri(app):
    if app.config.get('MONGODB_URI'):
        return app.config['MONGODB_URI']

    mongo_host = app.config.get('MONGO_HOST', 'localhost')
    mongo_port = app.config.get('MONGO_PORT', 27017)
    mongo_username = app.config.get('MONGO_USERNAME')
    mongo_password = app.config.get('MONGO_PASSWORD')

    if mongo_username and mongo_password:
        return f"mongodb://{quote_plus(mongo_username)}:{quote_plus(mongo_password)}@{mongo_host}:{mongo_port}/"
    return f"mongodb://{mongo_host}:{mongo_port}/"


def _init_mongo(app, logger):
    timeout_ms = app.config.get('MONGO_TIMEOUT_MS', 5000)
    mongo_connection = MongoClient(
        _mongo_uri(app),
        serverSelectionTimeoutMS=timeout_ms,
        connectTimeoutMS=timeout_ms
    )
    mongo_db = mongo_connection[app.config['MONGO_DB_NAME']]

    if not app.config.get('TESTING'):
        logger.info(f"MongoDB 연결 시도: {app.config.get('MONGO_HOST')}:{app.config.get('MONGO_PORT')}")
        try:
            mongo_connection.admin.command('ping')
        except Exception as e:
            logger.error(f"MongoDB 연결 실패: {e}")
            raise
        logger.info("MongoDB 연결 성공")

        from app.models.mongodb import ensure_indexes
        ensure_indexes(mongo_db)

    extensions.mongo_client = mongo_connection
    extensions.mongo_db = mongo_db
    app.mongo = mongo_db


def _init_redis(app, logger):
    if app.config.get('TESTING'):
        extensions.redis_client = None
        return

    try:
        if app.config.get('REDIS_URL'):
            logger.info("Redis 연결 시도: REDIS_URL 사용")
            extensions.redis_client = redis.from_url(
                app.config['REDIS_URL'],
                decode_responses=True,
                socket_connect_timeout=5
            )
        else:
            redis_host = app.config.get('REDIS_HOST', 'localhost')
            redis_port = app.config.get('REDIS_PORT', 6379)
            redis_password = app.config.get('REDIS_PASSWORD') or None

            logger.info(f"Redis 연결 시도: {redis_host}:{redis_port}")

            extensions.redis_client = redis.Redis(
                host=redis_host,
                port=redis_port,
                db=app.config.get('REDIS_DB', 0),
                password=redis_password,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5
            )

        extensions.redis_client.ping()
        logger.info("Redis 연결 성공")

    except redis.AuthenticationError as e:
        logger.warning(f"Redis 인증 실패: {e}")
        logger.warning("토큰 블랙리스트 확인이 비활성화됩니다")
        extensions.redis_client = None
    except redis.ConnectionError as e:
        logger.warning(f"Redis 연결 실패: {e}")
        logger.warning("토큰 블랙리스트 확인이 비활성화됩니다")
        extensions.redis_client = None


def create_app(config_name='default'):
    """
    Application Factory Pattern
    """
    app = Flask(__name__)

    from common.config.config import config
    config_class = config.get(config_name, config['default'])
    app.config.from_object(config_class)

    app.json.ensure_ascii = False

    if app.config.get('SENTRY_DSN'):
        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[
                FlaskIntegration(),
                RedisIntegration(),
                CeleryIntegration(),
            ],
            environment=app.config.get('SENTRY_ENVIRONMENT', 'development'),
            traces_sample_rate=app.config.get('SENTRY_TRACES_SAMPLE_RATE', 1.0),
            send_default_pii=False,
            attach_stacktrace=True,
        )

    log_level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO'))
    logger = setup_logger(app, log_level, app.config.get('LOG_DIR', 'logs'))

    app.config['API_TITLE'] = 'VidTube API'
    app.config['API_VERSION'] = 'v1'
    app.config['OPENAPI_VERSION'] = '3.0.3'
    app.config['OPENAPI_URL_PREFIX'] = '/'
    app.config['OPENAPI_SWAGGER_UI_PATH'] = '/swagger'
    app.config['OPENAPI_SWAGGER_UI_URL'] = 'https://cdn.jsdelivr.net/npm/swagger-ui-dist/'
    app.config['OPENAPI_REDOC_PATH'] = '/redoc'
    app.config['OPENAPI_REDOC_URL'] = 'https://cdn.jsdelivr.net/npm/redoc@latest/bundles/redoc.standalone.js'

    # JWT Bearer 토큰 인증을 위한 보안 스킴 설정
    app.config['API_SPEC_OPTIONS'] = {
        'components': {
            'securitySchemes': {
                'BearerAuth': {
                    'type': 'http',
                    'scheme': 'bearer',
                    'bearerFormat': 'JWT',
                    'description': 'JWT 액세스 토큰을 입력하세요 (Bearer 접두어 없이)'
                }
            }
        }
    }

    CORS(app,
         supports_credentials=True,
         origins=app.config.get('CORS_ORIGINS', []),
         allow_headers=["Content-Type", "Authorization", "Accept", "X-Requested-With"],
         expose_headers=["Authorization", "Content-Type"],
         methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
         max_age=3600)

    api.init_app(app)

    _init_mongo(app, logger)
    _init_redis(app, logger)

    extensions.media_storage = MediaStorage(
        app.config['UPLOAD_FOLDER'],
        url_prefix=app.config.get('MEDIA_URL_PREFIX', '/media'),
        probe_media_duration=not app.config.get('TESTING')
    )

    init_celery(app)

    from app.routes import API_BLUEPRINTS, media_blueprint

    for blueprint in API_BLUEPRINTS:
        api.register_blueprint(blueprint)
    app.register_blueprint(media_blueprint)

    from common.exception.error_handler import register_error_handlers
    register_error_handlers(app)

    @app.route('/health')
    def health_check():
        return {
            'status': 'healthy',
            'service': 'vidtube'
        }, 200

    return app
