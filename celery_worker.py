"""
Celery Worker 실행 스크립트
Flask app context와 함께 Celery worker를 실행

명령어: celery -A celery_worker.celery worker -Q video_events --loglevel=info
"""

import os

from dotenv import load_dotenv

load_dotenv()

from app import create_app
from common.extensions import celery

# Flask app 생성 (init_celery 로 task 실행 시 app context 연결)
app = create_app(os.getenv('FLASK_ENV', 'development'))


if __name__ == '__main__':
    celery.start()
