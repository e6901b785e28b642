"""
Celery Application
Flask와 통합된 Celery 앱
"""

from celery import Celery


def _make_context_task(celery):
    class FlaskContextTask(celery.Task):
        def __call__(self, *args, **kwargs):
            flask_app = getattr(celery, 'flask_app', None)
            if flask_app is None:
                return self.run(*args, **kwargs)
            with flask_app.app_context():
                return self.run(*args, **kwargs)

    return FlaskContextTask


def create_celery_app():
    """
    Celery 앱 생성 (Flask 앱은 init_celery 에서 연결)

    Returns:
        Celery: Celery application instance
    """
    celery = Celery(
        'vidtube',
        include=['common.tasks.video_tasks']
    )

    from common.config.celery_config import CeleryConfig
    celery.config_from_object(CeleryConfig)

    celery.Task = _make_context_task(celery)

    return celery


def init_celery(app, celery=None):
    """
    Flask 앱 설정을 Celery에 반영하고 task 실행 시 app context를 열도록 연결

    Args:
        app: Flask application instance
        celery: 대상 Celery 인스턴스 (기본값: 모듈 전역 celery_app)
    """
    celery = celery or celery_app
    celery.flask_app = app

    always_eager = app.config.get('CELERY_TASK_ALWAYS_EAGER', False)
    celery.conf.update(
        task_always_eager=always_eager,
        task_eager_propagates=False,
    )

    return celery


# Celery 인스턴스 생성 (Flask app 없이)
celery_app = create_celery_app()
