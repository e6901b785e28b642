import os

VIDEO_EVENTS_QUEUE = 'video_events'


class CeleryConfig:
    """
    조회수/시청 기록 같은 부수 효과 전용 설정
    결과를 기다리는 호출자가 없으므로 result backend 는 두지 않는다.
    """

    broker_url = os.environ.get('CELERY_BROKER_URL', os.environ.get('REDIS_URL', 'redis://localhost:6379/1'))
    broker_connection_retry_on_startup = True
    broker_transport_options = {'visibility_timeout': 600}

    task_serializer = 'json'
    accept_content = ['json']
    timezone = 'UTC'
    enable_utc = True

    task_ignore_result = True
    task_acks_late = True
    task_reject_on_worker_lost = True

    worker_prefetch_multiplier = 4
    worker_max_tasks_per_child = 1000

    task_default_queue = VIDEO_EVENTS_QUEUE
    task_routes = {
        'videos.*': {'queue': VIDEO_EVENTS_QUEUE},
    }
