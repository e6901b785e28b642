from pymongo.errors import PyMongoError

import common.extensions as extensions
from app.models.mongodb.user import UserRepository
from app.models.mongodb.video import VideoRepository
from common.celery_app import celery_app
from common.utils.logging_utils import get_logger
from common.utils.object_id import is_valid_object_id, to_object_id

logger = get_logger('video_tasks')


@celery_app.task(
    name='videos.record_view',
    bind=True,
    max_retries=3,
    default_retry_delay=10
)
def record_video_view_task(self, video_id: str, user_id: str = None):
    """
    영상 상세 조회 부수 효과: 조회수 +1, 시청 기록 추가 (중복 조회도 매번 반영)
    """
    if not is_valid_object_id(video_id):
        logger.warning(f"Skip view record for invalid video id: {video_id}")
        return {'status': 'skipped', 'video_id': video_id}

    db = extensions.mongo_db

    try:
        video_oid = to_object_id(video_id)
        VideoRepository(db).increment_views(video_oid)

        if user_id and is_valid_object_id(user_id):
            UserRepository(db).add_to_watch_history(to_object_id(user_id), video_oid)

        logger.debug(f"Recorded view: video={video_id} user={user_id}")

        return {'status': 'success', 'video_id': video_id}

    except PyMongoError as exc:
        logger.error(f"Error recording view for {video_id}: {exc}")

        try:
            raise self.retry(exc=exc)
        except self.MaxRetriesExceededError:
            logger.error(f"Max retries exceeded for view record {video_id}")
            return {'status': 'error', 'video_id': video_id, 'message': str(exc)}
