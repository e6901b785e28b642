from typing import Optional

from bson import ObjectId
from kombu.exceptions import OperationalError
from pymongo.errors import PyMongoError

import common.extensions as extensions
from app.dto.video import PublishStatusDto, VideoDetailDto, VideoDto
from app.models.mongodb.pipelines import video_detail_pipeline, video_list_pipeline
from app.models.mongodb.video import MediaFile, Video, VideoRepository
from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.tasks.video_tasks import record_video_view_task
from common.utils.logging_utils import get_logger
from common.utils.object_id import to_object_id
from common.utils.ownership import authorize_owner
from common.utils.pagination import Page, page_params

logger = get_logger('video_service')


def _has_file(file_storage) -> bool:
    return file_storage is not None and bool(file_storage.filename)


def _required_text(value: Optional[str]) -> str:
    return (value or '').strip()


class VideoService:

    @staticmethod
    def _repository() -> VideoRepository:
        return VideoRepository(extensions.mongo_db)

    @staticmethod
    def _find_owned(video_id: ObjectId, user_id: ObjectId) -> Video:
        video = VideoService._repository().find_by_id(video_id)
        if not video:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        authorize_owner(video.owner, user_id, APIError.VIDEO_FORBIDDEN)
        return video

    @staticmethod
    def get_all_videos(page=None, limit=None, query: str = None, sort_by: str = None,
                       sort_type: str = None, user_id: str = None) -> Page:
        owner_id = to_object_id(user_id, 'user_id') if user_id else None
        page, limit = page_params(page, limit)

        pipeline = video_list_pipeline(query=query, owner_id=owner_id, sort_by=sort_by, sort_type=sort_type)
        result = VideoService._repository().aggregate_paginate(pipeline, page, limit)

        return result.map(VideoDto.from_doc)

    @staticmethod
    def publish_video(user_id: ObjectId, title: str, description: str, video_file, thumbnail) -> VideoDto:
        title = _required_text(title)
        description = _required_text(description)

        if not title or not description:
            raise BusinessError(APIError.INVALID_INPUT_VALUE, "Title and description are required")

        if not _has_file(video_file):
            raise BusinessError(APIError.VIDEO_MEDIA_REQUIRED, "Video file is required")
        if not _has_file(thumbnail):
            raise BusinessError(APIError.VIDEO_MEDIA_REQUIRED, "Thumbnail is required")

        storage = extensions.media_storage
        video_asset = storage.upload(video_file, probe_duration_of_media=True)
        thumbnail_asset = storage.upload(thumbnail)

        if not video_asset or not thumbnail_asset:
            for asset in (video_asset, thumbnail_asset):
                if asset:
                    storage.delete(asset.storage_id)
            raise BusinessError(APIError.VIDEO_MEDIA_UNAVAILABLE)

        video = Video(
            title=title,
            description=description,
            video_file=MediaFile(**video_asset.to_document()),
            thumbnail=MediaFile(**thumbnail_asset.to_document()),
            duration=video_asset.duration or 0.0,
            owner=user_id,
            is_published=True
        )

        try:
            created = VideoService._repository().create(video)
        except PyMongoError:
            storage.delete(video_asset.storage_id)
            storage.delete(thumbnail_asset.storage_id)
            raise

        logger.info(f"Video published: {created.id} by {user_id}")

        return VideoDto.from_video(created)

    @staticmethod
    def get_video_by_id(video_id: str, user_id: Optional[ObjectId]) -> VideoDetailDto:
        video_oid = to_object_id(video_id, 'video_id')

        docs = VideoService._repository().aggregate(video_detail_pipeline(video_oid, user_id))
        if not docs:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        detail = VideoDetailDto.from_doc(docs[0])

        VideoService._dispatch_view(video_oid, user_id)

        return detail

    @staticmethod
    def _dispatch_view(video_id: ObjectId, user_id: Optional[ObjectId]):
        #NOTE: 조회수/시청 기록은 응답과 별개로 best-effort 처리
        try:
            record_video_view_task.apply_async(
                args=[str(video_id), str(user_id) if user_id else None],
                retry=False
            )
        except OperationalError as e:
            logger.warning(f"Failed to enqueue view record for {video_id}: {e}")

    @staticmethod
    def update_video(video_id: str, user_id: ObjectId, title: str, description: str, thumbnail=None) -> VideoDto:
        title = _required_text(title)
        description = _required_text(description)

        if not title or not description:
            raise BusinessError(APIError.INVALID_INPUT_VALUE, "Title and description are required")

        video_oid = to_object_id(video_id, 'video_id')
        video = VideoService._find_owned(video_oid, user_id)

        patch = {
            'title': title,
            'description': description
        }

        storage = extensions.media_storage
        new_thumbnail = None
        if _has_file(thumbnail):
            new_thumbnail = storage.upload(thumbnail)
            if not new_thumbnail:
                raise BusinessError(APIError.VIDEO_MEDIA_UNAVAILABLE, "Thumbnail upload failed")
            patch['thumbnail'] = new_thumbnail.to_document()

        updated = VideoService._repository().update_by_id(video_oid, patch)
        if not updated:
            if new_thumbnail:
                storage.delete(new_thumbnail.storage_id)
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        if new_thumbnail and video.thumbnail:
            storage.delete(video.thumbnail.storage_id)

        logger.info(f"Video updated: {video_oid}")

        return VideoDto.from_video(updated)

    @staticmethod
    def delete_video(video_id: str, user_id: ObjectId):
        video_oid = to_object_id(video_id, 'video_id')
        video = VideoService._find_owned(video_oid, user_id)

        deleted = VideoService._repository().delete_by_id(video_oid)
        if not deleted:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        storage = extensions.media_storage
        for media in (video.video_file, video.thumbnail):
            if media:
                storage.delete(media.storage_id)

        logger.info(f"Video deleted: {video_oid}")

    @staticmethod
    def toggle_publish_status(video_id: str, user_id: ObjectId) -> PublishStatusDto:
        video_oid = to_object_id(video_id, 'video_id')
        video = VideoService._find_owned(video_oid, user_id)

        updated = VideoService._repository().update_by_id(video_oid, {'is_published': not video.is_published})
        if not updated:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        logger.info(f"Video {video_oid} publish status -> {updated.is_published}")

        return PublishStatusDto(video_id=str(video_oid), is_published=updated.is_published)
