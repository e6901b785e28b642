from bson import ObjectId

import common.extensions as extensions
from app.dto.comment import CommentDto
from app.models.mongodb.comment import Comment, CommentRepository
from app.models.mongodb.pipelines import video_comments_pipeline
from app.models.mongodb.video import VideoRepository
from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils.logging_utils import get_logger
from common.utils.object_id import to_object_id
from common.utils.ownership import authorize_owner
from common.utils.pagination import Page, page_params

logger = get_logger('comment_service')


def _required_content(content: str) -> str:
    content = (content or '').strip()
    if not content:
        raise BusinessError(APIError.INVALID_INPUT_VALUE, "Content is required")
    return content


class CommentService:

    @staticmethod
    def _ensure_video_exists(video_id: ObjectId):
        if not VideoRepository(extensions.mongo_db).exists({'_id': video_id}):
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

    @staticmethod
    def _find_owned(comment_id: ObjectId, user_id: ObjectId) -> Comment:
        comment = CommentRepository(extensions.mongo_db).find_by_id(comment_id)
        if not comment:
            raise BusinessError(APIError.COMMENT_NOT_FOUND)

        authorize_owner(comment.owner, user_id, APIError.COMMENT_FORBIDDEN)
        return comment

    @staticmethod
    def get_video_comments(video_id: str, user_id: ObjectId = None, page=None, limit=None) -> Page:
        video_oid = to_object_id(video_id, 'video_id')
        CommentService._ensure_video_exists(video_oid)

        page, limit = page_params(page, limit)
        result = CommentRepository(extensions.mongo_db).aggregate_paginate(
            video_comments_pipeline(video_oid, user_id),
            page,
            limit
        )

        return result.map(CommentDto.from_doc)

    @staticmethod
    def add_comment(video_id: str, user_id: ObjectId, content: str) -> CommentDto:
        content = _required_content(content)
        video_oid = to_object_id(video_id, 'video_id')
        CommentService._ensure_video_exists(video_oid)

        comment = CommentRepository(extensions.mongo_db).create(
            Comment(content=content, video=video_oid, owner=user_id)
        )

        logger.info(f"Comment {comment.id} added to video {video_oid}")

        return CommentDto.from_comment(comment)

    @staticmethod
    def update_comment(comment_id: str, user_id: ObjectId, content: str) -> CommentDto:
        content = _required_content(content)
        comment_oid = to_object_id(comment_id, 'comment_id')
        CommentService._find_owned(comment_oid, user_id)

        updated = CommentRepository(extensions.mongo_db).update_by_id(comment_oid, {'content': content})
        if not updated:
            raise BusinessError(APIError.COMMENT_NOT_FOUND)

        return CommentDto.from_comment(updated)

    @staticmethod
    def delete_comment(comment_id: str, user_id: ObjectId):
        comment_oid = to_object_id(comment_id, 'comment_id')
        CommentService._find_owned(comment_oid, user_id)

        if not CommentRepository(extensions.mongo_db).delete_by_id(comment_oid):
            raise BusinessError(APIError.COMMENT_NOT_FOUND)

        logger.info(f"Comment {comment_oid} deleted")
