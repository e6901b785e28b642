from typing import List

from bson import ObjectId

import common.extensions as extensions
from app.dto.like import LikedVideoDto, ToggleLikeResponseDto
from app.models.mongodb.comment import CommentRepository
from app.models.mongodb.like import LikeRepository, LikeTarget
from app.models.mongodb.pipelines import liked_videos_pipeline
from app.models.mongodb.tweet import TweetRepository
from app.models.mongodb.video import VideoRepository
from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils.logging_utils import get_logger
from common.utils.object_id import to_object_id

logger = get_logger('like_service')


class LikeService:

    @staticmethod
    def _toggle(target: LikeTarget, user_id: ObjectId) -> ToggleLikeResponseDto:
        is_liked = LikeRepository(extensions.mongo_db).toggle(target, user_id)

        logger.info(f"Like {target.kind.value}={target.target_id} user={user_id} -> {is_liked}")

        return ToggleLikeResponseDto(is_liked=is_liked)

    @staticmethod
    def toggle_video_like(video_id: str, user_id: ObjectId) -> ToggleLikeResponseDto:
        video_oid = to_object_id(video_id, 'video_id')
        if not VideoRepository(extensions.mongo_db).exists({'_id': video_oid}):
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        return LikeService._toggle(LikeTarget.video(video_oid), user_id)

    @staticmethod
    def toggle_comment_like(comment_id: str, user_id: ObjectId) -> ToggleLikeResponseDto:
        comment_oid = to_object_id(comment_id, 'comment_id')
        if not CommentRepository(extensions.mongo_db).exists({'_id': comment_oid}):
            raise BusinessError(APIError.COMMENT_NOT_FOUND)

        return LikeService._toggle(LikeTarget.comment(comment_oid), user_id)

    @staticmethod
    def toggle_tweet_like(tweet_id: str, user_id: ObjectId) -> ToggleLikeResponseDto:
        tweet_oid = to_object_id(tweet_id, 'tweet_id')
        if not TweetRepository(extensions.mongo_db).exists({'_id': tweet_oid}):
            raise BusinessError(APIError.TWEET_NOT_FOUND)

        return LikeService._toggle(LikeTarget.tweet(tweet_oid), user_id)

    @staticmethod
    def get_liked_videos(user_id: ObjectId) -> List[LikedVideoDto]:
        docs = LikeRepository(extensions.mongo_db).aggregate(liked_videos_pipeline(user_id))
        return [LikedVideoDto.from_doc(doc) for doc in docs]
