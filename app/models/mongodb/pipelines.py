"""
리소스/뷰별 aggregation pipeline

모든 목록 파이프라인은 _id 를 보조 정렬 키로 사용해 페이지 간 결과가 안정적이다.
단일 소유자 join 은 collapse(첫 원소 또는 부재)로 처리하고,
row 자체가 join 대상에 의존하는 경우(댓글 작성자, 좋아요한 영상)만 unwind 로 제거한다.
"""

import re
from typing import Dict, List, Optional

from bson import ObjectId

from app.models.mongodb.like import LikeRepository, LikeTargetKind
from app.models.mongodb.subscription import SubscriptionRepository
from app.models.mongodb.user import USER_SUMMARY_FIELDS, UserRepository
from app.models.mongodb.video import VideoRepository
from common.utils.pipeline import (
    ASCENDING, DESCENDING,
    add_fields, collapse, contains, lookup, match, project, size_of, sort, unwind
)

USERS = UserRepository.COLLECTION_NAME
VIDEOS = VideoRepository.COLLECTION_NAME
LIKES = LikeRepository.COLLECTION_NAME
SUBSCRIPTIONS = SubscriptionRepository.COLLECTION_NAME

VIDEO_SORT_FIELDS = ('created_at', 'views', 'duration', 'title')

OWNER_BRIEF = ('username', 'avatar')

VIDEO_FIELDS = ('title', 'description', 'video_file', 'thumbnail', 'duration', 'views',
                'is_published', 'owner', 'created_at', 'updated_at')


def _newest_first() -> Dict:
    return sort(('created_at', DESCENDING), ('_id', DESCENDING))


def _fields(*names: str, prefix: str = '') -> Dict:
    return {f'{prefix}{name}': 1 for name in names}


def _user_fields(path: str, *names: str) -> Dict:
    """join 된 사용자 문서에서 공개 가능한 필드만 남기는 projection"""
    return _fields('_id', *(names or USER_SUMMARY_FIELDS), prefix=f'{path}.')


def video_list_pipeline(query: Optional[str] = None,
                        owner_id: Optional[ObjectId] = None,
                        sort_by: Optional[str] = None,
                        sort_type: Optional[str] = None) -> List[Dict]:
    stages = []

    if query:
        regex = {'$regex': re.escape(query.strip()), '$options': 'i'}
        stages.append(match({'$or': [{'title': regex}, {'description': regex}]}))

    if owner_id is not None:
        stages.append(match({'owner': owner_id}))

    stages.append(match({'is_published': True}))

    if sort_by in VIDEO_SORT_FIELDS:
        direction = ASCENDING if sort_type == 'asc' else DESCENDING
        stages.append(sort((sort_by, direction), ('_id', direction)))
    else:
        stages.append(_newest_first())

    stages.extend([
        lookup(USERS, 'owner', '_id', 'owner_details'),
        collapse('owner_details'),
        project({**_fields(*VIDEO_FIELDS), **_user_fields('owner_details', *OWNER_BRIEF)}),
    ])

    return stages


def video_detail_pipeline(video_id: ObjectId, principal_id: Optional[ObjectId]) -> List[Dict]:
    return [
        match({'_id': video_id}),
        lookup(LIKES, '_id', LikeTargetKind.VIDEO.field, 'likes'),
        lookup(USERS, 'owner', '_id', 'owner'),
        collapse('owner'),
        #NOTE: 소유자가 없으면 localField 가 비어 구독 join 도 비게 된다
        lookup(SUBSCRIPTIONS, 'owner._id', 'channel', 'owner_subscribers'),
        add_fields({
            'likes_count': size_of('likes'),
            'is_liked': contains(principal_id, 'likes.liked_by'),
            'owner_subscribers_count': size_of('owner_subscribers'),
            'owner_is_subscribed': contains(principal_id, 'owner_subscribers.subscriber'),
        }),
        project({
            **_fields('title', 'description', 'video_file', 'thumbnail', 'duration', 'views',
                      'is_published', 'created_at'),
            **_user_fields('owner'),
            **_fields('likes_count', 'is_liked', 'owner_subscribers_count', 'owner_is_subscribed'),
        }),
    ]


def video_comments_pipeline(video_id: ObjectId, principal_id: Optional[ObjectId] = None) -> List[Dict]:
    return [
        match({'video': video_id}),
        _newest_first(),
        lookup(USERS, 'owner', '_id', 'owner'),
        #NOTE: 작성자가 없는(탈퇴한) 댓글은 목록에서 제외
        unwind('owner'),
        lookup(LIKES, '_id', LikeTargetKind.COMMENT.field, 'likes'),
        add_fields({
            'likes_count': size_of('likes'),
            'is_liked': contains(principal_id, 'likes.liked_by'),
        }),
        project({
            **_fields('content', 'video', 'created_at', 'updated_at', 'likes_count', 'is_liked'),
            **_user_fields('owner', *OWNER_BRIEF),
        }),
    ]


def channel_subscribers_pipeline(channel_id: ObjectId) -> List[Dict]:
    return [
        match({'channel': channel_id}),
        _newest_first(),
        lookup(USERS, 'subscriber', '_id', 'subscriber'),
        collapse('subscriber'),
        project({**_fields('channel', 'created_at'), **_user_fields('subscriber')}),
    ]


def subscribed_channels_pipeline(subscriber_id: ObjectId) -> List[Dict]:
    return [
        match({'subscriber': subscriber_id}),
        _newest_first(),
        lookup(USERS, 'channel', '_id', 'subscribed_channel'),
        collapse('subscribed_channel'),
        project({**_fields('subscriber', 'created_at'), **_user_fields('subscribed_channel')}),
    ]


def liked_videos_pipeline(principal_id: ObjectId) -> List[Dict]:
    return [
        match({'liked_by': principal_id, LikeTargetKind.VIDEO.field: {'$exists': True}}),
        _newest_first(),
        lookup(VIDEOS, LikeTargetKind.VIDEO.field, '_id', 'liked_video'),
        #NOTE: 삭제된 영상에 대한 좋아요는 join miss 로 자연스럽게 빠진다
        unwind('liked_video'),
        lookup(USERS, 'liked_video.owner', '_id', 'owner_details'),
        collapse('owner_details'),
        project({
            '_id': 0,
            'liked_at': '$created_at',
            **_fields('_id', 'title', 'description', 'video_file', 'thumbnail', 'duration', 'views',
                      'owner', 'created_at', prefix='liked_video.'),
            **_user_fields('owner_details'),
        }),
    ]
