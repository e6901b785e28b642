"""
MongoDB Collections Models
MongoDB 콜렉션용 데이터 모델 및 Repository
"""

from .video import MediaFile, Video, VideoRepository
from .comment import Comment, CommentRepository
from .like import Like, LikeTarget, LikeTargetKind, LikeRepository
from .subscription import Subscription, SubscriptionRepository
from .tweet import Tweet, TweetRepository
from .user import UserSummary, UserRepository

REPOSITORIES = (
    VideoRepository,
    CommentRepository,
    LikeRepository,
    SubscriptionRepository,
    TweetRepository,
    UserRepository,
)


def ensure_indexes(db):
    for repository_class in REPOSITORIES:
        repository_class(db).ensure_indexes()


__all__ = [
    'MediaFile',
    'Video',
    'VideoRepository',
    'Comment',
    'CommentRepository',
    'Like',
    'LikeTarget',
    'LikeTargetKind',
    'LikeRepository',
    'Subscription',
    'SubscriptionRepository',
    'Tweet',
    'TweetRepository',
    'UserSummary',
    'UserRepository',
    'REPOSITORIES',
    'ensure_indexes'
]
