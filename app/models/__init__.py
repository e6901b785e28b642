"""
Models package
MongoDB 도큐먼트 모델 (one model per file)

- Video: 영상 정보 (미디어, 조회수, 공개 여부, 소유자)
- Comment: 영상 댓글
- Like: 영상/댓글/트윗 좋아요 (대상, 사용자 쌍)
- Subscription: 채널 구독 (구독자, 채널 쌍)
- Tweet: 커뮤니티 게시글
- UserSummary: join 시 노출되는 사용자 요약 정보
"""

from app.models.mongodb import (
    Video,
    Comment,
    Like,
    LikeTarget,
    Subscription,
    Tweet,
    UserSummary
)

__all__ = [
    'Video',
    'Comment',
    'Like',
    'LikeTarget',
    'Subscription',
    'Tweet',
    'UserSummary'
]
