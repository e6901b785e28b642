"""
Services package
비즈니스 로직을 처리하는 서비스 레이어

- video_service: 영상 목록/상세/게시/수정/삭제/공개 전환
- comment_service: 영상 댓글
- like_service: 영상/댓글/트윗 좋아요 토글, 좋아요한 영상
- subscription_service: 채널 구독 토글, 구독자/구독 채널 목록
- tweet_service: 트윗 CRUD
"""

__all__ = []
