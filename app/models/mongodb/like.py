from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from app.models.mongodb.base import BaseRepository, utcnow
from common.utils.toggle import toggle_presence


class LikeTargetKind(Enum):
    VIDEO = 'video'
    COMMENT = 'comment'
    TWEET = 'tweet'

    @property
    def field(self) -> str:
        return self.value


@dataclass(frozen=True)
class LikeTarget:
    """좋아요 대상 (video / comment / tweet 중 정확히 하나)"""
    kind: LikeTargetKind
    target_id: ObjectId

    @classmethod
    def video(cls, video_id: ObjectId) -> 'LikeTarget':
        return cls(LikeTargetKind.VIDEO, video_id)

    @classmethod
    def comment(cls, comment_id: ObjectId) -> 'LikeTarget':
        return cls(LikeTargetKind.COMMENT, comment_id)

    @classmethod
    def tweet(cls, tweet_id: ObjectId) -> 'LikeTarget':
        return cls(LikeTargetKind.TWEET, tweet_id)

    def to_filter(self) -> Dict:
        return {self.kind.field: self.target_id}


@dataclass
class Like:
    target: LikeTarget
    liked_by: ObjectId

    _id: Optional[ObjectId] = None
    created_at: datetime = field(default_factory=utcnow)

    def to_dict(self) -> Dict:
        doc = {
            **self.target.to_filter(),
            'liked_by': self.liked_by,
            'created_at': self.created_at
        }
        if self._id is not None:
            doc['_id'] = self._id
        return doc

    @classmethod
    def from_dict(cls, data: Dict) -> 'Like':
        target = None
        for kind in LikeTargetKind:
            if data.get(kind.field) is not None:
                target = LikeTarget(kind, data[kind.field])
                break

        return cls(
            _id=data.get('_id'),
            target=target,
            liked_by=data.get('liked_by'),
            created_at=data.get('created_at')
        )


class LikeRepository(BaseRepository):

    COLLECTION_NAME = 'likes'
    document_class = Like

    def ensure_indexes(self):
        #NOTE: (대상, 사용자) 쌍은 유일. 대상 종류별 partial unique index
        for kind in LikeTargetKind:
            self.collection.create_index(
                [(kind.field, ASCENDING), ('liked_by', ASCENDING)],
                unique=True,
                partialFilterExpression={kind.field: {'$exists': True}},
                name=f'uk_like_{kind.field}_liked_by'
            )
        self.collection.create_index([('liked_by', ASCENDING), ('created_at', DESCENDING)])

    @staticmethod
    def pair_filter(target: LikeTarget, user_id: ObjectId) -> Dict:
        return {**target.to_filter(), 'liked_by': user_id}

    def toggle(self, target: LikeTarget, user_id: ObjectId) -> bool:
        return toggle_presence(self.collection, self.pair_filter(target, user_id))
