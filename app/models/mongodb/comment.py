from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from app.models.mongodb.base import BaseRepository, utcnow


@dataclass
class Comment:
    content: str
    video: ObjectId
    owner: ObjectId

    _id: Optional[ObjectId] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @property
    def id(self) -> Optional[ObjectId]:
        return self._id

    def to_dict(self) -> Dict:
        doc = {
            'content': self.content,
            'video': self.video,
            'owner': self.owner,
            'created_at': self.created_at,
            'updated_at': self.updated_at
        }
        if self._id is not None:
            doc['_id'] = self._id
        return doc

    @classmethod
    def from_dict(cls, data: Dict) -> 'Comment':
        return cls(
            _id=data.get('_id'),
            content=data.get('content', ''),
            video=data.get('video'),
            owner=data.get('owner'),
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at')
        )


class CommentRepository(BaseRepository):

    COLLECTION_NAME = 'comments'
    document_class = Comment

    def ensure_indexes(self):
        #NOTE: 영상별 댓글 최신순 조회 최적화
        self.collection.create_index([('video', ASCENDING), ('created_at', DESCENDING)])
        self.collection.create_index('owner')
