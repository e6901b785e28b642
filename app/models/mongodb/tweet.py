from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from app.models.mongodb.base import BaseRepository, utcnow


@dataclass
class Tweet:
    content: str
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
            'owner': self.owner,
            'created_at': self.created_at,
            'updated_at': self.updated_at
        }
        if self._id is not None:
            doc['_id'] = self._id
        return doc

    @classmethod
    def from_dict(cls, data: Dict) -> 'Tweet':
        return cls(
            _id=data.get('_id'),
            content=data.get('content', ''),
            owner=data.get('owner'),
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at')
        )


class TweetRepository(BaseRepository):

    COLLECTION_NAME = 'tweets'
    document_class = Tweet

    def ensure_indexes(self):
        self.collection.create_index([('owner', ASCENDING), ('created_at', DESCENDING)])

    def find_by_owner(self, owner_id: ObjectId) -> List[Tweet]:
        return self.find(
            {'owner': owner_id},
            sort=[('created_at', DESCENDING), ('_id', DESCENDING)]
        )
