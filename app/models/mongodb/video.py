from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from app.models.mongodb.base import BaseRepository, utcnow


@dataclass
class MediaFile:
    url: str
    storage_id: str

    def to_dict(self) -> Dict[str, str]:
        return {
            'url': self.url,
            'storage_id': self.storage_id
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> Optional['MediaFile']:
        if not data:
            return None
        return cls(url=data.get('url'), storage_id=data.get('storage_id'))


@dataclass
class Video:
    title: str
    description: str
    video_file: MediaFile
    thumbnail: MediaFile
    owner: ObjectId

    duration: float = 0.0
    views: int = 0
    is_published: bool = True

    _id: Optional[ObjectId] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @property
    def id(self) -> Optional[ObjectId]:
        return self._id

    def to_dict(self) -> Dict:
        doc = {
            'title': self.title,
            'description': self.description,
            'video_file': self.video_file.to_dict(),
            'thumbnail': self.thumbnail.to_dict(),
            'duration': self.duration,
            'views': self.views,
            'is_published': self.is_published,
            'owner': self.owner,
            'created_at': self.created_at,
            'updated_at': self.updated_at
        }
        if self._id is not None:
            doc['_id'] = self._id
        return doc

    @classmethod
    def from_dict(cls, data: Dict) -> 'Video':
        return cls(
            _id=data.get('_id'),
            title=data.get('title', ''),
            description=data.get('description', ''),
            video_file=MediaFile.from_dict(data.get('video_file')),
            thumbnail=MediaFile.from_dict(data.get('thumbnail')),
            owner=data.get('owner'),
            duration=data.get('duration') or 0.0,
            views=data.get('views', 0),
            is_published=data.get('is_published', True),
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at')
        )


class VideoRepository(BaseRepository):

    COLLECTION_NAME = 'videos'
    document_class = Video

    def ensure_indexes(self):
        self.collection.create_index([('owner', ASCENDING), ('created_at', DESCENDING)])
        self.collection.create_index([('is_published', ASCENDING), ('created_at', DESCENDING)])

    def increment_views(self, video_id: ObjectId, amount: int = 1) -> bool:
        result = self.collection.update_one({'_id': video_id}, {'$inc': {'views': amount}})
        return result.matched_count > 0
