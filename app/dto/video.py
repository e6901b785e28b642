from dataclasses import dataclass
from typing import Dict, Optional

from app.dto.common import UserSummaryDto, id_str, iso


def _media(doc: Optional[Dict]) -> Optional[Dict]:
    if not doc:
        return None
    return {
        'url': doc.get('url'),
        'storage_id': doc.get('storage_id')
    }


@dataclass
class VideoDto:
    video_id: str
    title: str
    description: str
    video_file: Optional[Dict]
    thumbnail: Optional[Dict]
    duration: float
    views: int
    is_published: bool
    owner_id: Optional[str]
    created_at: Optional[str]
    updated_at: Optional[str] = None
    owner: Optional[UserSummaryDto] = None

    def to_dict(self):
        return {
            'video_id': self.video_id,
            'title': self.title,
            'description': self.description,
            'video_file': self.video_file,
            'thumbnail': self.thumbnail,
            'duration': self.duration,
            'views': self.views,
            'is_published': self.is_published,
            'owner_id': self.owner_id,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
            'owner': self.owner.to_dict() if self.owner else None
        }

    @classmethod
    def from_doc(cls, doc: Dict, owner_field: str = 'owner_details') -> 'VideoDto':
        owner_ref = doc.get('owner')
        owner = UserSummaryDto.from_doc(doc.get(owner_field))
        if isinstance(owner_ref, dict):
            owner = UserSummaryDto.from_doc(owner_ref)
            owner_ref = owner_ref.get('_id')

        return cls(
            video_id=id_str(doc.get('_id')),
            title=doc.get('title'),
            description=doc.get('description'),
            video_file=_media(doc.get('video_file')),
            thumbnail=_media(doc.get('thumbnail')),
            duration=doc.get('duration') or 0.0,
            views=doc.get('views', 0),
            is_published=doc.get('is_published', True),
            owner_id=id_str(owner_ref),
            created_at=iso(doc.get('created_at')),
            updated_at=iso(doc.get('updated_at')),
            owner=owner
        )

    @classmethod
    def from_video(cls, video) -> 'VideoDto':
        return cls.from_doc(video.to_dict())


@dataclass
class VideoDetailDto:
    video_id: str
    title: str
    description: str
    video_file: Optional[Dict]
    thumbnail: Optional[Dict]
    duration: float
    views: int
    is_published: bool
    created_at: Optional[str]
    owner: Optional[UserSummaryDto]
    likes_count: int
    is_liked: bool

    def to_dict(self):
        return {
            'video_id': self.video_id,
            'title': self.title,
            'description': self.description,
            'video_file': self.video_file,
            'thumbnail': self.thumbnail,
            'duration': self.duration,
            'views': self.views,
            'is_published': self.is_published,
            'created_at': self.created_at,
            'owner': self.owner.to_dict() if self.owner else None,
            'likes_count': self.likes_count,
            'is_liked': self.is_liked
        }

    @classmethod
    def from_doc(cls, doc: Dict) -> 'VideoDetailDto':
        owner = UserSummaryDto.from_doc(doc.get('owner'))
        if owner:
            owner.subscribers_count = doc.get('owner_subscribers_count', 0)
            owner.is_subscribed = bool(doc.get('owner_is_subscribed', False))

        return cls(
            video_id=id_str(doc.get('_id')),
            title=doc.get('title'),
            description=doc.get('description'),
            video_file=_media(doc.get('video_file')),
            thumbnail=_media(doc.get('thumbnail')),
            duration=doc.get('duration') or 0.0,
            views=doc.get('views', 0),
            is_published=doc.get('is_published', True),
            created_at=iso(doc.get('created_at')),
            owner=owner,
            likes_count=doc.get('likes_count', 0),
            is_liked=bool(doc.get('is_liked', False))
        )


@dataclass
class PublishStatusDto:
    video_id: str
    is_published: bool

    def to_dict(self):
        return {
            'video_id': self.video_id,
            'is_published': self.is_published
        }
