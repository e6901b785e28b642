from dataclasses import dataclass
from typing import Dict, Optional

from app.dto.common import iso
from app.dto.video import VideoDto


@dataclass
class ToggleLikeResponseDto:
    is_liked: bool

    def to_dict(self):
        return {
            'is_liked': self.is_liked
        }


@dataclass
class LikedVideoDto:
    liked_at: Optional[str]
    liked_video: VideoDto

    def to_dict(self):
        return {
            'liked_at': self.liked_at,
            'liked_video': self.liked_video.to_dict()
        }

    @classmethod
    def from_doc(cls, doc: Dict) -> 'LikedVideoDto':
        return cls(
            liked_at=iso(doc.get('liked_at')),
            liked_video=VideoDto.from_doc({**doc.get('liked_video', {}), 'owner_details': doc.get('owner_details')})
        )
