from dataclasses import dataclass
from typing import Dict, Optional

from app.dto.common import UserSummaryDto, id_str, iso


@dataclass
class CommentDto:
    comment_id: str
    video_id: str
    content: str
    owner_id: Optional[str]
    created_at: Optional[str]
    updated_at: Optional[str] = None
    owner: Optional[UserSummaryDto] = None
    likes_count: int = 0
    is_liked: bool = False

    def to_dict(self):
        return {
            'comment_id': self.comment_id,
            'video_id': self.video_id,
            'content': self.content,
            'owner_id': self.owner_id,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
            'owner': self.owner.to_dict() if self.owner else None,
            'likes_count': self.likes_count,
            'is_liked': self.is_liked
        }

    @classmethod
    def from_doc(cls, doc: Dict) -> 'CommentDto':
        owner_ref = doc.get('owner')
        owner = None
        if isinstance(owner_ref, dict):
            owner = UserSummaryDto.from_doc(owner_ref)
            owner_ref = owner_ref.get('_id')

        return cls(
            comment_id=id_str(doc.get('_id')),
            video_id=id_str(doc.get('video')),
            content=doc.get('content'),
            owner_id=id_str(owner_ref),
            created_at=iso(doc.get('created_at')),
            updated_at=iso(doc.get('updated_at')),
            owner=owner,
            likes_count=doc.get('likes_count', 0),
            is_liked=bool(doc.get('is_liked', False))
        )

    @classmethod
    def from_comment(cls, comment) -> 'CommentDto':
        return cls.from_doc(comment.to_dict())
