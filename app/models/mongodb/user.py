from dataclasses import dataclass
from typing import Dict, Optional

from bson import ObjectId

from app.models.mongodb.base import BaseRepository

#NOTE: 다른 리소스에 join 될 때 노출 가능한 사용자 필드 (민감 정보 제외)
USER_SUMMARY_FIELDS = ('username', 'avatar', 'full_name')


@dataclass
class UserSummary:
    _id: ObjectId
    username: Optional[str] = None
    avatar: Optional[str] = None
    full_name: Optional[str] = None

    @property
    def id(self) -> ObjectId:
        return self._id

    @classmethod
    def from_dict(cls, data: Dict) -> 'UserSummary':
        return cls(
            _id=data.get('_id'),
            username=data.get('username'),
            avatar=data.get('avatar'),
            full_name=data.get('full_name')
        )


class UserRepository(BaseRepository):
    """
    users 콜렉션은 인증 서비스가 관리한다. 여기서는 조회와 시청 기록만 다룬다.
    """

    COLLECTION_NAME = 'users'
    document_class = UserSummary

    def add_to_watch_history(self, user_id: ObjectId, video_id: ObjectId) -> bool:
        result = self.collection.update_one(
            {'_id': user_id},
            {'$addToSet': {'watch_history': video_id}}
        )
        return result.matched_count > 0
