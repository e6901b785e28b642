from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


def id_str(value) -> Optional[str]:
    return str(value) if value is not None else None


def iso(value) -> Optional[str]:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


@dataclass
class ApiResponse:
    status_code: int
    data: Any
    message: str = 'Success'

    @property
    def success(self) -> bool:
        return self.status_code < 400

    def to_dict(self):
        data = self.data.to_dict() if hasattr(self.data, 'to_dict') else self.data
        return {
            'status_code': self.status_code,
            'data': data,
            'message': self.message,
            'success': self.success
        }


@dataclass
class UserSummaryDto:
    user_id: str
    username: Optional[str] = None
    avatar: Optional[str] = None
    full_name: Optional[str] = None
    subscribers_count: Optional[int] = None
    is_subscribed: Optional[bool] = None

    def to_dict(self):
        result = {
            'user_id': self.user_id,
            'username': self.username,
            'avatar': self.avatar
        }
        #NOTE: 뷰에 따라 채워지는 필드만 노출
        if self.full_name is not None:
            result['full_name'] = self.full_name
        if self.subscribers_count is not None:
            result['subscribers_count'] = self.subscribers_count
        if self.is_subscribed is not None:
            result['is_subscribed'] = self.is_subscribed
        return result

    @classmethod
    def from_doc(cls, doc: Optional[Dict]) -> Optional['UserSummaryDto']:
        if not doc:
            return None
        return cls(
            user_id=id_str(doc.get('_id')),
            username=doc.get('username'),
            avatar=doc.get('avatar'),
            full_name=doc.get('full_name'),
            subscribers_count=doc.get('subscribers_count'),
            is_subscribed=doc.get('is_subscribed')
        )
