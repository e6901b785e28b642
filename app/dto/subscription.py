from dataclasses import dataclass
from typing import Dict, Optional

from app.dto.common import UserSummaryDto, id_str, iso


@dataclass
class ToggleSubscriptionResponseDto:
    subscribed: bool

    def to_dict(self):
        return {
            'subscribed': self.subscribed
        }


@dataclass
class SubscriberDto:
    subscription_id: str
    subscriber: Optional[UserSummaryDto]
    subscribed_at: Optional[str]

    def to_dict(self):
        return {
            'subscription_id': self.subscription_id,
            'subscriber': self.subscriber.to_dict() if self.subscriber else None,
            'subscribed_at': self.subscribed_at
        }

    @classmethod
    def from_doc(cls, doc: Dict) -> 'SubscriberDto':
        return cls(
            subscription_id=id_str(doc.get('_id')),
            subscriber=UserSummaryDto.from_doc(doc.get('subscriber')),
            subscribed_at=iso(doc.get('created_at'))
        )


@dataclass
class SubscribedChannelDto:
    subscription_id: str
    subscribed_channel: Optional[UserSummaryDto]
    subscribed_at: Optional[str]

    def to_dict(self):
        return {
            'subscription_id': self.subscription_id,
            'subscribed_channel': self.subscribed_channel.to_dict() if self.subscribed_channel else None,
            'subscribed_at': self.subscribed_at
        }

    @classmethod
    def from_doc(cls, doc: Dict) -> 'SubscribedChannelDto':
        return cls(
            subscription_id=id_str(doc.get('_id')),
            subscribed_channel=UserSummaryDto.from_doc(doc.get('subscribed_channel')),
            subscribed_at=iso(doc.get('created_at'))
        )
