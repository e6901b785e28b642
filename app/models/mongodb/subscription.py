from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from bson import ObjectId
from pymongo import ASCENDING

from app.models.mongodb.base import BaseRepository, utcnow
from common.utils.toggle import toggle_presence


@dataclass
class Subscription:
    subscriber: ObjectId
    channel: ObjectId

    _id: Optional[ObjectId] = None
    created_at: datetime = field(default_factory=utcnow)

    def to_dict(self) -> Dict:
        doc = {
            'subscriber': self.subscriber,
            'channel': self.channel,
            'created_at': self.created_at
        }
        if self._id is not None:
            doc['_id'] = self._id
        return doc

    @classmethod
    def from_dict(cls, data: Dict) -> 'Subscription':
        return cls(
            _id=data.get('_id'),
            subscriber=data.get('subscriber'),
            channel=data.get('channel'),
            created_at=data.get('created_at')
        )


class SubscriptionRepository(BaseRepository):

    COLLECTION_NAME = 'subscriptions'
    document_class = Subscription

    def ensure_indexes(self):
        self.collection.create_index(
            [('subscriber', ASCENDING), ('channel', ASCENDING)],
            unique=True,
            name='uk_subscription_subscriber_channel'
        )
        self.collection.create_index('channel')

    @staticmethod
    def pair_filter(subscriber_id: ObjectId, channel_id: ObjectId) -> Dict:
        return {'subscriber': subscriber_id, 'channel': channel_id}

    def toggle(self, subscriber_id: ObjectId, channel_id: ObjectId) -> bool:
        return toggle_presence(self.collection, self.pair_filter(subscriber_id, channel_id))
