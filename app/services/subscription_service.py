from typing import List

from bson import ObjectId

import common.extensions as extensions
from app.dto.subscription import SubscribedChannelDto, SubscriberDto, ToggleSubscriptionResponseDto
from app.models.mongodb.pipelines import channel_subscribers_pipeline, subscribed_channels_pipeline
from app.models.mongodb.subscription import SubscriptionRepository
from app.models.mongodb.user import UserRepository
from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils.logging_utils import get_logger
from common.utils.object_id import to_object_id
from common.utils.ownership import is_owner

logger = get_logger('subscription_service')


class SubscriptionService:

    @staticmethod
    def toggle_subscription(channel_id: str, user_id: ObjectId) -> ToggleSubscriptionResponseDto:
        channel_oid = to_object_id(channel_id, 'channel_id')

        if is_owner(channel_oid, user_id):
            raise BusinessError(APIError.SELF_SUBSCRIPTION)

        if not UserRepository(extensions.mongo_db).exists({'_id': channel_oid}):
            raise BusinessError(APIError.CHANNEL_NOT_FOUND)

        subscribed = SubscriptionRepository(extensions.mongo_db).toggle(user_id, channel_oid)

        logger.info(f"Subscription subscriber={user_id} channel={channel_oid} -> {subscribed}")

        return ToggleSubscriptionResponseDto(subscribed=subscribed)

    @staticmethod
    def get_user_channel_subscribers(channel_id: str) -> List[SubscriberDto]:
        channel_oid = to_object_id(channel_id, 'channel_id')

        docs = SubscriptionRepository(extensions.mongo_db).aggregate(channel_subscribers_pipeline(channel_oid))
        return [SubscriberDto.from_doc(doc) for doc in docs]

    @staticmethod
    def get_subscribed_channels(subscriber_id: str) -> List[SubscribedChannelDto]:
        subscriber_oid = to_object_id(subscriber_id, 'subscriber_id')

        docs = SubscriptionRepository(extensions.mongo_db).aggregate(subscribed_channels_pipeline(subscriber_oid))
        return [SubscribedChannelDto.from_doc(doc) for doc in docs]
