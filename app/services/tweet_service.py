from typing import List

from bson import ObjectId

import common.extensions as extensions
from app.dto.tweet import TweetDto
from app.models.mongodb.tweet import Tweet, TweetRepository
from app.models.mongodb.user import UserRepository
from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils.logging_utils import get_logger
from common.utils.object_id import to_object_id
from common.utils.ownership import authorize_owner

logger = get_logger('tweet_service')


def _required_content(content: str) -> str:
    content = (content or '').strip()
    if not content:
        raise BusinessError(APIError.INVALID_INPUT_VALUE, "Content is required")
    return content


class TweetService:

    @staticmethod
    def _find_owned(tweet_id: ObjectId, user_id: ObjectId) -> Tweet:
        tweet = TweetRepository(extensions.mongo_db).find_by_id(tweet_id)
        if not tweet:
            raise BusinessError(APIError.TWEET_NOT_FOUND)

        authorize_owner(tweet.owner, user_id, APIError.TWEET_FORBIDDEN)
        return tweet

    @staticmethod
    def create_tweet(user_id: ObjectId, content: str) -> TweetDto:
        content = _required_content(content)

        tweet = TweetRepository(extensions.mongo_db).create(Tweet(content=content, owner=user_id))

        logger.info(f"Tweet {tweet.id} created by {user_id}")

        return TweetDto.from_tweet(tweet)

    @staticmethod
    def get_user_tweets(user_id: str) -> List[TweetDto]:
        owner_oid = to_object_id(user_id, 'user_id')
        if not UserRepository(extensions.mongo_db).exists({'_id': owner_oid}):
            raise BusinessError(APIError.USER_NOT_FOUND)

        tweets = TweetRepository(extensions.mongo_db).find_by_owner(owner_oid)
        return [TweetDto.from_tweet(tweet) for tweet in tweets]

    @staticmethod
    def update_tweet(tweet_id: str, user_id: ObjectId, content: str) -> TweetDto:
        tweet_oid = to_object_id(tweet_id, 'tweet_id')
        content = _required_content(content)
        TweetService._find_owned(tweet_oid, user_id)

        updated = TweetRepository(extensions.mongo_db).update_by_id(tweet_oid, {'content': content})
        if not updated:
            raise BusinessError(APIError.TWEET_NOT_FOUND)

        return TweetDto.from_tweet(updated)

    @staticmethod
    def delete_tweet(tweet_id: str, user_id: ObjectId):
        tweet_oid = to_object_id(tweet_id, 'tweet_id')
        TweetService._find_owned(tweet_oid, user_id)

        if not TweetRepository(extensions.mongo_db).delete_by_id(tweet_oid):
            raise BusinessError(APIError.TWEET_NOT_FOUND)

        logger.info(f"Tweet {tweet_oid} deleted")
