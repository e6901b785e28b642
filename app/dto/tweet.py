from dataclasses import dataclass
from typing import Optional

from app.dto.common import id_str, iso


@dataclass
class TweetDto:
    tweet_id: str
    content: str
    owner_id: str
    created_at: Optional[str]
    updated_at: Optional[str]

    def to_dict(self):
        return {
            'tweet_id': self.tweet_id,
            'content': self.content,
            'owner_id': self.owner_id,
            'created_at': self.created_at,
            'updated_at': self.updated_at
        }

    @classmethod
    def from_tweet(cls, tweet) -> 'TweetDto':
        return cls(
            tweet_id=id_str(tweet.id),
            content=tweet.content,
            owner_id=id_str(tweet.owner),
            created_at=iso(tweet.created_at),
            updated_at=iso(tweet.updated_at)
        )
