from unittest.mock import MagicMock

import mongomock
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from app.models.mongodb.like import LikeRepository, LikeTarget
from app.models.mongodb.subscription import SubscriptionRepository
from common.utils.toggle import toggle_presence


def test_toggle_presence_flips_state():
    collection = mongomock.MongoClient().db.pairs
    pair = {'video': ObjectId(), 'liked_by': ObjectId()}

    assert toggle_presence(collection, pair) is True
    assert collection.count_documents(pair) == 1
    assert collection.find_one(pair)['created_at'] is not None

    assert toggle_presence(collection, pair) is False
    assert collection.count_documents(pair) == 0

    assert toggle_presence(collection, pair) is True
    assert collection.count_documents(pair) == 1


def test_toggle_presence_treats_concurrent_insert_as_present():
    collection = MagicMock()
    collection.find_one_and_delete.return_value = None
    collection.update_one.side_effect = DuplicateKeyError('E11000 duplicate key')

    assert toggle_presence(collection, {'channel': ObjectId(), 'subscriber': ObjectId()}) is True


def test_toggle_presence_upserts_with_set_on_insert():
    collection = MagicMock()
    collection.find_one_and_delete.return_value = None
    pair = {'tweet': ObjectId(), 'liked_by': ObjectId()}

    toggle_presence(collection, pair)

    args, kwargs = collection.update_one.call_args
    assert args[0] == pair
    assert set(args[1]) == {'$setOnInsert'}
    assert kwargs['upsert'] is True


def test_like_pairs_are_independent_per_target_kind():
    db = mongomock.MongoClient().db
    repository = LikeRepository(db)
    user = ObjectId()
    target_id = ObjectId()

    assert repository.toggle(LikeTarget.video(target_id), user) is True
    assert repository.toggle(LikeTarget.comment(target_id), user) is True

    assert repository.exists(repository.pair_filter(LikeTarget.video(target_id), user))
    assert repository.exists(repository.pair_filter(LikeTarget.comment(target_id), user))
    assert not repository.exists(repository.pair_filter(LikeTarget.tweet(target_id), user))
    assert db['likes'].count_documents(LikeTarget.video(target_id).to_filter()) == 1


def test_subscription_toggle_is_directional():
    db = mongomock.MongoClient().db
    repository = SubscriptionRepository(db)
    a, b = ObjectId(), ObjectId()

    assert repository.toggle(a, b) is True
    assert repository.exists(repository.pair_filter(a, b))
    assert not repository.exists(repository.pair_filter(b, a))
    assert db['subscriptions'].count_documents({'channel': b}) == 1
