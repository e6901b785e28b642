from bson import ObjectId

from app.models.mongodb.pipelines import (
    channel_subscribers_pipeline,
    liked_videos_pipeline,
    subscribed_channels_pipeline,
    video_comments_pipeline,
    video_detail_pipeline,
    video_list_pipeline,
)
from common.utils.pipeline import collapse, contains, first_of, lookup, size_of, unwind

ALLOWED_USER_FIELDS = {'_id', 'username', 'avatar', 'full_name'}


def _stages(pipeline, name):
    return [stage[name] for stage in pipeline if name in stage]


def test_lookup_includes_sub_pipeline_only_when_given():
    assert lookup('users', 'owner', '_id', 'owner') == {
        '$lookup': {'from': 'users', 'localField': 'owner', 'foreignField': '_id', 'as': 'owner'}
    }
    stage = lookup('users', 'owner', '_id', 'owner', pipeline=[{'$project': {'username': 1}}])
    assert stage['$lookup']['pipeline'] == [{'$project': {'username': 1}}]


def test_collapse_keeps_row_and_unwind_drops_misses():
    assert collapse('owner') == {'$addFields': {'owner': first_of('owner')}}
    assert first_of('owner') == {'$arrayElemAt': ['$owner', 0]}
    assert unwind('owner') == {'$unwind': {'path': '$owner', 'preserveNullAndEmptyArrays': False}}


def test_size_and_contains_tolerate_missing_arrays():
    assert size_of('likes') == {'$size': {'$ifNull': ['$likes', []]}}
    principal = ObjectId()
    cond = contains(principal, 'likes.liked_by')['$cond']
    assert cond['if'] == {'$in': [principal, {'$ifNull': ['$likes.liked_by', []]}]}
    assert (cond['then'], cond['else']) == (True, False)


def _all_pipelines():
    return [
        video_list_pipeline(query='cat', owner_id=ObjectId()),
        video_detail_pipeline(ObjectId(), ObjectId()),
        video_comments_pipeline(ObjectId(), ObjectId()),
        channel_subscribers_pipeline(ObjectId()),
        subscribed_channels_pipeline(ObjectId()),
        liked_videos_pipeline(ObjectId()),
    ]


def test_video_list_defaults_to_published_newest_first():
    pipeline = video_list_pipeline()

    assert {'is_published': True} in _stages(pipeline, '$match')
    assert _stages(pipeline, '$sort') == [{'created_at': -1, '_id': -1}]
    assert collapse('owner_details') in pipeline
    assert pipeline[-1]['$project']['owner_details.username'] == 1


def test_video_list_search_is_escaped_and_case_insensitive():
    owner = ObjectId()
    pipeline = video_list_pipeline(query='a.b*', owner_id=owner)

    search = pipeline[0]['$match']['$or']
    assert search[0] == {'title': {'$regex': r'a\.b\*', '$options': 'i'}}
    assert search[1]['description']['$regex'] == r'a\.b\*'
    assert {'owner': owner} in _stages(pipeline, '$match')


def test_video_list_sort_uses_id_tiebreaker():
    pipeline = video_list_pipeline(sort_by='views', sort_type='asc')
    assert _stages(pipeline, '$sort') == [{'views': 1, '_id': 1}]

    pipeline = video_list_pipeline(sort_by='views', sort_type='desc')
    assert _stages(pipeline, '$sort') == [{'views': -1, '_id': -1}]


def test_video_list_ignores_unknown_sort_field():
    pipeline = video_list_pipeline(sort_by='password', sort_type='asc')
    assert _stages(pipeline, '$sort') == [{'created_at': -1, '_id': -1}]


def test_video_detail_counts_likes_and_subscribers():
    video_id, principal = ObjectId(), ObjectId()
    pipeline = video_detail_pipeline(video_id, principal)

    assert pipeline[0] == {'$match': {'_id': video_id}}

    lookups = _stages(pipeline, '$lookup')
    assert [(stage['from'], stage['as']) for stage in lookups] == [
        ('likes', 'likes'), ('users', 'owner'), ('subscriptions', 'owner_subscribers')
    ]
    assert lookups[2]['localField'] == 'owner._id'
    assert lookups[2]['foreignField'] == 'channel'

    fields = _stages(pipeline, '$addFields')[-1]
    assert fields['likes_count'] == size_of('likes')
    assert fields['is_liked'] == contains(principal, 'likes.liked_by')
    assert fields['owner_is_subscribed'] == contains(principal, 'owner_subscribers.subscriber')

    projected = pipeline[-1]['$project']
    assert 'likes' not in projected
    assert 'owner_subscribers' not in projected


def test_video_comments_newest_first_and_drops_ownerless():
    video_id = ObjectId()
    pipeline = video_comments_pipeline(video_id)

    assert pipeline[0] == {'$match': {'video': video_id}}
    assert _stages(pipeline, '$sort') == [{'created_at': -1, '_id': -1}]
    assert unwind('owner') in pipeline


def test_subscription_views_collapse_counterpart():
    channel = ObjectId()
    subscribers = channel_subscribers_pipeline(channel)
    assert subscribers[0] == {'$match': {'channel': channel}}
    assert collapse('subscriber') in subscribers

    subscriber = ObjectId()
    channels = subscribed_channels_pipeline(subscriber)
    assert channels[0] == {'$match': {'subscriber': subscriber}}
    assert collapse('subscribed_channel') in channels


def test_liked_videos_only_matches_video_likes_of_principal():
    principal = ObjectId()
    pipeline = liked_videos_pipeline(principal)

    assert pipeline[0] == {'$match': {'liked_by': principal, 'video': {'$exists': True}}}
    assert unwind('liked_video') in pipeline

    projection = pipeline[-1]['$project']
    assert projection['_id'] == 0
    assert projection['liked_at'] == '$created_at'
    assert projection['liked_video.owner'] == 1


def test_lookups_use_plain_field_joins():
    for pipeline in _all_pipelines():
        for stage in _stages(pipeline, '$lookup'):
            assert 'pipeline' not in stage


def test_joined_users_never_expose_private_fields():
    for pipeline in _all_pipelines():
        projection = pipeline[-1]['$project']
        for stage in _stages(pipeline, '$lookup'):
            if stage['from'] != 'users':
                continue
            joined = stage['as']
            assert joined not in projection
            exposed = {key.split('.', 1)[1] for key in projection if key.startswith(f'{joined}.')}
            assert exposed and exposed <= ALLOWED_USER_FIELDS
