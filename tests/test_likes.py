from unittest.mock import patch

from bson import ObjectId

from app.models.mongodb.like import LikeRepository


def _toggle(client, headers, kind, target_id):
    return client.post(f'/api/v1/likes/toggle/{kind}/{target_id}', headers=headers)


def test_video_like_toggles(client, db, alice, bob, make_video, auth_headers):
    video_id = make_video(alice)
    headers = auth_headers(bob)

    states = [_toggle(client, headers, 'v', video_id).get_json()['data']['is_liked'] for _ in range(3)]

    assert states == [True, False, True]
    assert db['likes'].count_documents({'video': video_id, 'liked_by': bob}) == 1


def test_comment_and_tweet_likes(client, db, alice, bob, auth_headers):
    comment_id = db['comments'].insert_one({'content': 'c', 'video': ObjectId(), 'owner': alice}).inserted_id
    tweet_id = db['tweets'].insert_one({'content': 't', 'owner': alice}).inserted_id
    headers = auth_headers(bob)

    assert _toggle(client, headers, 'c', comment_id).get_json()['data'] == {'is_liked': True}
    assert _toggle(client, headers, 't', tweet_id).get_json()['data'] == {'is_liked': True}

    assert db['likes'].count_documents({'comment': comment_id}) == 1
    assert db['likes'].count_documents({'tweet': tweet_id}) == 1
    assert db['likes'].count_documents({'video': {'$exists': True}}) == 0


def test_likes_are_per_user(client, db, alice, bob, make_video, auth_headers):
    video_id = make_video(alice)

    assert _toggle(client, auth_headers(alice), 'v', video_id).get_json()['data']['is_liked'] is True
    assert _toggle(client, auth_headers(bob), 'v', video_id).get_json()['data']['is_liked'] is True
    assert db['likes'].count_documents({'video': video_id}) == 2


def test_like_missing_targets(client, alice, auth_headers):
    headers = auth_headers(alice)

    assert _toggle(client, headers, 'v', ObjectId()).get_json()['code'] == 'V001'
    assert _toggle(client, headers, 'c', ObjectId()).get_json()['code'] == 'M001'
    assert _toggle(client, headers, 't', ObjectId()).get_json()['code'] == 'T001'


def test_like_invalid_id_never_touches_store(client, alice, auth_headers):
    with patch.object(LikeRepository, 'toggle') as toggle:
        response = _toggle(client, auth_headers(alice), 'v', '123')

    assert response.status_code == 400
    assert response.get_json()['code'] == 'C004'
    toggle.assert_not_called()


def test_liked_videos(client, db, alice, bob, make_video, auth_headers):
    cats = make_video(alice, 'Cats', views=7)
    orphan = make_video(ObjectId(), 'Orphan')
    headers = auth_headers(bob)
    comment_id = db['comments'].insert_one({'content': 'c', 'video': cats, 'owner': alice}).inserted_id

    _toggle(client, headers, 'v', cats)
    _toggle(client, headers, 'v', orphan)
    _toggle(client, headers, 'c', comment_id)
    _toggle(client, auth_headers(alice), 'v', cats)

    response = client.get('/api/v1/likes/videos', headers=headers)

    data = response.get_json()['data']
    assert response.status_code == 200
    assert [entry['liked_video']['video_id'] for entry in data] == [str(orphan), str(cats)]

    orphan_entry, cats_entry = data
    assert orphan_entry['liked_video']['owner'] is None
    assert cats_entry['liked_at'] is not None
    assert cats_entry['liked_video']['title'] == 'Cats'
    assert cats_entry['liked_video']['views'] == 7
    assert cats_entry['liked_video']['owner_id'] == str(alice)
    assert cats_entry['liked_video']['owner'] == {
        'user_id': str(alice),
        'username': 'alice',
        'avatar': '/media/alice.png',
        'full_name': 'Alice',
    }


def test_liked_videos_drop_deleted_videos(client, db, alice, bob, make_video, auth_headers):
    kept = make_video(alice, 'Kept')
    removed = make_video(alice, 'Removed')
    headers = auth_headers(bob)
    _toggle(client, headers, 'v', kept)
    _toggle(client, headers, 'v', removed)

    db['videos'].delete_one({'_id': removed})

    data = client.get('/api/v1/likes/videos', headers=headers).get_json()['data']

    assert [entry['liked_video']['video_id'] for entry in data] == [str(kept)]
    assert db['likes'].count_documents({'liked_by': bob}) == 2


def test_liked_videos_empty(client, alice, auth_headers):
    response = client.get('/api/v1/likes/videos', headers=auth_headers(alice))

    assert response.status_code == 200
    assert response.get_json()['data'] == []
