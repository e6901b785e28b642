from bson import ObjectId


def _create(client, headers, content):
    response = client.post('/api/v1/tweets/', json={'content': content}, headers=headers)
    assert response.status_code == 201
    return response.get_json()['data']


def test_tweet_lifecycle(client, db, alice, bob, auth_headers):
    alice_headers = auth_headers(alice)

    created = _create(client, alice_headers, 'hi')
    assert created['content'] == 'hi'
    assert created['owner_id'] == str(alice)

    listed = client.get(f'/api/v1/tweets/user/{alice}', headers=auth_headers(bob)).get_json()['data']
    assert [t['tweet_id'] for t in listed] == [created['tweet_id']]

    forbidden = client.patch(f"/api/v1/tweets/{created['tweet_id']}", json={'content': 'x'},
                             headers=auth_headers(bob))
    assert forbidden.status_code == 403
    assert forbidden.get_json()['code'] == 'T002'
    assert db['tweets'].find_one({'_id': ObjectId(created['tweet_id'])})['content'] == 'hi'

    deleted = client.delete(f"/api/v1/tweets/{created['tweet_id']}", headers=alice_headers)
    assert deleted.status_code == 200

    listed = client.get(f'/api/v1/tweets/user/{alice}', headers=alice_headers).get_json()['data']
    assert listed == []


def test_user_tweets_are_newest_first(client, alice, bob, auth_headers):
    headers = auth_headers(alice)
    first = _create(client, headers, 'first')
    second = _create(client, headers, 'second')
    _create(client, auth_headers(bob), 'not mine')

    listed = client.get(f'/api/v1/tweets/user/{alice}', headers=headers).get_json()['data']

    assert [t['tweet_id'] for t in listed] == [second['tweet_id'], first['tweet_id']]


def test_update_tweet_by_owner(client, alice, auth_headers):
    headers = auth_headers(alice)
    created = _create(client, headers, 'draft')

    response = client.patch(f"/api/v1/tweets/{created['tweet_id']}", json={'content': '  final  '},
                            headers=headers)

    assert response.status_code == 200
    assert response.get_json()['data']['content'] == 'final'


def test_blank_content_is_rejected(client, db, alice, auth_headers):
    response = client.post('/api/v1/tweets/', json={'content': '   '}, headers=auth_headers(alice))

    assert response.status_code == 400
    assert response.get_json()['code'] == 'C002'
    assert db['tweets'].count_documents({}) == 0


def test_missing_tweet(client, alice, auth_headers):
    response = client.delete(f'/api/v1/tweets/{ObjectId()}', headers=auth_headers(alice))

    assert response.status_code == 404
    assert response.get_json()['code'] == 'T001'


def test_invalid_user_id_on_listing(client, alice, auth_headers):
    response = client.get('/api/v1/tweets/user/nope', headers=auth_headers(alice))

    assert response.status_code == 400
    assert response.get_json()['code'] == 'C004'


def test_tweets_of_unknown_user(client, alice, auth_headers):
    response = client.get(f'/api/v1/tweets/user/{ObjectId()}', headers=auth_headers(alice))

    assert response.status_code == 404
    assert response.get_json()['code'] == 'U001'
