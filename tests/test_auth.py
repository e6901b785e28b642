from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from bson import ObjectId

import common.extensions as extensions
from common.utils.jwt_utils import encode_token


def _tweets_url(user_id):
    return f'/api/v1/tweets/user/{user_id}'


def _bearer(app, subject, expires=timedelta(minutes=5), token_type='access'):
    with app.app_context():
        token = encode_token(subject, expires, token_type)
    return {'Authorization': f'Bearer {token}'}


def test_missing_token_is_rejected(client, alice):
    response = client.get(_tweets_url(alice))

    assert response.status_code == 401
    assert response.get_json()['code'] == 'A002'


@pytest.mark.parametrize('header', ['Basic abc', 'Bearer', 'Bearer not.a.jwt', 'token'])
def test_malformed_authorization_header_is_rejected(client, alice, header):
    response = client.get(_tweets_url(alice), headers={'Authorization': header})

    assert response.status_code == 401
    assert response.get_json()['success'] is False


def test_expired_token_is_rejected(app, client, alice):
    response = client.get(_tweets_url(alice), headers=_bearer(app, alice, timedelta(seconds=-10)))

    assert response.status_code == 401
    assert response.get_json()['code'] == 'A001'


def test_non_access_token_is_rejected(app, client, alice):
    response = client.get(_tweets_url(alice), headers=_bearer(app, alice, token_type='refresh'))

    assert response.status_code == 401
    assert response.get_json()['code'] == 'A002'


def test_subject_must_be_object_id(app, client, alice):
    response = client.get(_tweets_url(alice), headers=_bearer(app, 'user-42'))

    assert response.status_code == 401


def test_blacklisted_token_is_rejected(app, client, alice, auth_headers):
    headers = auth_headers(alice)
    token = headers['Authorization'].split(' ', 1)[1]

    blacklist = MagicMock()
    blacklist.exists.return_value = 1
    previous = extensions.redis_client
    extensions.redis_client = blacklist
    try:
        response = client.get(_tweets_url(alice), headers=headers)
    finally:
        extensions.redis_client = previous

    assert response.status_code == 401
    assert response.get_json()['code'] == 'A002'
    blacklist.exists.assert_called_once_with(f'vidtube:blacklist:{token}')


def test_valid_token_reaches_handler(client, alice, auth_headers):
    response = client.get(_tweets_url(alice), headers=auth_headers(alice))

    assert response.status_code == 200
    assert response.get_json()['data'] == []


def test_authenticated_principal_is_token_subject(client, alice, auth_headers):
    response = client.post('/api/v1/tweets/', json={'content': 'hello'}, headers=auth_headers(alice))

    assert response.status_code == 201
    assert response.get_json()['data']['owner_id'] == str(alice)


def test_unknown_user_in_token_is_still_a_valid_principal(client, auth_headers):
    stranger = ObjectId()
    response = client.get(_tweets_url(stranger), headers=auth_headers(stranger))

    assert response.status_code == 200
