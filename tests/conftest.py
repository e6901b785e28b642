from datetime import datetime, timezone
from unittest.mock import patch

import mongomock
import pytest
from bson import ObjectId

import common.extensions as extensions
from app import create_app
from common.utils.jwt_utils import create_access_token
from common.utils.media_storage import MediaStorage


@pytest.fixture(scope='session')
def app():
    with patch('app.MongoClient', mongomock.MongoClient):
        application = create_app('testing')
    yield application


@pytest.fixture
def db(app):
    database = extensions.mongo_db
    yield database
    for name in database.list_collection_names():
        database.drop_collection(name)


@pytest.fixture
def client(app, db):
    return app.test_client()


@pytest.fixture
def media_storage(tmp_path):
    previous = extensions.media_storage
    storage = MediaStorage(tmp_path / 'uploads', url_prefix='/media', probe_media_duration=False)
    extensions.media_storage = storage
    yield storage
    extensions.media_storage = previous


def _insert_user(db, username):
    user_id = ObjectId()
    db['users'].insert_one({
        '_id': user_id,
        'username': username,
        'full_name': username.title(),
        'avatar': f'/media/{username}.png',
        'email': f'{username}@example.com',
        'password': 'hashed-secret',
        'watch_history': [],
    })
    return user_id


@pytest.fixture
def alice(db):
    return _insert_user(db, 'alice')


@pytest.fixture
def bob(db):
    return _insert_user(db, 'bob')


@pytest.fixture
def auth_headers(app):
    def _headers(user_id):
        with app.app_context():
            token = create_access_token(user_id)
        return {'Authorization': f'Bearer {token}'}
    return _headers


@pytest.fixture
def make_video(db):
    def _make(owner, title='Intro', is_published=True, **extra):
        now = datetime.now(timezone.utc)
        doc = {
            'title': title,
            'description': f'{title} description',
            'video_file': {'url': '/media/v.mp4', 'storage_id': 'v.mp4'},
            'thumbnail': {'url': '/media/t.png', 'storage_id': 't.png'},
            'duration': 12.5,
            'views': 0,
            'is_published': is_published,
            'owner': owner,
            'created_at': now,
            'updated_at': now,
        }
        doc.update(extra)
        return db['videos'].insert_one(doc).inserted_id
    return _make
