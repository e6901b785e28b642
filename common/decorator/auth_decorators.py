from functools import wraps
from flask import request, g

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils import decode_access_token
from common.utils.object_id import is_valid_object_id, to_object_id
import common.extensions as extensions

BLACKLIST_KEY_PREFIX = 'vidtube:blacklist:'


def _authenticate():
    auth_header = request.headers.get('Authorization')

    if not auth_header or not auth_header.startswith("Bearer "):
        raise BusinessError(APIError.AUTH_INVALID_TOKEN)

    token = auth_header.split(" ", 1)[1].strip()

    redis_client = extensions.redis_client
    if redis_client and redis_client.exists(f"{BLACKLIST_KEY_PREFIX}{token}"):
        raise BusinessError(APIError.AUTH_INVALID_TOKEN)

    payload = decode_access_token(token)

    subject = payload.get('sub')
    if not is_valid_object_id(subject):
        raise BusinessError(APIError.AUTH_INVALID_TOKEN)

    g.user_id = to_object_id(subject)


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        _authenticate()
        return f(*args, **kwargs)
    return decorated_function

def public_route(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        g.user_id = None
        return f(*args, **kwargs)
    return decorated_function
