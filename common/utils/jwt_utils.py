import jwt
import datetime
from flask import current_app
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from common.exception.exceptions import BusinessError
from common.enum.error_code import APIError

def get_jwt_config():
    try:
        secret_key = current_app.config.get('JWT_SECRET_KEY')
        algorithm = current_app.config.get('JWT_ALGORITHM', 'HS256')

        if not secret_key:
            raise BusinessError(APIError.INTERNAL_SERVER_ERROR, "JWT secret key is not configured.")

        return secret_key, algorithm
    except RuntimeError:
        raise BusinessError(APIError.INTERNAL_SERVER_ERROR, "Application context is not available.")

def encode_token(user_id, expires_delta, token_type):
    secret_key, algorithm = get_jwt_config()

    current_time = datetime.datetime.now(datetime.timezone.utc)

    payload = {
        "sub": str(user_id),
        "iat": current_time,
        "exp": current_time + expires_delta,
        "type": token_type
    }

    return jwt.encode(payload, secret_key, algorithm=algorithm)

def decode_token(encoded_token):
    secret_key, algorithm = get_jwt_config()

    try:
        return jwt.decode(encoded_token, secret_key, algorithms=[algorithm])

    except ExpiredSignatureError:
        raise BusinessError(APIError.AUTH_TOKEN_EXPIRED)

    except InvalidTokenError:
        raise BusinessError(APIError.AUTH_INVALID_TOKEN)

def create_access_token(user_id):
    expires = current_app.config.get('JWT_ACCESS_TOKEN_EXPIRES', datetime.timedelta(hours=1))
    return encode_token(user_id, expires, 'access')

def decode_access_token(encoded_token):
    payload = decode_token(encoded_token)

    if payload.get('type') != 'access':
        raise BusinessError(APIError.AUTH_INVALID_TOKEN)

    return payload
