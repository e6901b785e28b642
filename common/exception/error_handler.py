from flask import jsonify
from pymongo.errors import DuplicateKeyError, PyMongoError
from werkzeug.exceptions import HTTPException, UnprocessableEntity

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils.logging_utils import get_logger

logger = get_logger('error_handler')

_HTTP_ERROR_CODES = {
    404: APIError.RESOURCE_NOT_FOUND,
    405: APIError.METHOD_NOT_ALLOWED,
}


def error_body(status, message, code, errors=None):
    body = {
        "status_code": status,
        "data": None,
        "message": message,
        "success": False,
        "code": code,
    }
    if errors:
        body["errors"] = errors
    return jsonify(body), status


def register_error_handlers(app):
    @app.errorhandler(BusinessError)
    def handle_business_error(e):
        return error_body(e.error_enum.status, e.message, e.error_enum.code, e.errors)

    @app.errorhandler(UnprocessableEntity)
    def handle_validation_error(e):
        #NOTE: flask-smorest 요청 검증 실패(422)는 InvalidArgument(400)로 통일
        messages = (getattr(e, 'data', None) or {}).get('messages')
        error = APIError.INVALID_INPUT_VALUE
        return error_body(error.status, error.message, error.code, messages)

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        error = _HTTP_ERROR_CODES.get(e.code)
        if error is None:
            error = APIError.INVALID_INPUT_VALUE if e.code < 500 else APIError.INTERNAL_SERVER_ERROR
        return error_body(e.code, e.description or error.message, error.code)

    @app.errorhandler(DuplicateKeyError)
    def handle_duplicate_key_error(e):
        logger.warning(f"Duplicate key: {e.details}")
        error = APIError.DUPLICATE_RESOURCE
        return error_body(error.status, error.message, error.code)

    @app.errorhandler(PyMongoError)
    def handle_db_error(e):
        logger.exception(f"MongoDB operation failed: {e}")
        error = APIError.DB_ERROR
        return error_body(error.status, error.message, error.code)

    @app.errorhandler(Exception)
    def handle_internal_error(e):
        logger.exception(f"Unhandled error: {e}")
        error = APIError.INTERNAL_SERVER_ERROR
        return error_body(error.status, error.message, error.code)
