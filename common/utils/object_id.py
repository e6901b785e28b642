from bson import ObjectId

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError


def is_valid_object_id(value) -> bool:
    if isinstance(value, ObjectId):
        return True
    if not isinstance(value, str):
        return False
    #NOTE: bson 은 12바이트 bytes 도 허용하므로 24자리 hex 문자열만 통과시킨다
    return len(value) == 24 and ObjectId.is_valid(value)


def to_object_id(value, field_name: str = 'id') -> ObjectId:
    if not is_valid_object_id(value):
        raise BusinessError(APIError.INVALID_ID, f"Invalid {field_name}")
    return value if isinstance(value, ObjectId) else ObjectId(value)
