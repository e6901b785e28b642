from bson import ObjectId

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError


def is_owner(owner_id: ObjectId, principal_id: ObjectId) -> bool:
    if owner_id is None or principal_id is None:
        return False
    return ObjectId(owner_id) == ObjectId(principal_id)


def authorize_owner(owner_id: ObjectId, principal_id: ObjectId, error: APIError):
    """
    소유자 확인. 존재 확인 이후, 쓰기 작업 이전에 호출해야 한다.
    """
    if not is_owner(owner_id, principal_id):
        raise BusinessError(error)
