import pytest
from bson import ObjectId

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils.object_id import is_valid_object_id, to_object_id


@pytest.mark.parametrize('value', [
    '507f1f77bcf86cd799439011',
    'ABCDEFabcdef012345678901',
    ObjectId(),
])
def test_valid_object_ids(value):
    assert is_valid_object_id(value)


@pytest.mark.parametrize('value', [
    None,
    '',
    'abc',
    '507f1f77bcf86cd79943901',
    '507f1f77bcf86cd7994390111',
    'zzzzzzzzzzzzzzzzzzzzzzzz',
    'twelve-bytes',
    b'123456789012',
    12345,
])
def test_invalid_object_ids(value):
    assert not is_valid_object_id(value)


def test_to_object_id_converts_string():
    raw = '507f1f77bcf86cd799439011'
    assert to_object_id(raw) == ObjectId(raw)


def test_to_object_id_passes_object_id_through():
    oid = ObjectId()
    assert to_object_id(oid) is oid


def test_to_object_id_raises_invalid_id_with_field_name():
    with pytest.raises(BusinessError) as exc_info:
        to_object_id('not-an-id', 'video_id')

    assert exc_info.value.error_enum is APIError.INVALID_ID
    assert exc_info.value.status == 400
    assert 'video_id' in exc_info.value.message
