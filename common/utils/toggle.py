from datetime import datetime, timezone
from typing import Dict

from pymongo.errors import DuplicateKeyError

from common.utils.logging_utils import get_logger

logger = get_logger('toggle')


def toggle_presence(collection, pair_filter: Dict) -> bool:
    """
    (target, principal) 쌍의 존재 여부를 뒤집는다.

    Present -> Absent: 조건부 삭제
    Absent -> Present: unique index 로 보호되는 upsert

    Returns:
        bool: 토글 이후 쌍이 존재하면 True
    """
    removed = collection.find_one_and_delete(pair_filter)
    if removed is not None:
        return False

    try:
        collection.update_one(
            pair_filter,
            {'$setOnInsert': {'created_at': datetime.now(timezone.utc)}},
            upsert=True
        )
    except DuplicateKeyError:
        #NOTE: 동시에 들어온 다른 토글이 먼저 생성함 -> 이미 Present 상태
        logger.info(f"Concurrent toggle already created pair: {pair_filter}")

    return True
