import math
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Tuple

from flask import current_app

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

BSON_INT64_MAX = 2 ** 63 - 1


def _to_int(value) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def normalize_page_params(page=None, limit=None, default_limit: int = DEFAULT_LIMIT,
                          max_limit: Optional[int] = None) -> Tuple[int, int]:
    """
    page/limit 정규화
    - 누락 또는 정수가 아닌 값 -> 기본값 (page=1, limit=default_limit)
    - 1 미만 -> 1
    - max_limit 이 주어지면 limit 상한 적용
    - $skip = (page - 1) * limit 이 BSON int64 범위를 넘지 않도록 page 상한 적용
    """
    page_num = _to_int(page)
    limit_num = _to_int(limit)

    page_num = DEFAULT_PAGE if page_num is None else max(page_num, 1)
    limit_num = default_limit if limit_num is None else max(limit_num, 1)

    limit_num = min(limit_num, max_limit or BSON_INT64_MAX)
    page_num = min(page_num, BSON_INT64_MAX // limit_num + 1)

    return page_num, limit_num


@dataclass
class Page:
    items: List[Any] = field(default_factory=list)
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    total_items: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.limit) if self.limit else 0

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def prev_page(self) -> Optional[int]:
        return self.page - 1 if self.has_prev else None

    @property
    def next_page(self) -> Optional[int]:
        return self.page + 1 if self.has_next else None

    def map(self, mapper: Callable[[Any], Any]) -> 'Page':
        return replace(self, items=[mapper(item) for item in self.items])

    def to_dict(self) -> Dict:
        return {
            'items': [item.to_dict() if hasattr(item, 'to_dict') else item for item in self.items],
            'page': self.page,
            'limit': self.limit,
            'total_items': self.total_items,
            'total_pages': self.total_pages,
            'has_next': self.has_next,
            'has_prev': self.has_prev,
            'prev_page': self.prev_page,
            'next_page': self.next_page,
        }


def paginate(collection, pipeline: List[Dict], page: int, limit: int) -> Page:
    """
    pipeline 결과를 skip/limit 으로 자르고 전체 개수를 함께 계산한다.
    안정적인 결과를 위해 pipeline 에 결정적인 정렬 stage 가 포함되어야 한다.
    """
    page, limit = normalize_page_params(page, limit, default_limit=limit or DEFAULT_LIMIT)
    skip = (page - 1) * limit

    facet = {
        '$facet': {
            'items': [{'$skip': skip}, {'$limit': limit}],
            'total': [{'$count': 'count'}],
        }
    }

    result = list(collection.aggregate(list(pipeline) + [facet]))
    bucket = result[0] if result else {}

    items = bucket.get('items', [])
    total = bucket.get('total', [])
    total_items = total[0]['count'] if total else 0

    return Page(items=items, page=page, limit=limit, total_items=total_items)


def page_params(page=None, limit=None) -> Tuple[int, int]:
    """요청 page/limit 을 앱 설정(기본값, 상한) 기준으로 정규화"""
    return normalize_page_params(
        page,
        limit,
        default_limit=current_app.config.get('PAGINATION_DEFAULT_LIMIT', DEFAULT_LIMIT),
        max_limit=current_app.config.get('PAGINATION_MAX_LIMIT')
    )
