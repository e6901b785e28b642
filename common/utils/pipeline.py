"""
MongoDB aggregation stage helpers

각 함수는 aggregation stage(dict) 하나를 반환한다.
리소스별 파이프라인 조합은 app/models/mongodb/pipelines.py 참고.
"""

from typing import Dict, List, Optional, Tuple

ASCENDING = 1
DESCENDING = -1


def match(filter_dict: Dict) -> Dict:
    return {'$match': filter_dict}


def lookup(from_collection: str, local_field: str, foreign_field: str, as_field: str,
           pipeline: Optional[List[Dict]] = None) -> Dict:
    stage = {
        'from': from_collection,
        'localField': local_field,
        'foreignField': foreign_field,
        'as': as_field,
    }
    if pipeline:
        stage['pipeline'] = pipeline
    return {'$lookup': stage}


def unwind(path: str, preserve_empty: bool = False) -> Dict:
    """
    join 결과 배열을 펼친다. preserve_empty=False 이면 매칭이 없는 row 는 제거된다.
    """
    return {
        '$unwind': {
            'path': f'${path}',
            'preserveNullAndEmptyArrays': preserve_empty,
        }
    }


def add_fields(fields: Dict) -> Dict:
    return {'$addFields': fields}


def project(fields: Dict) -> Dict:
    return {'$project': fields}


def sort(*keys: Tuple[str, int]) -> Dict:
    return {'$sort': {field: direction for field, direction in keys}}


def collapse(field: str) -> Dict:
    """
    단일 관계 join 결과를 첫 번째 원소 또는 부재로 축소한다.
    매칭이 없으면 필드가 빠질 뿐 parent row 는 유지된다.
    """
    return add_fields({field: first_of(field)})


def first_of(path: str) -> Dict:
    return {'$arrayElemAt': [f'${path}', 0]}


def size_of(path: str) -> Dict:
    return {'$size': {'$ifNull': [f'${path}', []]}}


def contains(value, path: str) -> Dict:
    """
    value 가 배열 path 에 포함되는지 여부 (value 가 None 이면 항상 False)
    """
    return {
        '$cond': {
            'if': {'$in': [value, {'$ifNull': [f'${path}', []]}]},
            'then': True,
            'else': False,
        }
    }
