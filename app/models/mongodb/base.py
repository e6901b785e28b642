from datetime import datetime, timezone
from typing import Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument

from common.utils.pagination import Page, paginate


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseRepository:
    """
    콜렉션 공통 CRUD / aggregation 래퍼
    하위 클래스는 COLLECTION_NAME, document_class, ensure_indexes 를 정의한다.
    """

    COLLECTION_NAME = None
    document_class = None

    def __init__(self, db):
        self.collection = db[self.COLLECTION_NAME]

    def ensure_indexes(self):
        pass

    def _to_document(self, doc: Optional[Dict]):
        if doc is None:
            return None
        if self.document_class is None:
            return doc
        return self.document_class.from_dict(doc)

    def find_by_id(self, _id: ObjectId):
        return self._to_document(self.collection.find_one({'_id': _id}))

    def find_one(self, filter_dict: Dict):
        return self._to_document(self.collection.find_one(filter_dict))

    def find(self, filter_dict: Dict, sort: Optional[List] = None) -> List:
        cursor = self.collection.find(filter_dict)
        if sort:
            cursor = cursor.sort(sort)
        return [self._to_document(doc) for doc in cursor]

    def exists(self, filter_dict: Dict) -> bool:
        return self.collection.count_documents(filter_dict, limit=1) > 0

    def create(self, document):
        doc = document.to_dict()
        doc.pop('_id', None)
        result = self.collection.insert_one(doc)
        doc['_id'] = result.inserted_id
        return self._to_document(doc)

    def update_by_id(self, _id: ObjectId, patch: Dict):
        """$set 패치를 적용하고 갱신된 도큐먼트를 반환한다."""
        update = {'$set': dict(patch, updated_at=utcnow())}
        doc = self.collection.find_one_and_update(
            {'_id': _id},
            update,
            return_document=ReturnDocument.AFTER
        )
        return self._to_document(doc)

    def delete_by_id(self, _id: ObjectId):
        return self._to_document(self.collection.find_one_and_delete({'_id': _id}))

    def aggregate(self, pipeline: List[Dict]) -> List[Dict]:
        return list(self.collection.aggregate(pipeline))

    def aggregate_paginate(self, pipeline: List[Dict], page: int, limit: int) -> Page:
        return paginate(self.collection, pipeline, page, limit)
