# conftest.py
"""
테스트 공용 픽스처.

Firestore 에 연결하지 않도록 'users' 컬렉션 API 중 이 프로젝트가 사용하는 부분만
메모리 상에서 흉내 내는 FakeCollection 을 제공합니다.
"""
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from firebase_admin import firestore

from user_functions import create_app
from user_functions.services.firestore_service import UserStore


class FakeDocumentReference:
    def __init__(self, collection, doc_id):
        self._collection = collection
        self.id = doc_id

    def update(self, fields):
        if self.id not in self._collection.docs:
            raise RuntimeError(f"No document to update: {self.id}")
        self._collection.docs[self.id].update(fields)

    def delete(self):
        self._collection.docs.pop(self.id, None)


class FakeDocumentSnapshot:
    def __init__(self, reference, data):
        self.reference = reference
        self.id = reference.id
        self._data = dict(data)

    def to_dict(self):
        return dict(self._data)


class FakeQuery:
    def __init__(self, collection, field, value, limit=None):
        self._collection = collection
        self._field = field
        self._value = value
        self._limit = limit

    def limit(self, count):
        return FakeQuery(self._collection, self._field, self._value, count)

    def stream(self):
        if self._collection.fail_with is not None:
            raise self._collection.fail_with
        matches = [
            FakeDocumentSnapshot(FakeDocumentReference(self._collection, doc_id), data)
            for doc_id, data in self._collection.docs.items()
            if data.get(self._field) == self._value
        ]
        if self._limit is not None:
            matches = matches[:self._limit]
        return iter(matches)


class FakeCollection:
    """insert 순서를 유지하는 메모리 기반 컬렉션. SERVER_TIMESTAMP 는 현재 UTC 시각으로 치환됩니다."""
    def __init__(self):
        self.docs = {}
        self.fail_with = None

    def add(self, data):
        if self.fail_with is not None:
            raise self.fail_with
        doc_id = uuid.uuid4().hex[:20]
        stored = {
            key: (datetime.now(timezone.utc) if value is firestore.SERVER_TIMESTAMP else value)
            for key, value in data.items()
        }
        self.docs[doc_id] = stored
        return datetime.now(timezone.utc), FakeDocumentReference(self, doc_id)

    def where(self, field, op, value):
        assert op == '==', "only equality filters are used"
        return FakeQuery(self, field, value)

    def backdate(self, doc_id, seconds):
        """테스트용: createdAt 을 주어진 초만큼 과거로 옮깁니다."""
        self.docs[doc_id]['createdAt'] -= timedelta(seconds=seconds)


@pytest.fixture
def users_collection():
    return FakeCollection()


@pytest.fixture
def user_store(users_collection):
    return UserStore(users_collection)


@pytest.fixture
def app(user_store):
    return create_app('testing', store=user_store)


@pytest.fixture
def client(app):
    return app.test_client()
