import copy
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from mongo_store import PortfolioStore


class FakeUsersCollection:
    """In-memory stand-in for the Motor collection calls the store makes."""

    def __init__(self, docs: Optional[List[Dict[str, Any]]] = None):
        self.docs: List[Dict[str, Any]] = [copy.deepcopy(d) for d in docs or []]
        self.insert_calls = 0

    def _matches(self, doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
        return all(doc.get(k) == v for k, v in query.items())

    async def find_one(self, query: Dict[str, Any]):
        for doc in self.docs:
            if self._matches(doc, query):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, doc: Dict[str, Any]):
        self.insert_calls += 1
        if any(d["_id"] == doc["_id"] for d in self.docs):
            raise ValueError("duplicate _id")
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def count_documents(self, query: Dict[str, Any]) -> int:
        return sum(1 for d in self.docs if self._matches(d, query))


class FakeClient:
    def __init__(self, users: FakeUsersCollection):
        self.users = users
        self.closed = False
        self.db_names: List[str] = []

    def __getitem__(self, db_name: str):
        self.db_names.append(db_name)
        return {"users": self.users}

    def close(self):
        self.closed = True


@pytest.fixture
def users():
    return FakeUsersCollection()


@pytest.fixture
def client(users):
    return FakeClient(users)


@pytest.fixture
def store(client):
    return PortfolioStore(uri=None, db_name="personalwebsite", client=client)
