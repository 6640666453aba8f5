"""
Shared fixtures: an in-memory stand-in for the MongoDB server and a clean
process-wide state (settings cache and global container) around every test.
"""
import copy
from types import SimpleNamespace

import pytest
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from userapp.core.config import reset_settings
from userapp.di.container import shutdown_container


def _matches(doc, query):
    return all(doc.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key, direction=1):
        self._docs = sorted(self._docs, key=lambda d: d.get(key), reverse=direction < 0)
        return self

    def limit(self, n):
        if n:
            self._docs = self._docs[:n]
        return self

    def __iter__(self):
        return iter([copy.deepcopy(d) for d in self._docs])


class FakeCollection:
    def __init__(self, name):
        self.name = name
        self.docs = []
        self.unique_fields = set()

    def create_index(self, keys, unique=False):
        if unique:
            self.unique_fields.add(keys[0][0])
        return keys[0][0]

    def _check_unique(self, doc, ignore=None):
        for field in self.unique_fields:
            for other in self.docs:
                if other is not ignore and field in doc and other.get(field) == doc[field]:
                    raise DuplicateKeyError(f"E11000 duplicate key error: {field}")

    def insert_one(self, doc):
        self._check_unique(doc)
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc.get("id"))

    def find_one(self, query):
        for doc in self.docs:
            if _matches(doc, query):
                return copy.deepcopy(doc)
        return None

    def find(self, query=None):
        return FakeCursor([d for d in self.docs if _matches(d, query or {})])

    def find_one_and_update(self, query, update, return_document=None):
        for doc in self.docs:
            if _matches(doc, query):
                changes = update.get("$set", {})
                self._check_unique(changes, ignore=doc)
                doc.update(copy.deepcopy(changes))
                return copy.deepcopy(doc)
        return None

    def delete_one(self, query):
        for doc in self.docs:
            if _matches(doc, query):
                self.docs.remove(doc)
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    def count_documents(self, query, limit=None):
        count = sum(1 for d in self.docs if _matches(d, query))
        if limit:
            count = min(count, limit)
        return count


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection(name))


class FakeMongoServer:
    """Plays the part of a MongoDB deployment; hands out fake clients."""

    def __init__(self):
        self.reachable = True
        self.databases = {}
        self.clients = []

    def client(self, uri, **kwargs):
        fake = FakeMongoClient(self, uri, kwargs)
        self.clients.append(fake)
        return fake

    def collection(self, db_name, collection_name):
        return self.databases.setdefault(db_name, FakeDatabase())[collection_name]

    @property
    def open_clients(self):
        return [c for c in self.clients if not c.closed]


class FakeMongoClient:
    def __init__(self, server, uri, options):
        self.server = server
        self.uri = uri
        self.options = options
        self.closed = False
        self.admin = SimpleNamespace(command=self._command)

    def _command(self, name):
        if not self.server.reachable:
            raise ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")
        return {"ok": 1.0}

    def __getitem__(self, db_name):
        return self.server.databases.setdefault(db_name, FakeDatabase())

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def clean_process_state():
    reset_settings()
    yield
    shutdown_container()
    reset_settings()


@pytest.fixture
def mongo_env(monkeypatch):
    """Environment for a valid configuration."""
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017")
    monkeypatch.setenv("DB_NAME", "userapp_test")
    monkeypatch.setenv("USERS_COLLECTION", "users")
    monkeypatch.setenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "100")
    monkeypatch.setenv("APP_PORT", "8080")
    monkeypatch.delenv("TIMEZONE", raising=False)
    monkeypatch.delenv("APP_HOST", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


@pytest.fixture
def fake_mongo(monkeypatch):
    """Route every MongoClient created by the app to an in-memory server."""
    server = FakeMongoServer()
    monkeypatch.setattr("userapp.infrastructure.db.mongo_connection.MongoClient", server.client)
    return server


@pytest.fixture
def users_collection():
    return FakeCollection("users")
