import itertools

import pytest

from rutas_api import create_app
from rutas_api.config import Config
from rutas_api.services.ruta_service import RutaService
from rutas_api.services.store_service import DocumentStore
from rutas_api.services.zona_service import ZonaService


class FakeDocRef:
    def __init__(self, collection, doc_id):
        self.collection = collection
        self.id = doc_id

    def update(self, fields):
        if not fields:
            raise ValueError("Cannot update with an empty document.")
        if self.id not in self.collection.docs:
            raise KeyError(f"No document to update: {self.id}")
        self.collection.docs[self.id].update(fields)

    def delete(self):
        self.collection.docs.pop(self.id, None)


class FakeSnapshot:
    def __init__(self, ref, data):
        self.reference = ref
        self.id = ref.id
        self._data = dict(data)

    def to_dict(self):
        return dict(self._data)


class FakeQuery:
    def __init__(self, collection, field_filter):
        self.collection = collection
        self.field_filter = field_filter

    def stream(self):
        assert self.field_filter.op_string == "=="
        for snap in self.collection.stream():
            if snap.to_dict().get(self.field_filter.field_path) == self.field_filter.value:
                yield snap


class FakeCollection:
    """In-memory stand-in for a Firestore collection (insertion ordered)."""

    def __init__(self, name, ids):
        self.name = name
        self.docs = {}
        self._ids = ids

    def add(self, data):
        doc_id = f"doc{next(self._ids)}"
        self.docs[doc_id] = dict(data)
        return None, FakeDocRef(self, doc_id)

    def stream(self):
        for doc_id, data in list(self.docs.items()):
            yield FakeSnapshot(FakeDocRef(self, doc_id), data)

    def where(self, *, filter):
        return FakeQuery(self, filter)


class FakeFirestoreClient:
    def __init__(self):
        self.collections = {}
        self._ids = itertools.count(1)

    def collection(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name, self._ids)
        return self.collections[name]


class FakeConfig(Config):
    ID_MAX_ATTEMPTS = 3
    LOG_LEVEL = "DEBUG"


@pytest.fixture
def fake_client():
    return FakeFirestoreClient()


@pytest.fixture
def store(fake_client):
    return DocumentStore(fake_client)


@pytest.fixture
def zona_service(store):
    return ZonaService(store, FakeConfig)


@pytest.fixture
def ruta_service(store):
    return RutaService(store, FakeConfig)


@pytest.fixture
def app(store):
    app = create_app(FakeConfig, store=store)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def cfg():
    return FakeConfig
