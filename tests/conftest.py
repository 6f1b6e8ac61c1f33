import itertools

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from articulos_core.config import Settings
from articulos_core.db import JsonRecordStore, MemoryRecordStore
from articulos_core.service import ArticuloService


@pytest.fixture
def db_path(tmp_path):
    """Ruta a un documento JSON temporal (todavía sin crear)."""
    return tmp_path / "data" / "db.json"


@pytest.fixture
def json_store(db_path):
    return JsonRecordStore(db_path)


@pytest.fixture
def memory_store():
    return MemoryRecordStore()


@pytest.fixture
def sequential_ids():
    """Generador determinístico: id0001, id0002, ..."""
    counter = itertools.count(1)
    return lambda: f"id{next(counter):04d}"


@pytest.fixture
def service(json_store, sequential_ids):
    return ArticuloService(json_store, sequential_ids)


@pytest.fixture
def settings(db_path):
    return Settings(db_path=str(db_path), cors_origins=[])


@pytest.fixture
def client(settings, json_store):
    """Cliente HTTP sobre una app con store temporal e ids aleatorios reales."""
    app = create_app(settings=settings, store=json_store)
    with TestClient(app) as c:
        yield c
