"""Shared fixtures - in-memory DuckDB and wired registry objects."""

import duckdb
import pytest

from app.container import container
from app.repositories.common.kv import KeyValueRepository
from app.repositories.db import init_tables
from app.repositories.registry.photo import PhotoRepository
from app.services.registry import FormState, MemberStore, RegistryService


@pytest.fixture
def conn():
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def kv(conn):
    return KeyValueRepository(conn)


@pytest.fixture
def photos(conn):
    return PhotoRepository(conn)


@pytest.fixture
def store(kv):
    store = MemberStore(kv)
    store.load()
    return store


@pytest.fixture
def service(store, photos):
    return RegistryService(store=store, photos=photos)


@pytest.fixture
def state():
    return FormState()


@pytest.fixture
def app_container(conn):
    container.reset()
    container.init(conn)
    yield container
    container.reset()

