import os

# Keep tests off any developer .env database
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("SEED_SAMPLE_DATA", "False")

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from main import create_app
from storage import DatabaseInventoryStorage, MemoryInventoryStorage


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'inventory.db'}"


@pytest.fixture
async def memory_store(anyio_backend):
    store = MemoryInventoryStorage(seed=False)
    await store.init()
    yield store
    await store.close()


@pytest.fixture
async def database_store(anyio_backend, sqlite_url):
    store = DatabaseInventoryStorage(sqlite_url)
    await store.init()
    yield store
    await store.close()


@pytest.fixture(params=["memory", "database"])
async def store(request, anyio_backend, sqlite_url):
    """Each contract test runs once per backend."""
    if request.param == "memory":
        s = MemoryInventoryStorage(seed=False)
    else:
        s = DatabaseInventoryStorage(sqlite_url)
    await s.init()
    yield s
    await s.close()


@pytest.fixture
def test_settings() -> Settings:
    s = Settings.from_env()
    s.storage_backend = "memory"
    s.seed_sample_data = False
    return s


@pytest.fixture
def client(test_settings):
    app = create_app(settings=test_settings, storage=MemoryInventoryStorage(seed=False))
    with TestClient(app) as c:
        yield c
