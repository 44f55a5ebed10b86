import asyncio

import pytest

from core.catalog import SAMPLE_ITEMS
from scripts.reset_inventory import reset
from scripts.seed_inventory import main, seed
from storage import DatabaseInventoryStorage

pytestmark = pytest.mark.anyio


async def _count(url):
    store = DatabaseInventoryStorage(url)
    await store.init()
    try:
        return len(await store.list_items())
    finally:
        await store.close()


async def test_seed_then_reset(anyio_backend, sqlite_url):
    assert await seed(sqlite_url, if_empty=True, dry_run=False) == len(SAMPLE_ITEMS)
    assert await seed(sqlite_url, if_empty=True, dry_run=False) == 0
    assert await _count(sqlite_url) == len(SAMPLE_ITEMS)

    assert await reset(sqlite_url) == len(SAMPLE_ITEMS)
    assert await _count(sqlite_url) == 0


async def test_seed_dry_run_writes_nothing(anyio_backend, sqlite_url):
    assert await seed(sqlite_url, if_empty=False, dry_run=True) == 0
    assert await _count(sqlite_url) == 0


def test_seed_main_accepts_a_sync_driver_url(anyio_backend, sqlite_url):
    sync_url = sqlite_url.replace("sqlite+aiosqlite://", "sqlite://", 1)

    main(["--database-url", sync_url])

    assert asyncio.run(_count(sqlite_url)) == len(SAMPLE_ITEMS)
