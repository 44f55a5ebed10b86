import asyncio

import pytest
from sqlalchemy import text

from core.catalog import SAMPLE_ITEMS
from core.errors import StorageError
from schemas.inventory import validate_insert
from storage import DatabaseInventoryStorage
from tests.factories import make_payload

pytestmark = pytest.mark.anyio


async def test_ids_are_auto_incrementing_integers(database_store):
    first = await database_store.create_item(validate_insert(make_payload()))
    second = await database_store.create_item(validate_insert(make_payload()))

    assert isinstance(first.id, int)
    assert second.id > first.id


async def test_ids_are_not_reused_after_delete(database_store):
    first = await database_store.create_item(validate_insert(make_payload()))
    second = await database_store.create_item(validate_insert(make_payload()))
    await database_store.delete_item(str(second.id))

    third = await database_store.create_item(validate_insert(make_payload()))
    assert third.id > second.id
    assert first.id < second.id


async def test_concurrent_adjustments_are_not_lost(database_store):
    item = await database_store.create_item(validate_insert(make_payload(quantity=5)))

    await asyncio.gather(
        database_store.adjust_stock(str(item.id), 1),
        database_store.adjust_stock(str(item.id), 1),
    )

    assert (await database_store.get_item(str(item.id))).quantity == 7


async def test_many_concurrent_adjustments_clamp_at_zero(database_store):
    item = await database_store.create_item(validate_insert(make_payload(quantity=3)))

    await asyncio.gather(*(database_store.adjust_stock(str(item.id), -1) for _ in range(6)))

    assert (await database_store.get_item(str(item.id))).quantity == 0


async def test_malformed_or_out_of_range_ids_are_not_found(database_store):
    await database_store.create_item(validate_insert(make_payload()))

    for bad in ("abc", "", "0", "-1", str(2**40), "1.5"):
        assert await database_store.get_item(bad) is None
        assert await database_store.update_item(bad, validate_insert(make_payload())) is None
        assert await database_store.adjust_stock(bad, 1) is None
        assert await database_store.delete_item(bad) is False
    assert len(await database_store.list_items()) == 1


async def test_table_layout_uses_camel_case_threshold_column(database_store):
    item = await database_store.create_item(validate_insert(make_payload(lowStockThreshold=9)))

    async with database_store.engine.connect() as conn:
        row = (
            await conn.execute(text('SELECT "lowStockThreshold" FROM inventory_items WHERE id = :id'), {"id": item.id})
        ).one()
    assert row[0] == 9


async def test_seed_only_fills_an_empty_table(anyio_backend, sqlite_url):
    store = DatabaseInventoryStorage(sqlite_url, seed=True)
    await store.init()
    try:
        assert len(await store.list_items()) == len(SAMPLE_ITEMS)
        assert await store.seed_if_empty() == 0
    finally:
        await store.close()

    # reopening the same file does not duplicate the sample rows
    again = DatabaseInventoryStorage(sqlite_url, seed=True)
    await again.init()
    try:
        assert len(await again.list_items()) == len(SAMPLE_ITEMS)
    finally:
        await again.close()


async def test_driver_failures_surface_as_storage_error(database_store):
    async with database_store.engine.begin() as conn:
        await conn.execute(text("DROP TABLE inventory_items"))

    with pytest.raises(StorageError):
        await database_store.list_items()
    with pytest.raises(StorageError):
        await database_store.create_item(validate_insert(make_payload()))
