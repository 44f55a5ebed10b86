import logging
from typing import List, Optional

from sqlalchemy import case, delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from core.catalog import MAX_QUANTITY, SAMPLE_ITEMS
from core.errors import StorageError
from db.database import create_db_and_tables, make_engine, make_session_maker
from db.inventory.item import InventoryItem as InventoryItemModel
from schemas.inventory import InventoryItemCreate, InventoryItemRead

logger = logging.getLogger(__name__)


INT_MAX = 2**31 - 1


def _parse_id(item_id) -> Optional[int]:
    # Keys are positive INTEGERs here; anything else cannot match a row.
    if isinstance(item_id, bool):
        return None
    try:
        pk = int(item_id) if isinstance(item_id, int) else int(str(item_id).strip())
    except (TypeError, ValueError):
        return None
    if pk < 1 or pk > INT_MAX:
        return None
    return pk


def _to_read(model: InventoryItemModel) -> InventoryItemRead:
    return InventoryItemRead(**model.to_schema)


class DatabaseInventoryStorage:
    """Relational store over the `inventory_items` table (SQLAlchemy asyncio)."""

    backend_name = "database"

    def __init__(self, database_url: str, echo: bool = False, seed: bool = False, engine: Optional[AsyncEngine] = None):
        self.engine = engine or make_engine(database_url, echo=echo)
        self.session_maker = make_session_maker(self.engine)
        self._seed = seed

    async def init(self) -> None:
        try:
            await create_db_and_tables(self.engine)
            if self._seed:
                await self.seed_if_empty()
        except SQLAlchemyError as e:
            logger.exception("Failed to initialise inventory database")
            raise StorageError(f"Failed to initialise database: {e}") from e

    async def close(self) -> None:
        await self.engine.dispose()

    async def seed_if_empty(self) -> int:
        async with self.session_maker() as db:
            count = (await db.execute(select(func.count()).select_from(InventoryItemModel))).scalar_one()
            if count:
                return 0
            for data in SAMPLE_ITEMS:
                payload = InventoryItemCreate.model_validate(data)
                db.add(InventoryItemModel(**payload.model_dump()))
            await db.commit()
        logger.info("Seeded %d sample inventory items", len(SAMPLE_ITEMS))
        return len(SAMPLE_ITEMS)

    async def list_items(self) -> List[InventoryItemRead]:
        try:
            async with self.session_maker() as db:
                res = await db.execute(select(InventoryItemModel).order_by(InventoryItemModel.id.asc()))
                return [_to_read(m) for m in res.scalars().all()]
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to list items: {e}") from e

    async def list_low_stock(self) -> List[InventoryItemRead]:
        try:
            async with self.session_maker() as db:
                res = await db.execute(
                    select(InventoryItemModel)
                    .where(InventoryItemModel.quantity <= InventoryItemModel.low_stock_threshold)
                    .order_by(InventoryItemModel.id.asc())
                )
                return [_to_read(m) for m in res.scalars().all()]
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to list low stock items: {e}") from e

    async def get_item(self, item_id) -> Optional[InventoryItemRead]:
        pk = _parse_id(item_id)
        if pk is None:
            return None
        try:
            async with self.session_maker() as db:
                model = await db.get(InventoryItemModel, pk)
                return _to_read(model) if model else None
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to fetch item {item_id}: {e}") from e

    async def create_item(self, payload: InventoryItemCreate) -> InventoryItemRead:
        try:
            async with self.session_maker() as db:
                model = InventoryItemModel(**payload.model_dump())
                db.add(model)
                await db.commit()
                await db.refresh(model)
                logger.info("Created inventory item %s (%s)", model.id, model.name)
                return _to_read(model)
        except (SQLAlchemyError, OverflowError) as e:
            raise StorageError(f"Failed to create item: {e}") from e

    async def update_item(self, item_id, payload: InventoryItemCreate) -> Optional[InventoryItemRead]:
        pk = _parse_id(item_id)
        if pk is None:
            return None
        try:
            async with self.session_maker() as db:
                model = await db.get(InventoryItemModel, pk)
                if not model:
                    return None
                for key, value in payload.model_dump().items():
                    setattr(model, key, value)
                await db.commit()
                await db.refresh(model)
                logger.info("Updated inventory item %s", pk)
                return _to_read(model)
        except (SQLAlchemyError, OverflowError) as e:
            raise StorageError(f"Failed to update item {item_id}: {e}") from e

    async def delete_item(self, item_id) -> bool:
        pk = _parse_id(item_id)
        if pk is None:
            return False
        try:
            async with self.session_maker() as db:
                res = await db.execute(delete(InventoryItemModel).where(InventoryItemModel.id == pk))
                await db.commit()
                removed = int(getattr(res, "rowcount", 0) or 0) > 0
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to delete item {item_id}: {e}") from e
        if removed:
            logger.info("Deleted inventory item %s", pk)
        return removed

    async def adjust_stock(self, item_id, delta: int) -> Optional[InventoryItemRead]:
        pk = _parse_id(item_id)
        if pk is None:
            return None
        col = InventoryItemModel.quantity
        # Past +/-MAX_QUANTITY every row lands on a bound anyway, and the
        # bounded delta can be bound as a 32-bit parameter.
        delta = max(-MAX_QUANTITY, min(MAX_QUANTITY, int(delta)))
        # Computed server-side in one statement so concurrent adjustments on
        # the same row serialise on the row lock instead of read-modify-write.
        # The CASE tests the headroom, so col + delta is only evaluated when
        # it fits the column.
        if delta >= 0:
            clamped = case((col > MAX_QUANTITY - delta, MAX_QUANTITY), else_=col + delta)
        else:
            clamped = case((col < -delta, 0), else_=col + delta)
        try:
            async with self.session_maker() as db:
                res = await db.execute(
                    update(InventoryItemModel)
                    .where(InventoryItemModel.id == pk)
                    .values(quantity=clamped)
                    .execution_options(synchronize_session=False)
                )
                if not int(getattr(res, "rowcount", 0) or 0):
                    await db.rollback()
                    return None
                # Same transaction: the row lock is still held, so this reads our own write.
                model = (
                    await db.execute(
                        select(InventoryItemModel)
                        .where(InventoryItemModel.id == pk)
                        .execution_options(populate_existing=True)
                    )
                ).scalar_one()
                item = _to_read(model)
                await db.commit()
        except (SQLAlchemyError, OverflowError) as e:
            raise StorageError(f"Failed to adjust stock of item {item_id}: {e}") from e
        logger.info("Adjusted stock of %s by %+d -> %d", pk, delta, item.quantity)
        return item
