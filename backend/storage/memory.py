import logging
import uuid
from typing import Dict, List, Optional

from core.catalog import MAX_QUANTITY, SAMPLE_ITEMS
from schemas.inventory import InventoryItemCreate, InventoryItemRead

logger = logging.getLogger(__name__)


class MemoryInventoryStorage:
    """Process-local store keyed by UUID strings. Lost on restart.

    No method awaits between reading and writing an item, so every
    operation runs to completion on the event loop without interleaving.
    """

    backend_name = "memory"

    def __init__(self, seed: bool = True):
        self._items: Dict[str, InventoryItemRead] = {}
        self._seed = seed

    async def init(self) -> None:
        if self._seed and not self._items:
            for data in SAMPLE_ITEMS:
                self._insert(InventoryItemCreate.model_validate(data))
            logger.info("Seeded %d sample inventory items", len(SAMPLE_ITEMS))

    async def close(self) -> None:
        self._items.clear()

    def _insert(self, payload: InventoryItemCreate) -> InventoryItemRead:
        item_id = str(uuid.uuid4())
        item = InventoryItemRead(id=item_id, **payload.model_dump())
        self._items[item_id] = item
        return item

    async def list_items(self) -> List[InventoryItemRead]:
        return [it.model_copy() for it in self._items.values()]

    async def list_low_stock(self) -> List[InventoryItemRead]:
        return [it.model_copy() for it in self._items.values() if it.is_low_stock]

    async def get_item(self, item_id: str) -> Optional[InventoryItemRead]:
        item = self._items.get(item_id)
        return item.model_copy() if item else None

    async def create_item(self, payload: InventoryItemCreate) -> InventoryItemRead:
        item = self._insert(payload)
        logger.info("Created inventory item %s (%s)", item.id, item.name)
        return item.model_copy()

    async def update_item(self, item_id: str, payload: InventoryItemCreate) -> Optional[InventoryItemRead]:
        if item_id not in self._items:
            return None
        item = InventoryItemRead(id=item_id, **payload.model_dump())
        self._items[item_id] = item
        logger.info("Updated inventory item %s", item_id)
        return item.model_copy()

    async def delete_item(self, item_id: str) -> bool:
        removed = self._items.pop(item_id, None) is not None
        if removed:
            logger.info("Deleted inventory item %s", item_id)
        return removed

    async def adjust_stock(self, item_id: str, delta: int) -> Optional[InventoryItemRead]:
        item = self._items.get(item_id)
        if item is None:
            return None
        updated = item.model_copy(update={"quantity": min(MAX_QUANTITY, max(0, item.quantity + delta))})
        self._items[item_id] = updated
        logger.info("Adjusted stock of %s by %+d: %d -> %d", item_id, delta, item.quantity, updated.quantity)
        return updated.model_copy()
