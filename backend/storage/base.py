"""Contract shared by every inventory store."""

from typing import List, Optional, Protocol, runtime_checkable

from schemas.inventory import InventoryItemCreate, InventoryItemRead


@runtime_checkable
class InventoryStorage(Protocol):
    """Single seam between validated payloads and persistence.

    Unknown ids are a normal outcome: getters/mutators return None and
    delete returns False. Payloads are trusted; validation happens before
    they get here.
    """

    backend_name: str

    async def init(self) -> None: ...

    async def close(self) -> None: ...

    async def list_items(self) -> List[InventoryItemRead]:
        """All items in insertion order."""
        ...

    async def list_low_stock(self) -> List[InventoryItemRead]:
        """Items with quantity at or below their threshold, insertion order."""
        ...

    async def get_item(self, item_id: str) -> Optional[InventoryItemRead]: ...

    async def create_item(self, payload: InventoryItemCreate) -> InventoryItemRead: ...

    async def update_item(self, item_id: str, payload: InventoryItemCreate) -> Optional[InventoryItemRead]:
        """Replace every field but the id. Never inserts."""
        ...

    async def delete_item(self, item_id: str) -> bool: ...

    async def adjust_stock(self, item_id: str, delta: int) -> Optional[InventoryItemRead]:
        """quantity = max(0, quantity + delta), atomic per item."""
        ...
