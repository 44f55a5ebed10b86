"""
Delete ALL inventory items from the database.

Run:
  python backend/scripts/reset_inventory.py
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

# Allow running from repo root by ensuring `backend/` is on sys.path
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from sqlalchemy import delete  # noqa: E402

from core.config import settings  # noqa: E402
from db.inventory.item import InventoryItem  # noqa: E402
from storage.database import DatabaseInventoryStorage  # noqa: E402


async def reset(database_url: str) -> int:
    store = DatabaseInventoryStorage(database_url)
    await store.init()
    try:
        async with store.session_maker() as db:
            res = await db.execute(delete(InventoryItem))
            await db.commit()
    finally:
        await store.close()

    items_n = int(getattr(res, "rowcount", 0) or 0)
    print(f"Deleted inventory_items: {items_n}")
    return items_n


def main() -> None:
    asyncio.run(reset(settings.async_database_url))


if __name__ == "__main__":
    main()
