import argparse
import asyncio
import sys
from pathlib import Path

"""
Seed the sample bar stock (core.catalog.SAMPLE_ITEMS) into inventory_items.

Run:
- inside backend/: `python scripts/seed_inventory.py --if-empty`
- from repo root: `python backend/scripts/seed_inventory.py`
"""

# Allow running from repo root by ensuring `backend/` is on sys.path
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from sqlalchemy import func, select  # noqa: E402

from core.catalog import SAMPLE_ITEMS  # noqa: E402
from core.config import settings, to_async_url  # noqa: E402
from db.inventory.item import InventoryItem  # noqa: E402
from schemas.inventory import validate_insert  # noqa: E402
from storage.database import DatabaseInventoryStorage  # noqa: E402


async def seed(database_url: str, if_empty: bool, dry_run: bool) -> int:
    store = DatabaseInventoryStorage(database_url)
    await store.init()
    try:
        async with store.session_maker() as session:
            existing = (await session.execute(select(func.count()).select_from(InventoryItem))).scalar_one()
        if if_empty and existing:
            print(f"[seed_inventory] {existing} items already present, nothing to do")
            return 0

        if dry_run:
            print(f"[seed_inventory] DRY RUN: would insert {len(SAMPLE_ITEMS)} items (existing={existing})")
            return 0

        created = 0
        for data in SAMPLE_ITEMS:
            await store.create_item(validate_insert(data))
            created += 1
        print(f"[seed_inventory] created_items={created}")
        return created
    finally:
        await store.close()


def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("--database-url", default=settings.database_url, help="Defaults to DATABASE_URL")
    p.add_argument("--if-empty", action="store_true", help="Skip when the table already has rows")
    p.add_argument("--dry-run", action="store_true", help="Do not insert, just print what would change")
    args = p.parse_args(argv)

    asyncio.run(seed(database_url=to_async_url(args.database_url), if_empty=args.if_empty, dry_run=args.dry_run))


if __name__ == "__main__":
    main()
