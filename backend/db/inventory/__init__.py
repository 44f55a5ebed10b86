"""
Inventory tables.

Models:
- InventoryItem (one row per product line, stock held in `quantity`)
"""

from .item import InventoryItem

__all__ = ["InventoryItem"]
