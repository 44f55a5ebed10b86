import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from schemas.inventory import validate_adjustment, validate_insert
from storage import InventoryStorage

logger = logging.getLogger(__name__)

router = APIRouter()

ITEM_NOT_FOUND = "Item not found"


def get_storage(request: Request) -> InventoryStorage:
    """The store opened by the app lifespan."""
    return request.app.state.storage


def _server_error(action: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to {action}")


@router.get("", response_model=List[Dict])
async def list_inventory_items(storage: InventoryStorage = Depends(get_storage)):
    """Get all inventory items"""
    try:
        items = await storage.list_items()
    except Exception:
        logger.exception("list_inventory_items failed")
        raise _server_error("fetch inventory items")
    return [it.to_wire() for it in items]


@router.get("/low-stock", response_model=List[Dict])
async def list_low_stock_items(storage: InventoryStorage = Depends(get_storage)):
    """Items whose quantity is at or below their low stock threshold"""
    try:
        items = await storage.list_low_stock()
    except Exception:
        logger.exception("list_low_stock_items failed")
        raise _server_error("fetch low stock items")
    return [it.to_wire() for it in items]


@router.get("/{item_id}", response_model=Dict)
async def get_inventory_item(item_id: str, storage: InventoryStorage = Depends(get_storage)):
    try:
        item = await storage.get_item(item_id)
    except Exception:
        logger.exception("get_inventory_item failed for %s", item_id)
        raise _server_error("fetch inventory item")
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ITEM_NOT_FOUND)
    return item.to_wire()


@router.post("", response_model=Dict, status_code=status.HTTP_201_CREATED)
async def create_inventory_item(
    payload: Dict[str, Any] = Body(...),
    storage: InventoryStorage = Depends(get_storage),
):
    data = validate_insert(payload)
    try:
        item = await storage.create_item(data)
    except Exception:
        logger.exception("create_inventory_item failed")
        raise _server_error("create inventory item")
    return item.to_wire()


@router.put("/{item_id}", response_model=Dict)
async def update_inventory_item(
    item_id: str,
    payload: Dict[str, Any] = Body(...),
    storage: InventoryStorage = Depends(get_storage),
):
    data = validate_insert(payload)
    try:
        item = await storage.update_item(item_id, data)
    except Exception:
        logger.exception("update_inventory_item failed for %s", item_id)
        raise _server_error("update inventory item")
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ITEM_NOT_FOUND)
    return item.to_wire()


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_inventory_item(item_id: str, storage: InventoryStorage = Depends(get_storage)):
    try:
        deleted = await storage.delete_item(item_id)
    except Exception:
        logger.exception("delete_inventory_item failed for %s", item_id)
        raise _server_error("delete inventory item")
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ITEM_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{item_id}/adjust", response_model=Dict)
async def adjust_stock(
    item_id: str,
    payload: Dict[str, Any] = Body(...),
    storage: InventoryStorage = Depends(get_storage),
):
    """
    Apply a signed delta to an item's quantity.

    The result never goes below zero: adjusting 3 by -10 leaves 0.
    """
    data = validate_adjustment({**payload, "id": item_id})
    try:
        item = await storage.adjust_stock(data.id, data.adjustment)
    except Exception:
        logger.exception("adjust_stock failed for %s", item_id)
        raise _server_error("adjust stock")
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ITEM_NOT_FOUND)
    return item.to_wire()
