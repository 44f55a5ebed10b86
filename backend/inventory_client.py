"""
inventory_client.py

A tiny API client for the bar inventory backend, for scripts and bots that
want to read or move stock without going through the dashboard.

What it provides:
- One method per /api/inventory route (list, low-stock, get, create, update, delete, adjust)
- 404 mapped to None (False for delete); other errors raised as ApiError

Environment variables expected:
- INVENTORY_API_URL: e.g. "http://localhost:8000"

Dependencies:
- requests (pip install requests)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests


class ApiError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class _NotFound(Exception):
    pass


@dataclass
class InventoryApiClient:
    base_url: str
    timeout: float = 30

    def _headers(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    def _request(self, method: str, path: str, *, json: Any = None) -> Any:
        url = f"{self.base_url.rstrip('/')}/api/inventory{path}"
        resp = requests.request(
            method,
            url,
            json=json,
            headers=self._headers(),
            timeout=self.timeout,
        )

        if resp.status_code == 404:
            raise _NotFound(path)
        if resp.status_code >= 400:
            details = None
            try:
                body = resp.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                details = body.get("details")
            raise ApiError(
                f"{method} {url} failed ({resp.status_code}): {resp.text}",
                status_code=resp.status_code,
                details=details,
            )

        if resp.status_code == 204:
            return None
        return resp.json()

    # ----------------------------
    # Reads
    # ----------------------------

    def list_items(self) -> List[Dict[str, Any]]:
        return self._request("GET", "")

    def list_low_stock(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/low-stock")

    def get_item(self, item_id: str) -> Optional[Dict[str, Any]]:
        try:
            return self._request("GET", f"/{item_id}")
        except _NotFound:
            return None

    # ----------------------------
    # Writes
    # ----------------------------

    def create_item(
        self,
        *,
        name: str,
        category: str,  # "Spirits" | "Beer" | "Wine" | "Mixers" | "Garnishes"
        quantity: int,
        unit: str,  # "bottles" | "L" | "ml" | "units" | "cases"
        low_stock_threshold: int,
    ) -> Dict[str, Any]:
        """Calls: POST /api/inventory"""
        payload = {
            "name": name,
            "category": category,
            "quantity": quantity,
            "unit": unit,
            "lowStockThreshold": low_stock_threshold,
        }
        return self._request("POST", "", json=payload)

    def update_item(
        self,
        item_id: str,
        *,
        name: str,
        category: str,
        quantity: int,
        unit: str,
        low_stock_threshold: int,
    ) -> Optional[Dict[str, Any]]:
        """
        Calls: PUT /api/inventory/{id}
        Full replacement: every field must be sent.
        """
        payload = {
            "name": name,
            "category": category,
            "quantity": quantity,
            "unit": unit,
            "lowStockThreshold": low_stock_threshold,
        }
        try:
            return self._request("PUT", f"/{item_id}", json=payload)
        except _NotFound:
            return None

    def delete_item(self, item_id: str) -> bool:
        try:
            self._request("DELETE", f"/{item_id}")
        except _NotFound:
            return False
        return True

    def adjust_stock(self, item_id: str, adjustment: int) -> Optional[Dict[str, Any]]:
        """
        Calls: PATCH /api/inventory/{id}/adjust
        Negative adjustments larger than the stock leave the quantity at 0.
        """
        try:
            return self._request("PATCH", f"/{item_id}/adjust", json={"adjustment": adjustment})
        except _NotFound:
            return None


def make_client_from_env() -> InventoryApiClient:
    base_url = os.getenv("INVENTORY_API_URL", "").strip()
    if not base_url:
        raise RuntimeError("Missing INVENTORY_API_URL")
    return InventoryApiClient(base_url=base_url)


if __name__ == "__main__":
    client = make_client_from_env()
    for item in client.list_low_stock():
        print(f"LOW: {item['name']} ({item['quantity']} {item['unit']}, threshold {item['lowStockThreshold']})")
