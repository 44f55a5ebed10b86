from unittest.mock import MagicMock, patch

import pytest

from inventory_client import ApiError, InventoryApiClient, make_client_from_env


def _response(status_code, body=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def api():
    return InventoryApiClient(base_url="http://bar.local/")


def test_list_items_hits_collection_url(api):
    with patch("inventory_client.requests.request", return_value=_response(200, [])) as req:
        assert api.list_items() == []

    method, url = req.call_args.args
    assert (method, url) == ("GET", "http://bar.local/api/inventory")


def test_create_sends_camel_case_payload(api):
    created = {"id": "1", "name": "Aperol"}
    with patch("inventory_client.requests.request", return_value=_response(201, created)) as req:
        assert api.create_item(name="Aperol", category="Spirits", quantity=5, unit="bottles", low_stock_threshold=2) == created

    assert req.call_args.kwargs["json"] == {
        "name": "Aperol",
        "category": "Spirits",
        "quantity": 5,
        "unit": "bottles",
        "lowStockThreshold": 2,
    }


def test_adjust_stock_patches_adjust_route(api):
    with patch("inventory_client.requests.request", return_value=_response(200, {"quantity": 0})) as req:
        assert api.adjust_stock("abc", -10) == {"quantity": 0}

    assert req.call_args.args == ("PATCH", "http://bar.local/api/inventory/abc/adjust")
    assert req.call_args.kwargs["json"] == {"adjustment": -10}


def test_not_found_maps_to_none_or_false(api):
    with patch("inventory_client.requests.request", return_value=_response(404, {"error": "Item not found"})):
        assert api.get_item("x") is None
        assert api.adjust_stock("x", 1) is None
        assert api.update_item("x", name="a", category="Beer", quantity=1, unit="cases", low_stock_threshold=0) is None
        assert api.delete_item("x") is False


def test_delete_returns_true_on_204(api):
    with patch("inventory_client.requests.request", return_value=_response(204)):
        assert api.delete_item("x") is True


def test_validation_errors_raise_with_details(api):
    body = {"error": "Invalid data", "details": {"unit": "Please select a unit"}}
    with patch("inventory_client.requests.request", return_value=_response(400, body, text="bad")):
        with pytest.raises(ApiError) as exc:
            api.create_item(name="a", category="Beer", quantity=1, unit="pints", low_stock_threshold=0)

    assert exc.value.status_code == 400
    assert exc.value.details == {"unit": "Please select a unit"}


def test_server_errors_without_json_body(api):
    with patch("inventory_client.requests.request", return_value=_response(502, ValueError("no json"), text="Bad Gateway")):
        with pytest.raises(ApiError) as exc:
            api.list_items()

    assert exc.value.status_code == 502
    assert exc.value.details is None


def test_make_client_from_env(monkeypatch):
    monkeypatch.setenv("INVENTORY_API_URL", "http://bar.local")
    assert make_client_from_env().base_url == "http://bar.local"

    monkeypatch.setenv("INVENTORY_API_URL", "  ")
    with pytest.raises(RuntimeError):
        make_client_from_env()
