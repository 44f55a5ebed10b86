import math
from typing import Any, Dict, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.catalog import MAX_QUANTITY, PRODUCT_CATEGORIES, PRODUCT_UNITS
from core.errors import InventoryValidationError


StockStatus = Literal["ok", "low", "out"]

_REQUIRED_MESSAGES = {
    "name": "Item name is required",
    "category": "Please select a category",
    "unit": "Please select a unit",
    "quantity": "Quantity is required",
    "lowStockThreshold": "Threshold is required",
    "id": "Item id is required",
    "adjustment": "Adjustment is required",
}


def _coerce_whole_number(v: Any, label: str) -> int:
    """Accept ints, integral floats and numeric-looking strings ("5", " 5 ", "5.0")."""
    if isinstance(v, bool):
        raise ValueError(f"{label} must be a number")
    if isinstance(v, int):
        return v
    if isinstance(v, str):
        v = v.strip()
        if not v:
            raise ValueError(f"{label} must be a number")
        try:
            return int(v)
        except ValueError:
            pass
    try:
        n = float(v)
    except (TypeError, ValueError):
        raise ValueError(f"{label} must be a number")
    if not math.isfinite(n):
        raise ValueError(f"{label} must be a number")
    if not n.is_integer():
        raise ValueError(f"{label} must be a whole number")
    return int(n)


class InventoryItemCreate(BaseModel):
    """Insert payload, also used as the full replacement on update."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    category: str
    quantity: int
    unit: str
    low_stock_threshold: int = Field(alias="lowStockThreshold")

    @field_validator("name", mode="before")
    @classmethod
    def _strip_required(cls, v: Any) -> str:
        if not isinstance(v, str):
            raise ValueError("Item name is required")
        v = v.strip()
        if not v:
            raise ValueError("Item name is required")
        return v

    @field_validator("category", mode="before")
    @classmethod
    def _category(cls, v: Any) -> str:
        if v not in PRODUCT_CATEGORIES:
            raise ValueError("Please select a category")
        return v

    @field_validator("unit", mode="before")
    @classmethod
    def _unit(cls, v: Any) -> str:
        if v not in PRODUCT_UNITS:
            raise ValueError("Please select a unit")
        return v

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity(cls, v: Any) -> int:
        v = _coerce_whole_number(v, "Quantity")
        if v < 0:
            raise ValueError("Quantity must be at least 0")
        if v > MAX_QUANTITY:
            raise ValueError("Quantity is too large")
        return v

    @field_validator("low_stock_threshold", mode="before")
    @classmethod
    def _threshold(cls, v: Any) -> int:
        v = _coerce_whole_number(v, "Threshold")
        if v < 0:
            raise ValueError("Threshold must be at least 0")
        if v > MAX_QUANTITY:
            raise ValueError("Threshold is too large")
        return v


class StockAdjustment(BaseModel):
    id: str
    adjustment: int

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, v: Any) -> str:
        if isinstance(v, bool) or not isinstance(v, (str, int)):
            raise ValueError("Item id is required")
        v = str(v).strip()
        if not v:
            raise ValueError("Item id is required")
        return v

    @field_validator("adjustment", mode="before")
    @classmethod
    def _adjustment(cls, v: Any) -> int:
        return _coerce_whole_number(v, "Adjustment")


class InventoryItemRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: Union[int, str]
    name: str
    category: str
    quantity: int
    unit: str
    low_stock_threshold: int = Field(alias="lowStockThreshold")

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.low_stock_threshold

    @property
    def stock_status(self) -> StockStatus:
        if self.quantity == 0:
            return "out"
        if self.is_low_stock:
            return "low"
        return "ok"

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def _errors_by_field(exc: ValidationError) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err.get("loc") else "body"
        if field == "low_stock_threshold":
            field = "lowStockThreshold"
        if field in out:
            continue
        if err.get("type") == "missing":
            out[field] = _REQUIRED_MESSAGES.get(field, "Field required")
            continue
        cause = (err.get("ctx") or {}).get("error")
        out[field] = str(cause) if cause is not None else err.get("msg", "Invalid value")
    return out


def validate_insert(data: Mapping[str, Any]) -> InventoryItemCreate:
    """Validate an untrusted create/update payload or raise InventoryValidationError."""
    if not isinstance(data, Mapping):
        raise InventoryValidationError({"body": "Expected a JSON object"})
    try:
        return InventoryItemCreate.model_validate(dict(data))
    except ValidationError as e:
        raise InventoryValidationError(_errors_by_field(e)) from e


def validate_adjustment(data: Mapping[str, Any]) -> StockAdjustment:
    """Validate an `{id, adjustment}` pair or raise InventoryValidationError."""
    if not isinstance(data, Mapping):
        raise InventoryValidationError({"body": "Expected a JSON object"})
    try:
        return StockAdjustment.model_validate(dict(data))
    except ValidationError as e:
        raise InventoryValidationError(_errors_by_field(e)) from e
