"""
Record types mirrored from the inventory backend.

Field names follow the backend's wire format. Numeric amounts that the
backend sends as decimal strings (quantity, price) are kept as strings;
use the *_decimal properties for arithmetic.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict, fields
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional

from src.services.errors import MalformedResponse


def to_decimal(value) -> Decimal:
    """Parse a decimal string, treating blanks and junk as zero."""
    if value is None or value == "":
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")


def _as_text(value) -> str:
    if value is None:
        return ""
    return str(value)


def _require(data, keys, record_name):
    if not isinstance(data, dict):
        raise MalformedResponse(f"Expected an object for {record_name}, got {type(data).__name__}")
    missing = [key for key in keys if key not in data]
    if missing:
        raise MalformedResponse(f"{record_name} is missing fields: {', '.join(missing)}")


def split_categories(categories: str) -> List[str]:
    """Split the comma-joined wire value into a list of category names."""
    if not categories:
        return []
    return [part.strip() for part in categories.split(",") if part.strip()]


def join_categories(categories) -> str:
    return ",".join(categories)


@dataclass
class InventoryItem:
    inventory_id: int
    name: str
    category: str
    quantity: str
    unit: str
    status: str  # In Stock, Low Stock, Out of Stock, Expiring Soon
    exp_date: str

    EDITABLE_FIELDS = ("quantity", "unit", "status", "exp_date")

    @classmethod
    def from_dict(cls, data: dict) -> "InventoryItem":
        _require(data, ["inventory_id", "name"], "InventoryItem")
        try:
            inventory_id = int(data["inventory_id"])
        except (TypeError, ValueError) as e:
            raise MalformedResponse(f"InventoryItem has an invalid id: {e}") from e
        return cls(
            inventory_id=inventory_id,
            name=_as_text(data.get("name")),
            category=_as_text(data.get("category")),
            quantity=_as_text(data.get("quantity")),
            unit=_as_text(data.get("unit")),
            status=_as_text(data.get("status")),
            exp_date=_as_text(data.get("exp_date")),
        )

    @property
    def quantity_decimal(self) -> Decimal:
        return to_decimal(self.quantity)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Order:
    order_id: str
    name: str
    category: str
    supplier: str  # company name, not an id
    created: str
    delivery: Optional[str]
    status: str  # Requested, In Transit, Delivered, Cancelled
    quantity: str
    unit: str
    price: str

    EDITABLE_FIELDS = ("delivery", "status", "quantity", "price")

    @classmethod
    def from_dict(cls, data: dict) -> "Order":
        _require(data, ["order_id", "name"], "Order")
        delivery = data.get("delivery")
        return cls(
            order_id=_as_text(data["order_id"]),
            name=_as_text(data.get("name")),
            category=_as_text(data.get("category")),
            supplier=_as_text(data.get("supplier")),
            created=_as_text(data.get("created")),
            delivery=None if delivery in (None, "") else _as_text(delivery),
            status=_as_text(data.get("status")),
            quantity=_as_text(data.get("quantity")),
            unit=_as_text(data.get("unit")),
            price=_as_text(data.get("price")),
        )

    @property
    def price_decimal(self) -> Decimal:
        return to_decimal(self.price)

    @property
    def quantity_decimal(self) -> Decimal:
        return to_decimal(self.quantity)

    @property
    def delivery_label(self) -> str:
        return self.delivery or "TBD"

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class Supplier:
    supplier_id: int
    company: str
    contact_person: str
    email: str
    mobile: str
    address: str
    status: str  # Active, Inactive, Pending
    categories: str

    @classmethod
    def from_dict(cls, data: dict) -> "Supplier":
        _require(data, ["supplier_id", "company"], "Supplier")
        try:
            supplier_id = int(data["supplier_id"])
        except (TypeError, ValueError) as e:
            raise MalformedResponse(f"Supplier has an invalid id: {e}") from e
        return cls(
            supplier_id=supplier_id,
            company=_as_text(data.get("company")),
            contact_person=_as_text(data.get("contact_person")),
            email=_as_text(data.get("email")),
            mobile=_as_text(data.get("mobile")),
            address=_as_text(data.get("address")),
            status=_as_text(data.get("status")),
            categories=_as_text(data.get("categories")),
        )

    @property
    def category_list(self) -> List[str]:
        return split_categories(self.categories)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Alert:
    id: str
    type: str  # low_stock, expiring, out_of_stock
    title: str
    description: str
    time: str
    priority: str  # high, medium
    item: InventoryItem


@dataclass
class AnalyticsSummary:
    totalSpent: float
    totalItems: int
    averageCost: float
    wastagePercentage: float
    spendingTrend: str
    spendingChange: float
    wasteTrend: str
    wasteChange: float

    @classmethod
    def from_dict(cls, data: dict) -> "AnalyticsSummary":
        keys = [f.name for f in fields(cls)]
        _require(data, keys, "AnalyticsSummary")
        try:
            return cls(
                totalSpent=float(data["totalSpent"]),
                totalItems=int(data["totalItems"]),
                averageCost=float(data["averageCost"]),
                wastagePercentage=float(data["wastagePercentage"]),
                spendingTrend=str(data["spendingTrend"]),
                spendingChange=float(data["spendingChange"]),
                wasteTrend=str(data["wasteTrend"]),
                wasteChange=float(data["wasteChange"]),
            )
        except (TypeError, ValueError) as e:
            raise MalformedResponse(f"AnalyticsSummary has invalid values: {e}") from e


@dataclass
class UsagePoint:
    date: str
    usage: float

    @classmethod
    def from_dict(cls, data: dict) -> "UsagePoint":
        _require(data, ["date", "usage"], "UsagePoint")
        try:
            return cls(date=str(data["date"]), usage=float(data["usage"]))
        except (TypeError, ValueError) as e:
            raise MalformedResponse(f"UsagePoint has invalid values: {e}") from e


@dataclass
class CategoryShare:
    name: str
    value: float
    color: str = "#6c757d"

    @classmethod
    def from_dict(cls, data: dict) -> "CategoryShare":
        _require(data, ["name", "value"], "CategoryShare")
        try:
            return cls(name=str(data["name"]), value=float(data["value"]),
                       color=str(data.get("color") or "#6c757d"))
        except (TypeError, ValueError) as e:
            raise MalformedResponse(f"CategoryShare has invalid values: {e}") from e


@dataclass
class TopItem:
    id: str
    name: str
    category: str
    usageAmount: float
    usageUnit: str
    costPerUnit: float
    totalCost: float

    @classmethod
    def from_dict(cls, data: dict) -> "TopItem":
        keys = [f.name for f in fields(cls)]
        _require(data, keys, "TopItem")
        try:
            return cls(
                id=str(data["id"]),
                name=str(data["name"]),
                category=str(data["category"]),
                usageAmount=float(data["usageAmount"]),
                usageUnit=str(data["usageUnit"]),
                costPerUnit=float(data["costPerUnit"]),
                totalCost=float(data["totalCost"]),
            )
        except (TypeError, ValueError) as e:
            raise MalformedResponse(f"TopItem has invalid values: {e}") from e


@dataclass
class InventoryStats:
    total_items: int
    low_stock: int
    expiring_soon: int
    inventory_value: float


@dataclass
class Recipe:
    id: str
    name: str
    category: str
    prep_time: int  # minutes
    ingredients: int
    last_used: str
    popular: bool = False
    description: str = ""


@dataclass
class RecipeUsage:
    """How much of one ingredient a recipe takes per serving."""
    recipe_id: str
    name: str
    usage_amount: float
    unit: str
    frequency: str
    last_used: str


@dataclass
class SettingsProfile:
    """Locally held settings groups shown on the settings screen."""
    profile: Dict[str, str] = field(default_factory=dict)
    restaurant: Dict[str, str] = field(default_factory=dict)
    notifications: Dict[str, bool] = field(default_factory=dict)
    security: Dict[str, bool] = field(default_factory=dict)
    system: Dict[str, str] = field(default_factory=dict)


def parse_list(payload, record_cls, record_name=None):
    """
    Parse a JSON array into a list of records.

    Args:
        payload: Decoded JSON body
        record_cls: Record class exposing from_dict
        record_name: Name used in error messages

    Returns:
        list: Parsed records

    Raises:
        MalformedResponse: If the payload is not a list of valid records
    """
    if not isinstance(payload, list):
        raise MalformedResponse(f"Expected a list of {record_name or record_cls.__name__}")
    return [record_cls.from_dict(entry) for entry in payload]


def parse_count(payload, record_name="count"):
    if isinstance(payload, bool) or not isinstance(payload, (int, float)):
        raise MalformedResponse(f"Expected a number for {record_name}")
    return payload
