"""
Resource fetchers for the inventory backend.

Each read fetcher returns a FetchResult tagged Ok or Fallback; remote errors
never escape. Write fetchers return Ok or Failed and never substitute data.
"""
import logging

from src.services.errors import ApiError, MalformedResponse
from src.data import fallback_data
from src.data.models import (
    InventoryItem, Order, Supplier, AnalyticsSummary, UsagePoint, CategoryShare,
    TopItem, InventoryStats, parse_list, parse_count
)

logger = logging.getLogger('fetchers')


class FetchResult:
    """
    Outcome of a fetcher call.

    Exactly one of the following holds:
    - ok: data came from the backend
    - is_fallback: the backend failed and data is the static substitute
    - failed: a write did not go through (data is None)
    """

    OK = "ok"
    FALLBACK = "fallback"
    FAILED = "failed"

    def __init__(self, kind, data=None, reason=None):
        self.kind = kind
        self.data = data
        self.reason = reason

    @property
    def ok(self):
        return self.kind == self.OK

    @property
    def is_fallback(self):
        return self.kind == self.FALLBACK

    @property
    def failed(self):
        return self.kind == self.FAILED

    def __repr__(self):
        return f"FetchResult({self.kind!r}, reason={self.reason!r})"


def Ok(data):
    return FetchResult(FetchResult.OK, data)


def Fallback(data, reason):
    return FetchResult(FetchResult.FALLBACK, data, reason)


def Failed(reason):
    return FetchResult(FetchResult.FAILED, None, reason)


def _read(client, path, parse, fallback, params=None):
    """
    GET a resource, parse it, and substitute fallback data on any failure.

    Args:
        client: ApiClient
        path: Endpoint path
        parse: Callable turning the decoded body into records
        fallback: Zero-argument callable producing the substitute data
        params: Optional query parameters

    Returns:
        FetchResult: Ok(records) or Fallback(substitute, reason)
    """
    try:
        payload = client.get(path, params=params)
        if payload is None:
            raise ApiError("Empty response", path)
        return Ok(parse(payload))
    except ApiError as e:
        logger.warning(f"Falling back to mock data for {path}: {e}")
        return Fallback(fallback(), str(e))


def _write(client, method, path, body):
    try:
        if method == "POST":
            response = client.post(path, body)
        else:
            response = client.put(path, body)
        return Ok(response)
    except ApiError as e:
        logger.error(f"{method} {path} failed: {e}")
        return Failed(str(e))


# Inventory endpoints

def get_inventory_items(client):
    return _read(client, "/inventory/getAll",
                 lambda payload: parse_list(payload, InventoryItem),
                 fallback_data.sample_inventory)


def get_inventory_item(client, inventory_id):
    def fallback():
        for item in fallback_data.sample_inventory():
            if item.inventory_id == inventory_id:
                return item
        return None
    return _read(client, f"/inventory/{inventory_id}", InventoryItem.from_dict, fallback)


def get_low_stock_items(client):
    return _read(client, "/inventory/low-stock-all",
                 lambda payload: parse_list(payload, InventoryItem),
                 fallback_data.sample_low_stock)


def get_expiring_items(client):
    return _read(client, "/inventory/expiring-soon-all",
                 lambda payload: parse_list(payload, InventoryItem),
                 fallback_data.sample_expiring)


def get_out_of_stock_items(client):
    return _read(client, "/inventory/out-of-stock-all",
                 lambda payload: parse_list(payload, InventoryItem),
                 fallback_data.sample_out_of_stock)


def get_inventory_stats(client):
    """
    Fetch the four dashboard counters.

    The counters are only meaningful together, so a single failing call
    turns the whole result into a fallback.
    """
    paths = {
        "total_items": "/inventory/available",
        "low_stock": "/inventory/low-stock",
        "expiring_soon": "/inventory/expiring-soon",
        "inventory_value": "/order/inventory-value",
    }
    values = {}
    try:
        for key, path in paths.items():
            payload = client.get(path)
            values[key] = parse_count(payload, key)
    except ApiError as e:
        logger.warning(f"Falling back to mock inventory stats: {e}")
        return Fallback(fallback_data.sample_inventory_stats(), str(e))
    return Ok(InventoryStats(
        total_items=int(values["total_items"]),
        low_stock=int(values["low_stock"]),
        expiring_soon=int(values["expiring_soon"]),
        inventory_value=float(values["inventory_value"]),
    ))


def save_inventory_item(client, item):
    return _write(client, "POST", "/inventory/save", item)


def update_inventory_item(client, item):
    return _write(client, "PUT", "/inventory/update", item)


# Order endpoints

def get_orders(client):
    return _read(client, "/order/getAll",
                 lambda payload: parse_list(payload, Order),
                 fallback_data.sample_orders)


def save_order(client, order):
    return _write(client, "POST", "/order/save", order)


def update_order(client, order):
    return _write(client, "PUT", "/order/update", order)


# Supplier endpoints

def _parse_supplier_names(payload):
    return [entry["company"] if isinstance(entry, dict) else str(entry)
            for entry in _ensure_list(payload, "supplier names")]


def _ensure_list(payload, name):
    if not isinstance(payload, list):
        raise MalformedResponse(f"Expected a list of {name}")
    for entry in payload:
        if isinstance(entry, dict) and "company" not in entry:
            raise MalformedResponse(f"Entry in {name} is missing 'company'")
    return payload


def get_suppliers(client):
    return _read(client, "/supplier/getAll",
                 lambda payload: parse_list(payload, Supplier),
                 fallback_data.sample_suppliers)


def get_supplier_names(client):
    return _read(client, "/supplier/names", _parse_supplier_names,
                 fallback_data.sample_supplier_names)


def save_supplier(client, supplier):
    return _write(client, "POST", "/supplier/save", supplier)


# Analytics endpoints

def get_analytics_summary(client, timeframe):
    return _read(client, "/analytics/summary", AnalyticsSummary.from_dict,
                 fallback_data.sample_summary, params={"timeframe": timeframe})


def get_usage(client, timeframe):
    return _read(client, "/analytics/usage",
                 lambda payload: parse_list(payload, UsagePoint),
                 lambda: fallback_data.sample_usage(timeframe),
                 params={"timeframe": timeframe})


def get_category_breakdown(client):
    return _read(client, "/analytics/categories",
                 lambda payload: parse_list(payload, CategoryShare),
                 fallback_data.sample_categories)


def get_top_items(client):
    return _read(client, "/analytics/top-items",
                 lambda payload: parse_list(payload, TopItem),
                 fallback_data.sample_top_items)


# Authentication endpoints (not enforced client-side)

def login(client, username, password):
    return _write(client, "POST", "/auth/login", {"username": username, "password": password})


def logout(client):
    return _write(client, "POST", "/auth/logout", {})


def get_current_user(client):
    try:
        return Ok(client.get("/auth/user"))
    except ApiError as e:
        logger.warning(f"Could not load current user: {e}")
        return Failed(str(e))
