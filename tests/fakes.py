"""
Test doubles for the inventory backend.
"""
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.services.errors import NetworkUnreachable


class FakeClient:
    """
    Stands in for ApiClient and records every call.

    Routes are keyed by "METHOD /path". A route value may be a payload, an
    exception instance (raised), or a callable taking the params or body.
    Unknown routes raise NetworkUnreachable, like an unreachable backend.
    """

    base_url = "http://backend.test"

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def _respond(self, method, path, argument):
        self.calls.append((method, path, argument))
        key = f"{method} {path}"
        if key not in self.routes:
            raise NetworkUnreachable("No response received from server", path)
        value = self.routes[key]
        if isinstance(value, Exception):
            raise value
        if callable(value):
            return value(argument)
        return value

    def get(self, path, params=None):
        return self._respond("GET", path, params)

    def post(self, path, body):
        return self._respond("POST", path, body)

    def put(self, path, body):
        return self._respond("PUT", path, body)

    def delete(self, path):
        return self._respond("DELETE", path, None)

    def calls_for(self, method):
        return [call for call in self.calls if call[0] == method]


def inventory_payload():
    return [
        {"inventory_id": 11, "name": "Basil", "category": "Produce", "quantity": "2.5",
         "unit": "Kg", "status": "Low Stock", "exp_date": "2025-07-01"},
        {"inventory_id": 12, "name": "Butter", "category": "Dairy", "quantity": "10",
         "unit": "Kg", "status": "In Stock", "exp_date": "2025-07-20"},
        {"inventory_id": 13, "name": "Cream", "category": "Dairy", "quantity": "3",
         "unit": "L", "status": "Expiring Soon", "exp_date": "2025-06-05"},
        {"inventory_id": 14, "name": "Rice", "category": "Pantry", "quantity": "0",
         "unit": "Kg", "status": "Out of Stock", "exp_date": "2026-01-01"},
    ]


def order_payload():
    return [
        {"order_id": "ORD-100", "name": "Basil", "category": "Produce", "supplier": "Green Farms",
         "created": "2025-06-01", "delivery": "2025-06-03", "status": "Requested",
         "quantity": "5", "unit": "Kg", "price": "22.50"},
        {"order_id": "ORD-101", "name": "Butter", "category": "Dairy", "supplier": "Dairy Delights",
         "created": "2025-05-30", "delivery": "", "status": "Delivered",
         "quantity": "12", "unit": "Kg", "price": "96.00"},
    ]


def supplier_payload():
    return [
        {"supplier_id": 7, "company": "Green Farms", "contact_person": "Ada Green",
         "email": "ada@greenfarms.test", "mobile": "555-0200", "address": "1 Field Way",
         "status": "Active", "categories": "Produce, Dairy"},
        {"supplier_id": 8, "company": "Ocean Catch", "contact_person": "Sam Hook",
         "email": "sam@oceancatch.test", "mobile": "555-0201", "address": "9 Pier Road",
         "status": "Inactive", "categories": "Seafood"},
    ]


def healthy_routes():
    """Routes for a backend where every read succeeds."""
    return {
        "GET /health": {"status": "ok"},
        "GET /inventory/getAll": inventory_payload(),
        "GET /inventory/low-stock-all": [inventory_payload()[0]],
        "GET /inventory/expiring-soon-all": [inventory_payload()[2]],
        "GET /inventory/out-of-stock-all": [inventory_payload()[3]],
        "GET /inventory/available": 3,
        "GET /inventory/low-stock": 1,
        "GET /inventory/expiring-soon": 1,
        "GET /order/inventory-value": 1234.5,
        "GET /order/getAll": order_payload(),
        "GET /supplier/getAll": supplier_payload(),
        "GET /supplier/names": [{"company": "Green Farms"}, {"company": "Dairy Delights"}],
        "GET /analytics/summary": {
            "totalSpent": 500.0, "totalItems": 20, "averageCost": 25.0, "wastagePercentage": 3.5,
            "spendingTrend": "down", "spendingChange": 1.5, "wasteTrend": "up", "wasteChange": 0.5,
        },
        "GET /analytics/usage": [{"date": "Week 1", "usage": 10}, {"date": "Week 2", "usage": 12.5}],
        "GET /analytics/categories": [{"name": "Produce", "value": 100, "color": "#00ff00"}],
        "GET /analytics/top-items": [{
            "id": "t1", "name": "Basil", "category": "Produce", "usageAmount": 4,
            "usageUnit": "kg", "costPerUnit": 5.5, "totalCost": 22.0,
        }],
    }
