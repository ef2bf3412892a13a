"""
Static substitute datasets used when the backend cannot be reached.

Every function returns fresh objects so callers may mutate what they hold
without touching the shared definitions.
"""
from __future__ import annotations

from .models import (
    InventoryItem, Order, Supplier, AnalyticsSummary, UsagePoint,
    CategoryShare, TopItem, InventoryStats, Recipe, RecipeUsage
)

CONNECTION_NOTICE = "Could not connect to the server. Showing mock data instead."

_USAGE_SERIES = {
    "week": [
        ("Monday", 25.5), ("Tuesday", 28.2), ("Wednesday", 32.1), ("Thursday", 30.5),
        ("Friday", 35.8), ("Saturday", 40.2), ("Sunday", 38.5),
    ],
    "month": [("Week 1", 120.5), ("Week 2", 135.2), ("Week 3", 128.7), ("Week 4", 142.3)],
    "quarter": [("January", 450.5), ("February", 420.2), ("March", 480.7)],
    "year": [("Q1", 1250.5), ("Q2", 1320.2), ("Q3", 1180.7), ("Q4", 1420.3)],
}


def sample_usage(timeframe: str) -> list[UsagePoint]:
    # unknown timeframes get the monthly series
    series = _USAGE_SERIES.get(timeframe, _USAGE_SERIES["month"])
    return [UsagePoint(date=label, usage=usage) for label, usage in series]


def sample_summary() -> AnalyticsSummary:
    return AnalyticsSummary(
        totalSpent=12450.75,
        totalItems=345,
        averageCost=36.09,
        wastagePercentage=8.5,
        spendingTrend="up",
        spendingChange=4.2,
        wasteTrend="down",
        wasteChange=2.1,
    )


def sample_categories() -> list[CategoryShare]:
    return [
        CategoryShare("Produce", 3500, "#4CAF50"),
        CategoryShare("Meat", 4200, "#F44336"),
        CategoryShare("Dairy", 2100, "#2196F3"),
        CategoryShare("Bakery", 1800, "#FFC107"),
        CategoryShare("Pantry", 2800, "#9C27B0"),
    ]


def sample_top_items() -> list[TopItem]:
    return [
        TopItem("item1", "Chicken Breast", "Meat", 120, "kg", 8.5, 1020.0),
        TopItem("item2", "Fresh Tomatoes", "Produce", 85, "kg", 3.25, 276.25),
        TopItem("item3", "Olive Oil", "Pantry", 45, "liters", 12.0, 540.0),
        TopItem("item4", "Parmesan Cheese", "Dairy", 30, "kg", 18.75, 562.5),
        TopItem("item5", "Flour", "Bakery", 75, "kg", 2.5, 187.5),
    ]


def sample_inventory() -> list[InventoryItem]:
    return [
        InventoryItem(1, "Fresh Tomatoes", "Produce", "12.5", "Kg", "Low Stock", "2025-06-15"),
        InventoryItem(2, "Chicken Breast", "Meat", "45.0", "Kg", "In Stock", "2025-06-10"),
        InventoryItem(3, "Mozzarella", "Dairy", "0", "Kg", "Out of Stock", "2025-06-20"),
        InventoryItem(4, "Whole Milk", "Dairy", "8.0", "L", "Expiring Soon", "2025-06-03"),
        InventoryItem(5, "Flour", "Bakery", "60.0", "Kg", "In Stock", "2025-12-01"),
        InventoryItem(6, "Olive Oil", "Pantry", "4.5", "L", "Low Stock", "2026-01-15"),
    ]


def sample_low_stock() -> list[InventoryItem]:
    return [item for item in sample_inventory() if item.status == "Low Stock"]


def sample_expiring() -> list[InventoryItem]:
    return [item for item in sample_inventory() if item.status == "Expiring Soon"]


def sample_out_of_stock() -> list[InventoryItem]:
    return [item for item in sample_inventory() if item.status == "Out of Stock"]


def sample_inventory_stats() -> InventoryStats:
    items = sample_inventory()
    return InventoryStats(
        total_items=sum(1 for item in items if item.status != "Out of Stock"),
        low_stock=sum(1 for item in items if item.status == "Low Stock"),
        expiring_soon=sum(1 for item in items if item.status == "Expiring Soon"),
        inventory_value=2840.50,
    )


def sample_orders() -> list[Order]:
    return [
        Order("ORD-001", "Fresh Tomatoes", "Produce", "Farm Fresh Produce", "2025-06-01",
              "2025-06-04", "In Transit", "25", "Kg", "81.25"),
        Order("ORD-002", "Chicken Breast", "Meat", "Prime Meats Co.", "2025-05-28",
              "2025-05-30", "Delivered", "40", "Kg", "340.00"),
        Order("ORD-003", "Mozzarella", "Dairy", "Dairy Delights", "2025-06-02",
              None, "Requested", "15", "Kg", "187.50"),
        Order("ORD-004", "Olive Oil", "Pantry", "Mediterranean Imports", "2025-05-20",
              "2025-05-27", "Cancelled", "10", "L", "120.00"),
    ]


def sample_suppliers() -> list[Supplier]:
    return [
        Supplier(1, "Farm Fresh Produce", "Maria Lopez", "orders@farmfresh.example", "555-0101",
                 "12 Orchard Lane", "Active", "Produce"),
        Supplier(2, "Prime Meats Co.", "Daniel Reyes", "sales@primemeats.example", "555-0102",
                 "88 Butcher Row", "Active", "Meat,Seafood"),
        Supplier(3, "Dairy Delights", "Anne Keller", "hello@dairydelights.example", "555-0103",
                 "5 Creamery Road", "Pending", "Dairy"),
        Supplier(4, "Mediterranean Imports", "Luca Bianchi", "info@medimports.example", "555-0104",
                 "301 Harbor Street", "Inactive", "Pantry,Beverages"),
    ]


def sample_supplier_names() -> list[str]:
    return [supplier.company for supplier in sample_suppliers()]


def sample_recipes() -> list[Recipe]:
    return [
        Recipe("recipe1", "Spaghetti Bolognese", "Main Course", 45, 12, "Today", True),
        Recipe("recipe2", "Margherita Pizza", "Main Course", 30, 8, "Yesterday", True),
        Recipe("recipe3", "Caprese Salad", "Appetizer", 15, 5, "3 days ago", False),
        Recipe("recipe4", "Tiramisu", "Dessert", 60, 9, "1 week ago", True),
        Recipe("recipe5", "Chicken Caesar Salad", "Main Course", 25, 10, "2 days ago", False),
        Recipe("recipe6", "Bruschetta", "Appetizer", 20, 6, "5 days ago", False),
    ]


def sample_ingredient_usage() -> list[UsagePoint]:
    return [
        UsagePoint("May 1", 2.5), UsagePoint("May 5", 3.2), UsagePoint("May 10", 1.8),
        UsagePoint("May 15", 4.0), UsagePoint("May 20", 2.7), UsagePoint("May 25", 3.5),
        UsagePoint("June 1", 2.3),
    ]


def sample_recipe_usage() -> list[RecipeUsage]:
    return [
        RecipeUsage("recipe1", "Spaghetti Bolognese", 0.5, "kg", "Daily", "Today"),
        RecipeUsage("recipe2", "Margherita Pizza", 0.3, "kg", "Daily", "Yesterday"),
        RecipeUsage("recipe3", "Caprese Salad", 0.4, "kg", "Weekly", "3 days ago"),
        RecipeUsage("recipe6", "Bruschetta", 0.2, "kg", "Weekly", "5 days ago"),
    ]
