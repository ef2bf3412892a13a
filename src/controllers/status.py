"""
Map status and alert values to presentation categories.

Every mapping has a default bucket so an unexpected value from the backend
renders in neutral styling instead of failing.
"""

DEFAULT_COLOR = "secondary"

INVENTORY_STATUS_COLORS = {
    "In Stock": "success",
    "Low Stock": "warning",
    "Out of Stock": "danger",
    "Expiring Soon": "orange",
}

ORDER_STATUS_COLORS = {
    "Delivered": "success",
    "Requested": "warning",
    "Cancelled": "danger",
    "In Transit": "info",
}

SUPPLIER_STATUS_COLORS = {
    "Active": "success",
    "Inactive": "danger",
    "Pending": "warning",
}

ALERT_ICONS = {
    "low_stock": ("exclamation-triangle", "warning"),
    "expiring": ("clock", "orange"),
    "out_of_stock": ("shopping-cart", "danger"),
}

PRIORITY_COLORS = {
    "high": "danger",
    "medium": "warning",
}


def inventory_status_color(status):
    return INVENTORY_STATUS_COLORS.get(status, DEFAULT_COLOR)


def order_status_color(status):
    return ORDER_STATUS_COLORS.get(status, DEFAULT_COLOR)


def supplier_status_color(status):
    return SUPPLIER_STATUS_COLORS.get(status, DEFAULT_COLOR)


def alert_icon(alert_type):
    """
    Icon name and color for an alert type.

    Returns:
        tuple: (fontawesome icon name, color)
    """
    return ALERT_ICONS.get(alert_type, ("exclamation-triangle", DEFAULT_COLOR))


def priority_color(priority):
    return PRIORITY_COLORS.get(priority, "")


def trend_color(trend, higher_is_worse=True):
    """Red for a bad trend, green for a good one."""
    if trend not in ("up", "down"):
        return DEFAULT_COLOR
    worse = (trend == "up") == higher_is_worse
    return "danger" if worse else "success"
