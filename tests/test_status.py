import unittest
import sys
import os

# Add parent directory to path so we can import the project modules
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.controllers.status import (
    inventory_status_color, order_status_color, supplier_status_color, alert_icon,
    priority_color, trend_color, DEFAULT_COLOR
)


class TestStatusMapping(unittest.TestCase):
    """Every mapping has a neutral default"""

    def test_inventory_statuses(self):
        self.assertEqual(inventory_status_color("In Stock"), "success")
        self.assertEqual(inventory_status_color("Expiring Soon"), "orange")
        self.assertEqual(inventory_status_color("Recalled"), DEFAULT_COLOR)

    def test_order_statuses(self):
        self.assertEqual(order_status_color("In Transit"), "info")
        self.assertEqual(order_status_color(None), DEFAULT_COLOR)

    def test_supplier_statuses(self):
        self.assertEqual(supplier_status_color("Pending"), "warning")
        self.assertEqual(supplier_status_color(""), DEFAULT_COLOR)

    def test_alert_icons(self):
        self.assertEqual(alert_icon("out_of_stock"), ("shopping-cart", "danger"))
        self.assertEqual(alert_icon("other"), ("exclamation-triangle", DEFAULT_COLOR))

    def test_priority(self):
        self.assertEqual(priority_color("high"), "danger")
        self.assertEqual(priority_color("low"), "")

    def test_trend(self):
        self.assertEqual(trend_color("up"), "danger")
        self.assertEqual(trend_color("down"), "success")
        self.assertEqual(trend_color("up", higher_is_worse=False), "success")
        self.assertEqual(trend_color("flat"), DEFAULT_COLOR)


if __name__ == '__main__':
    unittest.main()
