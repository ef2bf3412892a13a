import unittest
import sys
import os

# Add parent directory to path so we can import the project modules
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from fakes import FakeClient, healthy_routes
from src.controllers.inventory import (
    ALL_ITEMS, InventoryOverviewController, InventoryStatsController, active_statuses,
    default_status_filters, filter_inventory, toggle_status_filter
)
from src.controllers.base import READY, FAILED
from src.data import fallback_data


class TestStatusFilters(unittest.TestCase):
    """All Items is exclusive with the specific statuses"""

    def test_default_selects_all_items(self):
        filters = default_status_filters()
        self.assertTrue(filters[ALL_ITEMS])
        self.assertEqual(active_statuses(filters), frozenset())

    def test_selecting_a_status_clears_all_items(self):
        filters = toggle_status_filter(default_status_filters(), "Low Stock")
        self.assertFalse(filters[ALL_ITEMS])
        self.assertEqual(active_statuses(filters), frozenset({"Low Stock"}))

    def test_statuses_combine(self):
        filters = toggle_status_filter(default_status_filters(), "Low Stock")
        filters = toggle_status_filter(filters, "Out of Stock")
        self.assertEqual(active_statuses(filters), frozenset({"Low Stock", "Out of Stock"}))

    def test_clearing_last_status_restores_all_items(self):
        filters = toggle_status_filter(default_status_filters(), "Expiring Soon")
        filters = toggle_status_filter(filters, "Expiring Soon")
        self.assertEqual(filters, default_status_filters())

    def test_selecting_all_items_clears_statuses(self):
        filters = toggle_status_filter(default_status_filters(), "Low Stock")
        self.assertEqual(toggle_status_filter(filters, ALL_ITEMS), default_status_filters())

    def test_unknown_name_changes_nothing(self):
        filters = default_status_filters()
        self.assertEqual(toggle_status_filter(filters, "Frozen"), filters)

    def test_never_empty(self):
        filters = default_status_filters()
        for name in ["Low Stock", "Low Stock", ALL_ITEMS, ALL_ITEMS, "Out of Stock", "Out of Stock"]:
            filters = toggle_status_filter(filters, name)
            self.assertTrue(any(filters.values()))


class TestFilterInventory(unittest.TestCase):

    def setUp(self):
        self.items = fallback_data.sample_inventory()

    def test_search_matches_name_or_category(self):
        names = [item.name for item in filter_inventory(self.items, "dairy", frozenset())]
        self.assertEqual(names, ["Mozzarella", "Whole Milk"])
        names = [item.name for item in filter_inventory(self.items, "OIL", frozenset())]
        self.assertEqual(names, ["Olive Oil"])

    def test_status_filter(self):
        items = filter_inventory(self.items, "", {"Low Stock"})
        self.assertEqual([item.inventory_id for item in items], [1, 6])

    def test_filtering_is_idempotent_and_preserves_order(self):
        once = filter_inventory(self.items, "o", {"Low Stock", "In Stock"})
        twice = filter_inventory(once, "o", {"Low Stock", "In Stock"})
        self.assertEqual(once, twice)
        ids = [item.inventory_id for item in once]
        self.assertEqual(ids, sorted(ids))

    def test_filtering_does_not_mutate_input(self):
        before = list(self.items)
        filter_inventory(self.items, "milk", {"Expiring Soon"})
        self.assertEqual(self.items, before)


class TestInventoryOverviewController(unittest.TestCase):

    def test_visible_items_follow_search_and_filters(self):
        controller = InventoryOverviewController(FakeClient(healthy_routes()))
        controller.mount()
        controller.toggle_filter("Out of Stock")
        self.assertEqual([item.name for item in controller.visible_items()], ["Rice"])
        controller.toggle_filter(ALL_ITEMS)
        controller.set_search("butter")
        self.assertEqual([item.name for item in controller.visible_items()], ["Butter"])

    def test_filters_apply_to_fallback_data(self):
        controller = InventoryOverviewController(FakeClient())
        controller.mount()
        controller.toggle_filter("Low Stock")
        self.assertEqual([item.inventory_id for item in controller.visible_items()], [1, 6])

    def test_form_defaults(self):
        controller = InventoryOverviewController(FakeClient())
        self.assertEqual(controller.form["category"], "Dairy")
        self.assertEqual(controller.form["unit"], "Kg")
        self.assertEqual(controller.form["status"], "In Stock")


class TestInventoryStatsController(unittest.TestCase):

    def test_live_counters(self):
        controller = InventoryStatsController(FakeClient(healthy_routes()))
        controller.mount()
        self.assertEqual(controller.state, READY)
        self.assertEqual(controller.data.total_items, 3)

    def test_fallback_counters(self):
        controller = InventoryStatsController(FakeClient())
        controller.mount()
        self.assertEqual(controller.state, FAILED)
        self.assertEqual((controller.data.total_items, controller.data.low_stock,
                          controller.data.expiring_soon, controller.data.inventory_value),
                         (5, 2, 1, 2840.50))


if __name__ == '__main__':
    unittest.main()
