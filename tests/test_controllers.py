import unittest
import sys
import os

# Add parent directory to path so we can import the project modules
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from fakes import FakeClient, healthy_routes
from src.controllers.base import (
    ViewController, CancellationScope, IDLE, READY, FAILED, missing_fields, validate_required,
    matches_search
)
from src.controllers.inventory import InventoryOverviewController
from src.data import fallback_data
from src.data.fallback_data import CONNECTION_NOTICE
from src.services.availability import AvailabilityProber
from src.services.errors import ValidationError, ServerError
from src.services.fetchers import Ok


def filled_item_form():
    return {"name": "Basil", "category": "Produce", "quantity": "2", "unit": "Kg",
            "status": "In Stock", "exp_date": "2025-07-01"}


class TestCancellationScope(unittest.TestCase):

    def test_only_latest_token_is_current(self):
        scope = CancellationScope()
        first = scope.begin()
        second = scope.begin()
        self.assertFalse(scope.is_current(first))
        self.assertTrue(scope.is_current(second))

    def test_close_invalidates_every_token(self):
        scope = CancellationScope()
        token = scope.begin()
        scope.close()
        self.assertTrue(scope.closed)
        self.assertFalse(scope.is_current(token))


class TestFormHelpers(unittest.TestCase):

    def test_missing_fields_treats_whitespace_as_empty(self):
        form = {"name": "  ", "category": "Dairy", "quantity": None}
        self.assertEqual(missing_fields(form, ("name", "category", "quantity")), ["name", "quantity"])

    def test_validate_required_raises(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_required({"name": ""}, ("name",))
        self.assertEqual(ctx.exception.missing_fields, ["name"])

    def test_matches_search_is_case_insensitive(self):
        self.assertTrue(matches_search("tOm", "Fresh Tomatoes"))
        self.assertTrue(matches_search("", "anything"))
        self.assertFalse(matches_search("beef", "Chicken", "Meat"))


class TestControllerLoading(unittest.TestCase):
    """Refresh moves a controller through its load states"""

    def test_successful_refresh(self):
        controller = InventoryOverviewController(FakeClient(healthy_routes()))
        self.assertEqual(controller.state, IDLE)
        self.assertTrue(controller.mount())
        self.assertEqual(controller.state, READY)
        self.assertIsNone(controller.error)
        self.assertEqual(len(controller.data), 4)

    def test_failed_refresh_shows_fallback_and_notice(self):
        controller = InventoryOverviewController(FakeClient())
        controller.refresh()
        self.assertEqual(controller.state, FAILED)
        self.assertTrue(controller.is_fallback)
        self.assertEqual(controller.error, CONNECTION_NOTICE)
        self.assertEqual(controller.data, fallback_data.sample_inventory())

    def test_recovery_clears_error(self):
        client = FakeClient()
        controller = InventoryOverviewController(client)
        controller.refresh()
        client.routes.update(healthy_routes())
        controller.refresh()
        self.assertEqual(controller.state, READY)
        self.assertIsNone(controller.error)
        self.assertIsNone(controller.fallback_reason)

    def test_stale_result_is_dropped(self):
        controller = InventoryOverviewController(FakeClient(healthy_routes()))
        old_token = controller.scope.begin()
        controller.refresh()
        applied = controller.apply_result(old_token, Ok([]))
        self.assertFalse(applied)
        self.assertEqual(len(controller.data), 4)

    def test_result_after_close_is_dropped(self):
        controller = InventoryOverviewController(FakeClient(healthy_routes()))
        token = controller.scope.begin()
        controller.close()
        self.assertFalse(controller.apply_result(token, Ok([])))
        self.assertIsNone(controller.data)

    def test_known_unavailable_backend_skips_request(self):
        client = FakeClient()
        prober = AvailabilityProber(client)
        self.assertFalse(prober.probe())
        controller = InventoryOverviewController(client, prober)
        calls_before = len(client.calls)
        controller.refresh()
        self.assertEqual(len(client.calls), calls_before)
        self.assertTrue(controller.is_fallback)
        self.assertEqual(controller.data, fallback_data.sample_inventory())

    def test_base_hooks_are_abstract(self):
        controller = ViewController(FakeClient())
        with self.assertRaises(NotImplementedError):
            controller.load()
        with self.assertRaises(NotImplementedError):
            controller.fallback()


class TestFormSubmission(unittest.TestCase):
    """Mutations validate first, then reconcile with one full re-fetch"""

    def test_missing_fields_make_no_request(self):
        client = FakeClient(healthy_routes())
        controller = InventoryOverviewController(client)
        controller.open_form(name="Basil")
        self.assertFalse(controller.add_item())
        self.assertEqual(client.calls, [])
        self.assertTrue(controller.form_open)
        notices = controller.drain_notices()
        self.assertEqual(notices[0].title, "Missing information")
        self.assertEqual(notices[0].variant, "destructive")

    def test_success_posts_once_then_refetches_once(self):
        routes = healthy_routes()
        routes["POST /inventory/save"] = {"inventory_id": 15}
        client = FakeClient(routes)
        controller = InventoryOverviewController(client)
        controller.open_form()
        controller.update_form(**filled_item_form())

        self.assertTrue(controller.add_item())

        self.assertEqual([(method, path) for method, path, _ in client.calls],
                         [("POST", "/inventory/save"), ("GET", "/inventory/getAll")])
        self.assertEqual(client.calls[0][2]["name"], "Basil")
        self.assertFalse(controller.form_open)
        self.assertEqual(controller.form, controller.default_form())
        self.assertEqual(controller.state, READY)
        notices = controller.drain_notices()
        self.assertEqual(notices[0].title, "Success")
        self.assertEqual(notices[0].description, "Basil has been added to inventory")

    def test_rejected_write_keeps_form_open(self):
        routes = healthy_routes()
        routes["POST /inventory/save"] = ServerError(400, "Invalid quantity")
        client = FakeClient(routes)
        controller = InventoryOverviewController(client)
        controller.open_form()
        controller.update_form(**filled_item_form())

        self.assertFalse(controller.add_item())

        self.assertEqual(len(client.calls_for("GET")), 0)
        self.assertTrue(controller.form_open)
        self.assertEqual(controller.form["name"], "Basil")
        notices = controller.drain_notices()
        self.assertEqual((notices[0].title, notices[0].description),
                         ("Error", "Failed to add item to inventory"))

    def test_drain_empties_notices(self):
        controller = InventoryOverviewController(FakeClient())
        controller.notify("Title", "Text")
        self.assertEqual(len(controller.drain_notices()), 1)
        self.assertEqual(controller.drain_notices(), [])


if __name__ == '__main__':
    unittest.main()
