import unittest
import sys
import os

# Add parent directory to path so we can import the project modules
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from fakes import FakeClient, healthy_routes
from src.controllers.alerts import AlertsController, build_alerts, expiring_alert
from src.controllers.base import READY, FAILED
from src.data import fallback_data
from src.data.models import InventoryItem
from src.services.errors import ServerError


class TestBuildAlerts(unittest.TestCase):

    def test_alerts_in_source_order(self):
        alerts = build_alerts(
            fallback_data.sample_low_stock(),
            fallback_data.sample_expiring(),
            fallback_data.sample_out_of_stock(),
        )
        self.assertEqual([alert.id for alert in alerts],
                         ["low_stock_1", "low_stock_6", "expiring_4", "out_of_stock_3"])
        self.assertEqual(alerts[-1].priority, "high")
        self.assertEqual(alerts[0].priority, "medium")

    def test_expiring_alert_formats_date(self):
        item = InventoryItem(9, "Cream", "Dairy", "1", "L", "Expiring Soon", "2025-06-05")
        self.assertEqual(expiring_alert(item).description, "Cream expires on 06/05/2025")

    def test_empty_sources(self):
        self.assertEqual(build_alerts([], None, []), [])


class TestAlertsController(unittest.TestCase):

    def test_all_sources_ok(self):
        controller = AlertsController(FakeClient(healthy_routes()))
        controller.mount()
        self.assertEqual(controller.state, READY)
        self.assertEqual([alert.id for alert in controller.data],
                         ["low_stock_11", "expiring_13", "out_of_stock_14"])

    def test_one_failing_source_fails_the_whole_panel(self):
        routes = healthy_routes()
        routes["GET /inventory/expiring-soon-all"] = ServerError(500)
        controller = AlertsController(FakeClient(routes))
        controller.refresh()
        self.assertEqual(controller.state, FAILED)
        self.assertEqual(controller.data, controller.fallback())
        self.assertEqual(len(controller.data), 4)
        self.assertIn("expiring", controller.fallback_reason)
        self.assertNotIn("low_stock:", controller.fallback_reason)

    def test_sources_are_fetched_together(self):
        client = FakeClient(healthy_routes())
        AlertsController(client).refresh()
        paths = sorted(path for _, path, _ in client.calls)
        self.assertEqual(paths, ["/inventory/expiring-soon-all", "/inventory/low-stock-all",
                                 "/inventory/out-of-stock-all"])

    def test_dismiss_is_local_until_refresh(self):
        client = FakeClient(healthy_routes())
        controller = AlertsController(client)
        controller.refresh()
        calls = len(client.calls)

        controller.dismiss("expiring_13")
        self.assertEqual([alert.id for alert in controller.data], ["low_stock_11", "out_of_stock_14"])
        self.assertEqual(len(client.calls), calls)

        controller.refresh()
        self.assertIn("expiring_13", [alert.id for alert in controller.data])

    def test_take_action_prefills_order_form(self):
        controller = AlertsController(FakeClient(healthy_routes()))
        controller.refresh()

        alert = controller.take_action("out_of_stock_14")
        self.assertEqual(alert.item.name, "Rice")
        self.assertTrue(controller.form_open)
        self.assertEqual((controller.form["name"], controller.form["quantity"], controller.form["unit"]),
                         ("Rice", "10", "Kg"))
        self.assertEqual(controller.form["status"], "Requested")

        controller.take_action("low_stock_11")
        self.assertEqual((controller.form["name"], controller.form["quantity"]), ("Basil", "5"))

    def test_take_action_unknown_alert(self):
        controller = AlertsController(FakeClient(healthy_routes()))
        controller.refresh()
        self.assertIsNone(controller.take_action("missing"))
        self.assertFalse(controller.form_open)

    def test_create_order_from_alert(self):
        routes = healthy_routes()
        routes["POST /order/save"] = {}
        client = FakeClient(routes)
        controller = AlertsController(client)
        controller.mount()
        controller.take_action("low_stock_11")
        controller.update_form(supplier="Green Farms", delivery="2025-07-02", price="12.00")
        client.calls.clear()

        self.assertTrue(controller.create_order())

        self.assertEqual(client.calls[0][:2], ("POST", "/order/save"))
        self.assertEqual(len(client.calls_for("GET")), 3)
        self.assertFalse(controller.form_open)
        notices = controller.drain_notices()
        self.assertEqual(notices[-1].description, "Order created successfully")


if __name__ == '__main__':
    unittest.main()
