import unittest
import sys
import os

# Add parent directory to path so we can import the project modules
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from fakes import FakeClient, healthy_routes
from src.controllers.analytics import AnalyticsController
from src.controllers.base import READY, FAILED
from src.data import fallback_data
from src.data.fallback_data import CONNECTION_NOTICE
from src.services.availability import AvailabilityProber


def make_controller(routes=None, timeframe="month"):
    client = FakeClient(routes)
    return client, AnalyticsController(client, AvailabilityProber(client), timeframe)


class TestAnalyticsController(unittest.TestCase):

    def test_mount_with_healthy_backend(self):
        client, controller = make_controller(healthy_routes())
        controller.mount()
        self.assertIsNone(controller.connection_error)
        for panel in controller.panels:
            self.assertEqual(panel.state, READY, panel.name)
        self.assertEqual(controller.summary.data.totalSpent, 500.0)
        self.assertEqual(client.calls[0][1], "/health")

    def test_unreachable_backend_uses_fallback_everywhere(self):
        client, controller = make_controller()
        controller.mount()
        self.assertEqual(controller.connection_error, CONNECTION_NOTICE)
        self.assertEqual(controller.summary.data, fallback_data.sample_summary())
        self.assertEqual(controller.usage.data, fallback_data.sample_usage("month"))
        self.assertEqual(controller.categories.data, fallback_data.sample_categories())
        self.assertEqual(controller.top_items.data, fallback_data.sample_top_items())
        for panel in controller.panels:
            self.assertEqual(panel.state, FAILED)
        # only the health check went out
        self.assertEqual(len(client.calls), 1)
        notices = controller.drain_notices()
        self.assertEqual(notices[0].title, "Connection Error")

    def test_one_failing_panel_does_not_blank_the_others(self):
        routes = healthy_routes()
        del routes["GET /analytics/categories"]
        _, controller = make_controller(routes)
        controller.mount()
        self.assertEqual(controller.categories.state, FAILED)
        self.assertEqual(controller.summary.state, READY)
        self.assertEqual(controller.usage.state, READY)

    def test_set_timeframe_refetches_scoped_panels(self):
        client, controller = make_controller(healthy_routes())
        controller.mount()
        client.calls.clear()
        controller.set_timeframe("year")
        self.assertEqual(sorted((path, params["timeframe"]) for _, path, params in client.calls),
                         [("/analytics/summary", "year"), ("/analytics/usage", "year")])
        self.assertEqual(controller.usage.timeframe, "year")

    def test_usage_fallback_follows_timeframe(self):
        for timeframe in ["week", "month", "quarter", "year"]:
            routes = healthy_routes()
            del routes["GET /analytics/usage"]
            _, controller = make_controller(routes)
            controller.mount()
            controller.set_timeframe(timeframe)
            self.assertEqual(controller.usage.data, fallback_data.sample_usage(timeframe))
            self.assertEqual(controller.usage.error, CONNECTION_NOTICE)

    def test_unknown_timeframe_is_rejected(self):
        _, controller = make_controller(healthy_routes())
        with self.assertRaises(ValueError):
            controller.set_timeframe("decade")
        self.assertEqual(controller.timeframe, "month")

    def test_invalid_initial_timeframe_uses_default(self):
        _, controller = make_controller(healthy_routes(), timeframe="decade")
        self.assertEqual(controller.timeframe, "month")

    def test_mount_clears_earlier_health_check(self):
        client, controller = make_controller(healthy_routes())
        controller.prober.known_available = False
        controller.mount()
        self.assertIsNone(controller.connection_error)
        self.assertEqual(controller.summary.state, READY)

    def test_each_mount_checks_health_again(self):
        client, controller = make_controller()
        controller.mount()
        self.assertEqual(controller.connection_error, CONNECTION_NOTICE)
        client.routes.update(healthy_routes())
        controller.mount()
        self.assertIsNone(controller.connection_error)
        self.assertEqual(len([call for call in client.calls if call[1] == "/health"]), 2)
        for panel in controller.panels:
            self.assertEqual(panel.state, READY, panel.name)

    def test_owns_a_prober_when_none_is_given(self):
        client = FakeClient(healthy_routes())
        controller = AnalyticsController(client)
        self.assertIsInstance(controller.prober, AvailabilityProber)
        self.assertIs(controller.summary.prober, controller.prober)

    def test_close_drops_results(self):
        _, controller = make_controller(healthy_routes())
        controller.close()
        controller.mount()
        for panel in controller.panels:
            self.assertIsNone(panel.data)


if __name__ == '__main__':
    unittest.main()
