"""
Alerts panel controller.

Alerts are built on the client from three inventory lists (low stock,
expiring soon, out of stock). They have no identity on the backend, so
dismissing one only removes it from the list held here.
"""
from datetime import date

from src.controllers.base import ViewController
from src.controllers.orders import SupplierNamesMixin, new_order_form, ORDER_REQUIRED_FIELDS
from src.data import fallback_data
from src.data.models import Alert
from src.services import fetchers
from src.services.errors import PartialAggregateFailure
from src.services.fetchers import Ok, Fallback


def _format_date(value):
    try:
        return date.fromisoformat(value).strftime("%m/%d/%Y")
    except (TypeError, ValueError):
        return value or "unknown date"


def low_stock_alert(item):
    return Alert(
        id=f"low_stock_{item.inventory_id}",
        type="low_stock",
        title="Low Stock Alert",
        description=f"{item.name} is running low ({item.quantity} {item.unit} remaining)",
        time="Recent",
        priority="medium",
        item=item,
    )


def expiring_alert(item):
    return Alert(
        id=f"expiring_{item.inventory_id}",
        type="expiring",
        title="Expiring Soon",
        description=f"{item.name} expires on {_format_date(item.exp_date)}",
        time="Recent",
        priority="medium",
        item=item,
    )


def out_of_stock_alert(item):
    return Alert(
        id=f"out_of_stock_{item.inventory_id}",
        type="out_of_stock",
        title="Out of Stock",
        description=f"{item.name} is out of stock",
        time="Recent",
        priority="high",
        item=item,
    )


def build_alerts(low_stock, expiring, out_of_stock):
    """Merge the three source lists into one alert list, in source order."""
    return (
        [low_stock_alert(item) for item in low_stock or []]
        + [expiring_alert(item) for item in expiring or []]
        + [out_of_stock_alert(item) for item in out_of_stock or []]
    )


class AlertsController(SupplierNamesMixin, ViewController):
    """Alerts list with local dismissal and an order form pre-filled from an alert."""

    name = "alerts"
    empty_message = "No alerts at this time."
    required_fields = ORDER_REQUIRED_FIELDS

    def default_form(self):
        return new_order_form()

    def mount(self):
        self.load_supplier_names()
        return super().mount()

    def load(self):
        results = self.run_parallel({
            "low_stock": lambda: fetchers.get_low_stock_items(self.client),
            "expiring": lambda: fetchers.get_expiring_items(self.client),
            "out_of_stock": lambda: fetchers.get_out_of_stock_items(self.client),
        })
        failures = {name: result.reason for name, result in results.items() if not result.ok}
        if failures:
            error = PartialAggregateFailure(failures)
            self.logger.error(f"Failed to fetch alerts: {error}")
            return Fallback(self.fallback(), str(error))
        return Ok(build_alerts(
            results["low_stock"].data,
            results["expiring"].data,
            results["out_of_stock"].data,
        ))

    def fallback(self):
        return build_alerts(
            fallback_data.sample_low_stock(),
            fallback_data.sample_expiring(),
            fallback_data.sample_out_of_stock(),
        )

    def dismiss(self, alert_id):
        with self._lock:
            self.data = [alert for alert in self.data or [] if alert.id != alert_id]

    def take_action(self, alert_id):
        """Open the new-order form pre-filled from the given alert."""
        for alert in self.data or []:
            if alert.id == alert_id:
                self.open_form(
                    name=alert.item.name,
                    category=alert.item.category,
                    quantity="10" if alert.type == "out_of_stock" else "5",
                    unit=alert.item.unit,
                )
                return alert
        return None

    def create_order(self):
        return self.submit_form(
            lambda payload: fetchers.save_order(self.client, payload),
            success_message="Order created successfully",
            failure_message="Failed to create order. Please try again.",
        )
