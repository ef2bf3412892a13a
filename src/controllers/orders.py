"""
Orders screen controller.
"""
from datetime import date

from src.controllers.base import ViewController, matches_search, validate_required, UNAVAILABLE_REASON
from src.data import fallback_data
from src.data.models import Order
from src.services import fetchers
from src.services.errors import ValidationError
from src.services.fetchers import Fallback

ORDER_TABS = ("all", "requested", "delivered")
_TAB_STATUS = {"requested": "Requested", "delivered": "Delivered"}


def filter_orders(orders, search_term, tab):
    status = _TAB_STATUS.get(tab)
    return [
        order for order in orders
        if matches_search(search_term, order.name, order.supplier)
        and (status is None or order.status == status)
    ]


def new_order_form(**prefill):
    form = {
        "name": "",
        "category": "Pantry",
        "supplier": "",
        "created": date.today().isoformat(),
        "delivery": "",
        "status": "Requested",
        "quantity": "",
        "unit": "Kg",
        "price": "",
    }
    form.update(prefill)
    return form


ORDER_REQUIRED_FIELDS = ("name", "category", "supplier", "delivery", "quantity", "price")


class SupplierNamesMixin:
    """Loads the company names offered in order forms."""

    supplier_names = ()

    def load_supplier_names(self):
        if self.prober is not None and self.prober.known_unavailable():
            self.logger.info("Skipping supplier names fetch, backend known unavailable")
            result = Fallback(fallback_data.sample_supplier_names(), UNAVAILABLE_REASON)
        else:
            result = fetchers.get_supplier_names(self.client)
        if not result.ok:
            self.logger.warning(f"Failed to fetch supplier names: {result.reason}")
            self.notify("Error", "Failed to load supplier names", "destructive")
        self.supplier_names = list(result.data or [])
        return result


class OrdersController(SupplierNamesMixin, ViewController):
    """Orders list with tabs, search, new-order and edit-order forms."""

    name = "orders"
    empty_message = "No orders found."
    required_fields = ORDER_REQUIRED_FIELDS

    def __init__(self, client, prober=None):
        super().__init__(client, prober)
        self.search_term = ""
        self.active_tab = "all"
        self.selected_order = None
        self.edit_form = {}
        self.edit_open = False

    def default_form(self):
        return new_order_form()

    def mount(self):
        self.load_supplier_names()
        return super().mount()

    def load(self):
        return fetchers.get_orders(self.client)

    def fallback(self):
        return fallback_data.sample_orders()

    def set_search(self, search_term):
        self.search_term = search_term or ""

    def set_tab(self, tab):
        self.active_tab = tab if tab in ORDER_TABS else "all"

    def visible_orders(self):
        return filter_orders(self.data or [], self.search_term, self.active_tab)

    def create_order(self):
        name = self.form.get("name")
        return self.submit_form(
            lambda payload: fetchers.save_order(self.client, payload),
            success_message=f"Order for {name} has been created",
            failure_message="Failed to create order",
        )

    # Editing an existing order

    def select_order(self, order_id):
        for order in self.data or []:
            if order.order_id == order_id:
                self.selected_order = order
                self.edit_form = order.to_dict()
                self.edit_open = True
                return order
        self.logger.warning(f"Order {order_id} is not in the current list")
        return None

    def update_edit_form(self, **values):
        for key, value in values.items():
            if key in Order.EDITABLE_FIELDS:
                self.edit_form[key] = value
            else:
                self.logger.warning(f"Ignoring change to immutable order field '{key}'")

    def cancel_edit(self):
        self.selected_order = None
        self.edit_form = {}
        self.edit_open = False

    def save_order_changes(self):
        """
        Send the edited order and re-fetch the list.

        Returns:
            bool: True if the backend accepted the update
        """
        if self.selected_order is None:
            return False
        try:
            validate_required(self.edit_form, ("status", "quantity", "price"))
        except ValidationError as e:
            self.logger.info(f"Order edit rejected: {e}")
            self.notify("Missing information", "Please fill in all required fields", "destructive")
            return False

        payload = self.selected_order.to_dict()
        payload.update({key: self.edit_form.get(key) for key in Order.EDITABLE_FIELDS})
        if payload["delivery"] == "":
            payload["delivery"] = None

        result = fetchers.update_order(self.client, payload)
        if not result.ok:
            self.notify("Error", "Failed to update order", "destructive")
            return False

        self.notify("Success", "Order updated successfully")
        self.cancel_edit()
        self.refresh()
        return True
