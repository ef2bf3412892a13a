"""
Inventory screen controllers: dashboard counters, the inventory overview and
the single-item detail view.
"""
from src.controllers.base import ViewController, matches_search, validate_required
from src.controllers.orders import SupplierNamesMixin, new_order_form, ORDER_REQUIRED_FIELDS
from src.data import fallback_data
from src.data.models import InventoryItem
from src.services import fetchers
from src.services.errors import ValidationError

ALL_ITEMS = "All Items"
STATUS_FILTERS = ["Low Stock", "Expiring Soon", "Out of Stock"]


def default_status_filters():
    filters = {ALL_ITEMS: True}
    filters.update({status: False for status in STATUS_FILTERS})
    return filters


def toggle_status_filter(filters, name):
    """
    Toggle one status checkbox and return the new filter map.

    "All Items" is exclusive with the specific statuses. Clearing the last
    specific status selects "All Items" again, so the map never ends up with
    nothing selected.
    """
    if name == ALL_ITEMS:
        return default_status_filters()
    if name not in STATUS_FILTERS:
        return dict(filters)
    updated = dict(filters)
    updated[name] = not filters.get(name, False)
    updated[ALL_ITEMS] = False
    if not any(updated[status] for status in STATUS_FILTERS):
        updated[ALL_ITEMS] = True
    return updated


def active_statuses(filters):
    if filters.get(ALL_ITEMS, True):
        return frozenset()
    return frozenset(status for status in STATUS_FILTERS if filters.get(status))


def filter_inventory(items, search_term, statuses):
    """
    Filter inventory items by search text and status.

    Args:
        items: Inventory items currently held
        search_term: Text matched against name and category
        statuses: Set of statuses to keep; empty keeps every status

    Returns:
        list: Matching items in their original order
    """
    statuses = frozenset(statuses or ())
    return [
        item for item in items
        if matches_search(search_term, item.name, item.category)
        and (not statuses or item.status in statuses)
    ]


class InventoryStatsController(ViewController):
    """Counters shown at the top of the dashboard."""

    name = "inventory_stats"

    def load(self):
        return fetchers.get_inventory_stats(self.client)

    def fallback(self):
        return fallback_data.sample_inventory_stats()


class InventoryOverviewController(ViewController):
    """Inventory table with search, status filters and the add-item form."""

    name = "inventory_overview"
    empty_message = "No inventory items found."
    required_fields = ("name", "category", "quantity", "exp_date")

    def __init__(self, client, prober=None):
        super().__init__(client, prober)
        self.search_term = ""
        self.status_filters = default_status_filters()

    def default_form(self):
        return {
            "name": "",
            "category": "Dairy",
            "quantity": "",
            "unit": "Kg",
            "status": "In Stock",
            "exp_date": "",
        }

    def load(self):
        return fetchers.get_inventory_items(self.client)

    def fallback(self):
        return fallback_data.sample_inventory()

    def set_search(self, search_term):
        self.search_term = search_term or ""

    def toggle_filter(self, name):
        self.status_filters = toggle_status_filter(self.status_filters, name)

    def visible_items(self):
        return filter_inventory(self.data or [], self.search_term, active_statuses(self.status_filters))

    def add_item(self):
        name = self.form.get("name")
        return self.submit_form(
            lambda payload: fetchers.save_inventory_item(self.client, payload),
            success_message=f"{name} has been added to inventory",
            failure_message="Failed to add item to inventory",
        )


class InventoryItemController(SupplierNamesMixin, ViewController):
    """
    Detail view of one inventory item.

    data is the item, or None when neither the backend nor the fallback
    dataset knows the id. Usage history and recipe usage have no backend
    endpoint and always come from the sample data.
    """

    name = "inventory_item"
    empty_message = "Inventory item not found."
    required_fields = ORDER_REQUIRED_FIELDS
    edit_required_fields = ("quantity", "unit", "status", "exp_date")

    def __init__(self, client, inventory_id, prober=None):
        super().__init__(client, prober)
        self.inventory_id = inventory_id
        self.usage = fallback_data.sample_ingredient_usage()
        self.recipe_usage = fallback_data.sample_recipe_usage()
        self.edit_form = {}
        self.edit_open = False

    def default_form(self):
        return new_order_form()

    def mount(self):
        self.load_supplier_names()
        return super().mount()

    def load(self):
        return fetchers.get_inventory_item(self.client, self.inventory_id)

    def fallback(self):
        for item in fallback_data.sample_inventory():
            if item.inventory_id == self.inventory_id:
                return item
        return None

    @property
    def found(self):
        return self.data is not None

    def order_more(self):
        """Open the new-order form pre-filled from this item."""
        if not self.found:
            return False
        item = self.data
        self.open_form(
            name=item.name,
            category=item.category,
            quantity="10" if item.status == "Out of Stock" else "5",
            unit=item.unit,
        )
        return True

    def create_order(self):
        return self.submit_form(
            lambda payload: fetchers.save_order(self.client, payload),
            success_message=f"Order for {self.form.get('name')} has been created",
            failure_message="Failed to create order. Please try again.",
        )

    # Editing the item

    def open_edit(self):
        if not self.found:
            return False
        self.edit_form = {key: getattr(self.data, key) for key in InventoryItem.EDITABLE_FIELDS}
        self.edit_open = True
        return True

    def update_edit_form(self, **values):
        for key, value in values.items():
            if key in InventoryItem.EDITABLE_FIELDS:
                self.edit_form[key] = value
            else:
                self.logger.warning(f"Ignoring change to immutable item field '{key}'")

    def cancel_edit(self):
        self.edit_form = {}
        self.edit_open = False

    def save_item_changes(self):
        """
        Send the edited item and re-fetch it.

        Returns:
            bool: True if the backend accepted the update
        """
        if not self.edit_open or not self.found:
            return False
        try:
            validate_required(self.edit_form, self.edit_required_fields)
        except ValidationError as e:
            self.logger.info(f"{self.name} edit rejected: {e}")
            self.notify("Missing information", "Please fill in all required fields", "destructive")
            return False

        payload = self.data.to_dict()
        payload.update(self.edit_form)
        result = fetchers.update_inventory_item(self.client, payload)
        if not result.ok:
            self.notify("Error", "Failed to update item", "destructive")
            return False

        self.notify("Success", f"{self.data.name} has been updated")
        self.cancel_edit()
        self.refresh()
        return True
