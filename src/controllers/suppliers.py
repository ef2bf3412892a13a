"""
Suppliers screen controller.
"""
from src.controllers.base import ViewController, matches_search
from src.data import fallback_data
from src.data.models import join_categories
from src.services import fetchers

SUPPLIER_STATUSES = ("Active", "Inactive", "Pending")


def filter_suppliers(suppliers, search_term, status=None):
    return [
        supplier for supplier in suppliers
        if matches_search(search_term, supplier.company, supplier.categories)
        and (not status or supplier.status == status)
    ]


class SuppliersController(ViewController):
    """Supplier cards with search, status filter and the add-supplier form."""

    name = "suppliers"
    empty_message = "No suppliers found."
    required_fields = ("company", "email", "mobile")

    def __init__(self, client, prober=None):
        super().__init__(client, prober)
        self.search_term = ""
        self.status_filter = None

    def default_form(self):
        return {
            "company": "",
            "contact_person": "",
            "email": "",
            "mobile": "",
            "address": "",
            "categories": [],
            "status": "Active",
        }

    def load(self):
        return fetchers.get_suppliers(self.client)

    def fallback(self):
        return fallback_data.sample_suppliers()

    def set_search(self, search_term):
        self.search_term = search_term or ""

    def set_status_filter(self, status):
        self.status_filter = status if status in SUPPLIER_STATUSES else None

    def visible_suppliers(self):
        return filter_suppliers(self.data or [], self.search_term, self.status_filter)

    def toggle_category(self, category):
        categories = list(self.form.get("categories") or [])
        if category in categories:
            categories.remove(category)
        else:
            categories.append(category)
        self.form["categories"] = categories

    def add_supplier(self):
        payload = dict(self.form)
        payload["categories"] = join_categories(self.form.get("categories") or [])
        company = self.form.get("company")
        return self.submit_form(
            lambda body: fetchers.save_supplier(self.client, body),
            success_message=f"{company} has been added to your suppliers",
            failure_message="Failed to add supplier",
            payload=payload,
        )
