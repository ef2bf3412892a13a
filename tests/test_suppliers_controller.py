import unittest
import sys
import os

# Add parent directory to path so we can import the project modules
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from fakes import FakeClient, healthy_routes
from src.controllers.suppliers import SuppliersController, filter_suppliers
from src.data import fallback_data
from src.data.models import split_categories


class TestFilterSuppliers(unittest.TestCase):

    def setUp(self):
        self.suppliers = fallback_data.sample_suppliers()

    def test_search_matches_company_or_categories(self):
        self.assertEqual([s.supplier_id for s in filter_suppliers(self.suppliers, "seafood")], [2])
        self.assertEqual([s.supplier_id for s in filter_suppliers(self.suppliers, "dairy")], [3])

    def test_status_filter(self):
        self.assertEqual([s.company for s in filter_suppliers(self.suppliers, "", "Inactive")],
                         ["Mediterranean Imports"])
        self.assertEqual(len(filter_suppliers(self.suppliers, "", None)), 4)


class TestSuppliersController(unittest.TestCase):

    def test_toggle_category(self):
        controller = SuppliersController(FakeClient())
        controller.toggle_category("Meat")
        controller.toggle_category("Seafood")
        controller.toggle_category("Meat")
        self.assertEqual(controller.form["categories"], ["Seafood"])

    def test_add_supplier_sends_joined_categories(self):
        routes = healthy_routes()
        routes["POST /supplier/save"] = {}
        client = FakeClient(routes)
        controller = SuppliersController(client)
        controller.open_form()
        controller.update_form(company="Harbor Fish", email="sales@harbor.test", mobile="555-0300")
        controller.toggle_category("Seafood")
        controller.toggle_category("Meat")

        self.assertTrue(controller.add_supplier())

        body = client.calls[0][2]
        self.assertEqual(client.calls[0][:2], ("POST", "/supplier/save"))
        self.assertEqual(body["categories"], "Seafood,Meat")
        self.assertEqual(split_categories(body["categories"]), ["Seafood", "Meat"])
        self.assertEqual(client.calls[1][:2], ("GET", "/supplier/getAll"))
        self.assertEqual(controller.form["categories"], [])
        self.assertEqual(controller.drain_notices()[0].description,
                         "Harbor Fish has been added to your suppliers")

    def test_add_supplier_requires_contact_details(self):
        client = FakeClient(healthy_routes())
        controller = SuppliersController(client)
        controller.open_form(company="Harbor Fish")
        self.assertFalse(controller.add_supplier())
        self.assertEqual(client.calls, [])

    def test_live_categories_are_split(self):
        controller = SuppliersController(FakeClient(healthy_routes()))
        controller.mount()
        self.assertEqual(controller.data[0].category_list, ["Produce", "Dairy"])
        controller.set_status_filter("Inactive")
        self.assertEqual([s.company for s in controller.visible_suppliers()], ["Ocean Catch"])
        controller.set_status_filter("Unknown")
        self.assertIsNone(controller.status_filter)


if __name__ == '__main__':
    unittest.main()
