"""
Supplier directory UI components for the Restaurant Inventory dashboard.
"""
import sys
import os
import logging

from dash import dcc, html, Input, Output, State, callback_context, no_update
from dash.exceptions import PreventUpdate
import dash_bootstrap_components as dbc

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ui.core import (
    create_error_message, create_fallback_banner, create_notice_toasts, create_notice_area,
    create_form_field, create_status_badge, to_options, form_text, get_controller
)
from src.controllers.suppliers import SUPPLIER_STATUSES
from src.controllers.status import supplier_status_color

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger('suppliers_ui')

# Import settings if available
try:
    from config.settings import SUPPLIER_CATEGORIES
except ImportError:
    SUPPLIER_CATEGORIES = ["Produce", "Meat", "Dairy", "Bakery", "Pantry", "Beverages", "Seafood"]

SUPPLIER_FORM_FIELDS = ["company", "contact_person", "email", "mobile", "address", "status"]
ALL_STATUSES = "all"


def create_supplier_form(form):
    """
    Create the fields of the add-supplier form.

    Args:
        form: Current form values

    Returns:
        dbc.Form: Form component
    """
    return dbc.Form([
        dbc.Row([
            create_form_field("Company", dbc.Input(id="suppliers-form-company", value=form.get("company"))),
            create_form_field("Contact Person", dbc.Input(
                id="suppliers-form-contact_person", value=form.get("contact_person"))),
        ]),
        dbc.Row([
            create_form_field("Email", dbc.Input(id="suppliers-form-email", type="email", value=form.get("email"))),
            create_form_field("Mobile", dbc.Input(id="suppliers-form-mobile", value=form.get("mobile"))),
        ]),
        dbc.Row([
            create_form_field("Address", dbc.Input(id="suppliers-form-address", value=form.get("address")), width=8),
            create_form_field("Status", dcc.Dropdown(
                id="suppliers-form-status", options=to_options(SUPPLIER_STATUSES),
                value=form.get("status"), clearable=False), width=4),
        ]),
        dbc.Label("Categories", className="small fw-bold"),
        dbc.Checklist(
            id="suppliers-form-categories",
            options=to_options(SUPPLIER_CATEGORIES),
            value=list(form.get("categories") or []),
            inline=True
        ),
    ])


def create_supplier_card(supplier):
    return dbc.Card([
        dbc.CardHeader(html.Div([
            html.Strong(supplier.company, className="flex-grow-1"),
            create_status_badge(supplier.status, supplier_status_color(supplier.status)),
        ], className="d-flex align-items-center")),
        dbc.CardBody([
            html.P([html.I(className="fas fa-user me-2"), supplier.contact_person], className="mb-1 small"),
            html.P([html.I(className="fas fa-envelope me-2"), supplier.email], className="mb-1 small"),
            html.P([html.I(className="fas fa-phone me-2"), supplier.mobile], className="mb-1 small"),
            html.P([html.I(className="fas fa-map-marker-alt me-2"), supplier.address], className="mb-2 small"),
            html.Div([dbc.Badge(category, color="light", text_color="dark", className="me-1")
                      for category in supplier.category_list]),
        ]),
    ], className="mb-3 shadow-sm h-100")


def create_supplier_cards(controller):
    suppliers = controller.visible_suppliers()
    if not suppliers:
        return html.P(controller.empty_message, className="text-muted text-center py-4")
    return dbc.Row([dbc.Col(create_supplier_card(supplier), md=6, lg=4, className="mb-3")
                    for supplier in suppliers])


def create_suppliers_tab_content(controller):
    """
    Create content for the suppliers tab.

    Args:
        controller: Mounted SuppliersController

    Returns:
        html.Div: Tab content
    """
    return html.Div([
        create_notice_area("suppliers-notices"),
        html.Div(id="suppliers-banner", children=create_fallback_banner(controller)),
        dbc.Row([
            dbc.Col(html.H4("Suppliers", className="mb-0"), md=3),
            dbc.Col(dbc.Input(id="suppliers-search", placeholder="Search suppliers...",
                              debounce=True, value=controller.search_term), md=4),
            dbc.Col(dcc.Dropdown(
                id="suppliers-status-filter",
                options=[{"label": "All Statuses", "value": ALL_STATUSES}] + to_options(SUPPLIER_STATUSES),
                value=controller.status_filter or ALL_STATUSES, clearable=False), md=2),
            dbc.Col(dbc.Button([html.I(className="fas fa-plus me-2"), "Add Supplier"],
                               id="suppliers-add-button", color="primary"), md=3, className="text-end"),
        ], className="mb-3", align="center"),
        dcc.Loading(html.Div(id="suppliers-cards", children=create_supplier_cards(controller))),
        dbc.Modal([
            dbc.ModalHeader(dbc.ModalTitle("Add Supplier")),
            dbc.ModalBody(id="suppliers-form-body", children=create_supplier_form(controller.form)),
            dbc.ModalFooter([
                dbc.Button("Cancel", id="suppliers-cancel-button", color="secondary", outline=True),
                dbc.Button("Add Supplier", id="suppliers-save-button", color="primary"),
            ]),
        ], id="suppliers-modal", is_open=False, size="lg"),
    ])


def register_suppliers_callbacks(app):
    """
    Register supplier-related callbacks.

    Args:
        app: Dash app instance
    """
    @app.callback(
        [
            Output("suppliers-cards", "children"),
            Output("suppliers-banner", "children"),
            Output("suppliers-notices", "children"),
            Output("suppliers-modal", "is_open"),
            Output("suppliers-form-body", "children"),
        ],
        [
            Input("suppliers-search", "value"),
            Input("suppliers-status-filter", "value"),
            Input("suppliers-add-button", "n_clicks"),
            Input("suppliers-cancel-button", "n_clicks"),
            Input("suppliers-save-button", "n_clicks"),
        ],
        [State("session-id", "data")]
        + [State(f"suppliers-form-{field}", "value") for field in SUPPLIER_FORM_FIELDS]
        + [State("suppliers-form-categories", "value")],
        prevent_initial_call=True
    )
    def update_suppliers(search, status, add_clicks, cancel_clicks, save_clicks, session_id, *form_values):
        """Handle every interaction on the suppliers screen"""
        controller = get_controller(app, session_id, "suppliers")
        if controller is None:
            raise PreventUpdate

        triggered = callback_context.triggered_id
        modal_open, form_body = no_update, no_update

        try:
            if triggered == "suppliers-search":
                controller.set_search(search)
            elif triggered == "suppliers-status-filter":
                controller.set_status_filter(status)
            elif triggered == "suppliers-add-button":
                controller.open_form()
                modal_open = True
                form_body = create_supplier_form(controller.form)
            elif triggered == "suppliers-cancel-button":
                controller.close_form()
                modal_open = False
            elif triggered == "suppliers-save-button":
                *field_values, categories = form_values
                controller.update_form(**{
                    field: form_text(value) for field, value in zip(SUPPLIER_FORM_FIELDS, field_values)
                })
                for category in sorted(set(categories or []) ^ set(controller.form.get("categories") or [])):
                    controller.toggle_category(category)
                controller.add_supplier()
                modal_open = controller.form_open

            return (
                create_supplier_cards(controller),
                create_fallback_banner(controller),
                create_notice_toasts(controller.drain_notices()),
                modal_open,
                form_body,
            )
        except Exception as e:
            logger.error(f"Error updating suppliers: {str(e)}", exc_info=True)
            return (no_update, no_update, create_error_message(f"Error updating suppliers: {str(e)}"),
                    no_update, no_update)
