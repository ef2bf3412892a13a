"""
Orders UI components for the Restaurant Inventory dashboard.
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
    create_records_table, create_form_field, records_to_frame, status_cell_styles,
    to_options, form_text, get_controller, DECIMAL_PATTERN
)
from src.controllers.status import ORDER_STATUS_COLORS

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger('orders_ui')

# Import settings if available
try:
    from config.settings import ORDER_CATEGORIES, UNITS
except ImportError:
    ORDER_CATEGORIES = ["Pantry", "Dairy", "Meat", "Produce", "Bakery", "Beverages"]
    UNITS = ["Kg", "g", "L", "ml", "pcs", "dozen", "box"]

ORDER_STATUSES = ["Requested", "In Transit", "Delivered", "Cancelled"]
ORDER_FORM_FIELDS = ["name", "category", "supplier", "delivery", "quantity", "unit", "price"]
EDIT_FORM_FIELDS = ["delivery", "status", "quantity", "price"]

ORDER_COLUMNS = ["order_id", "name", "supplier", "category", "amount", "price", "created", "delivery", "status"]
ORDER_LABELS = {
    "order_id": "Order ID",
    "name": "Item",
    "supplier": "Supplier",
    "category": "Category",
    "amount": "Quantity",
    "price": "Price",
    "created": "Created",
    "delivery": "Delivery",
    "status": "Status",
}


def create_order_form(prefix, form, supplier_names):
    """
    Create the fields of a new-order form.

    Args:
        prefix: Component id prefix, so the form can appear on several screens
        form: Current form values
        supplier_names: Company names offered in the supplier dropdown

    Returns:
        dbc.Form: Form component
    """
    return dbc.Form([
        dbc.Row([
            create_form_field("Item Name", dbc.Input(id=f"{prefix}-form-name", value=form.get("name"))),
            create_form_field("Category", dcc.Dropdown(
                id=f"{prefix}-form-category", options=to_options(ORDER_CATEGORIES),
                value=form.get("category"), clearable=False)),
        ]),
        dbc.Row([
            create_form_field("Supplier", dcc.Dropdown(
                id=f"{prefix}-form-supplier", options=to_options(supplier_names),
                value=form.get("supplier") or None, placeholder="Select supplier")),
            create_form_field("Delivery Date", dbc.Input(
                id=f"{prefix}-form-delivery", type="date", value=form.get("delivery"))),
        ]),
        dbc.Row([
            create_form_field("Quantity", dbc.Input(
                id=f"{prefix}-form-quantity", type="text", inputmode="numeric", pattern=DECIMAL_PATTERN, value=form.get("quantity")), width=4),
            create_form_field("Unit", dcc.Dropdown(
                id=f"{prefix}-form-unit", options=to_options(UNITS),
                value=form.get("unit"), clearable=False), width=4),
            create_form_field("Price", dbc.Input(
                id=f"{prefix}-form-price", type="text", inputmode="numeric", pattern=DECIMAL_PATTERN, value=form.get("price")), width=4),
        ]),
    ])


def order_form_states(prefix):
    return [State(f"{prefix}-form-{field}", "value") for field in ORDER_FORM_FIELDS]


def order_form_values(values):
    return {field: form_text(value) for field, value in zip(ORDER_FORM_FIELDS, values)}


def create_edit_form(form=None):
    """Edit form for an existing order; only mutable fields are inputs."""
    form = form or {}
    return html.Div([
        html.P(id="orders-edit-title", className="mb-3"),
        dbc.Row([
            create_form_field("Delivery Date", dbc.Input(
                id="orders-edit-delivery", type="date", value=form.get("delivery"))),
            create_form_field("Status", dcc.Dropdown(
                id="orders-edit-status", options=to_options(ORDER_STATUSES),
                value=form.get("status"), clearable=False)),
        ]),
        dbc.Row([
            create_form_field("Quantity", dbc.Input(
                id="orders-edit-quantity", type="text", inputmode="numeric", pattern=DECIMAL_PATTERN, value=form.get("quantity"))),
            create_form_field("Price", dbc.Input(
                id="orders-edit-price", type="text", inputmode="numeric", pattern=DECIMAL_PATTERN, value=form.get("price"))),
        ]),
    ])


def edit_title(order):
    return [html.Strong(f"{order.order_id}: "), f"{order.name} from {order.supplier}"]


def create_orders_table(controller):
    rows = [
        {
            "order_id": order.order_id,
            "name": order.name,
            "supplier": order.supplier,
            "category": order.category,
            "amount": f"{order.quantity} {order.unit}",
            "price": f"${order.price_decimal:,.2f}",
            "created": order.created,
            "delivery": order.delivery_label,
            "status": order.status,
        }
        for order in controller.visible_orders()
    ]
    df = records_to_frame(rows, ORDER_COLUMNS)
    return create_records_table("orders-table", df, ORDER_LABELS, controller.empty_message,
                                style_data_conditional=status_cell_styles("status", ORDER_STATUS_COLORS))


def order_select_options(controller):
    return [{"label": f"{order.order_id} - {order.name}", "value": order.order_id}
            for order in controller.data or []]


def create_orders_tab_content(controller):
    """
    Create content for the orders tab.

    Args:
        controller: Mounted OrdersController

    Returns:
        html.Div: Tab content
    """
    return html.Div([
        create_notice_area("orders-notices"),
        html.Div(id="orders-banner", children=create_fallback_banner(controller)),
        dbc.Row([
            dbc.Col(html.H4("Orders", className="mb-0"), md=4),
            dbc.Col(dbc.Input(id="orders-search", placeholder="Search orders...", debounce=True, value=""), md=4),
            dbc.Col(dbc.Button([html.I(className="fas fa-plus me-2"), "New Order"],
                               id="orders-new-button", color="primary"), md=4, className="text-end"),
        ], className="mb-3", align="center"),
        dbc.Tabs([
            dbc.Tab(label="All Orders", tab_id="all"),
            dbc.Tab(label="Requested", tab_id="requested"),
            dbc.Tab(label="Delivered", tab_id="delivered"),
        ], id="orders-status-tabs", active_tab=controller.active_tab, className="mb-3"),
        dcc.Loading(html.Div(id="orders-table-container", children=create_orders_table(controller))),
        dbc.Row([
            dbc.Col(dcc.Dropdown(id="orders-edit-select", options=order_select_options(controller),
                                 placeholder="Select an order to edit"), md=6),
            dbc.Col(dbc.Button("Edit Order", id="orders-edit-button", color="secondary", outline=True), md=2),
        ], className="mt-3"),
        dbc.Modal([
            dbc.ModalHeader(dbc.ModalTitle("New Order")),
            dbc.ModalBody(id="orders-form-body",
                          children=create_order_form("orders", controller.form, controller.supplier_names)),
            dbc.ModalFooter([
                dbc.Button("Cancel", id="orders-cancel-button", color="secondary", outline=True),
                dbc.Button("Create Order", id="orders-save-button", color="primary"),
            ]),
        ], id="orders-modal", is_open=False, size="lg"),
        dbc.Modal([
            dbc.ModalHeader(dbc.ModalTitle("Edit Order")),
            dbc.ModalBody(create_edit_form()),
            dbc.ModalFooter([
                dbc.Button("Cancel", id="orders-edit-cancel-button", color="secondary", outline=True),
                dbc.Button("Save Changes", id="orders-edit-save-button", color="primary"),
            ]),
        ], id="orders-edit-modal", is_open=False),
    ])


def register_orders_callbacks(app):
    """
    Register orders-related callbacks.

    Args:
        app: Dash app instance
    """
    @app.callback(
        [
            Output("orders-table-container", "children"),
            Output("orders-banner", "children"),
            Output("orders-notices", "children"),
            Output("orders-modal", "is_open"),
            Output("orders-form-body", "children"),
            Output("orders-edit-modal", "is_open"),
            Output("orders-edit-title", "children"),
        ] + [Output(f"orders-edit-{field}", "value") for field in EDIT_FORM_FIELDS] + [
            Output("orders-edit-select", "options"),
        ],
        [
            Input("orders-search", "value"),
            Input("orders-status-tabs", "active_tab"),
            Input("orders-new-button", "n_clicks"),
            Input("orders-cancel-button", "n_clicks"),
            Input("orders-save-button", "n_clicks"),
            Input("orders-edit-button", "n_clicks"),
            Input("orders-edit-cancel-button", "n_clicks"),
            Input("orders-edit-save-button", "n_clicks"),
        ],
        [State("session-id", "data"), State("orders-edit-select", "value")]
        + order_form_states("orders")
        + [State(f"orders-edit-{field}", "value") for field in EDIT_FORM_FIELDS],
        prevent_initial_call=True
    )
    def update_orders(search, active_tab, new_clicks, cancel_clicks, save_clicks,
                      edit_clicks, edit_cancel_clicks, edit_save_clicks, session_id, selected_id, *form_values):
        """Handle every interaction on the orders screen"""
        controller = get_controller(app, session_id, "orders")
        if controller is None:
            raise PreventUpdate

        new_values = form_values[:len(ORDER_FORM_FIELDS)]
        edit_values = form_values[len(ORDER_FORM_FIELDS):]
        triggered = callback_context.triggered_id
        modal_open, form_body = no_update, no_update
        edit_open, edit_heading = no_update, no_update
        edit_fields = [no_update] * len(EDIT_FORM_FIELDS)

        try:
            if triggered == "orders-search":
                controller.set_search(search)
            elif triggered == "orders-status-tabs":
                controller.set_tab(active_tab)
            elif triggered == "orders-new-button":
                controller.open_form()
                modal_open = True
                form_body = create_order_form("orders", controller.form, controller.supplier_names)
            elif triggered == "orders-cancel-button":
                controller.close_form()
                modal_open = False
            elif triggered == "orders-save-button":
                controller.update_form(**order_form_values(new_values))
                controller.create_order()
                modal_open = controller.form_open
            elif triggered == "orders-edit-button":
                order = controller.select_order(selected_id) if selected_id else None
                if order is not None:
                    edit_open = True
                    edit_heading = edit_title(order)
                    edit_fields = [controller.edit_form.get(field) for field in EDIT_FORM_FIELDS]
            elif triggered == "orders-edit-cancel-button":
                controller.cancel_edit()
                edit_open = False
            elif triggered == "orders-edit-save-button":
                controller.update_edit_form(**{
                    field: form_text(value) for field, value in zip(EDIT_FORM_FIELDS, edit_values)
                })
                controller.save_order_changes()
                edit_open = controller.edit_open

            return (
                create_orders_table(controller),
                create_fallback_banner(controller),
                create_notice_toasts(controller.drain_notices()),
                modal_open,
                form_body,
                edit_open,
                edit_heading,
                *edit_fields,
                order_select_options(controller),
            )
        except Exception as e:
            logger.error(f"Error updating orders: {str(e)}", exc_info=True)
            return (no_update, no_update, create_error_message(f"Error updating orders: {str(e)}"),
                    no_update, no_update, no_update, no_update, *([no_update] * len(EDIT_FORM_FIELDS)), no_update)
