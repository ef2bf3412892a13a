"""
Inventory management UI components for the Restaurant Inventory dashboard:
the inventory table, the add-item form and the item detail view.
"""
import sys
import os
import logging

from dash import dcc, html, Input, Output, State, callback_context, no_update
from dash.exceptions import PreventUpdate
import dash_bootstrap_components as dbc
import plotly.graph_objects as go

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Import core UI components
from ui.core import (
    create_error_message, create_fallback_banner, create_notice_toasts, create_notice_area,
    create_records_table, create_form_field, records_to_frame, status_cell_styles,
    create_status_badge, to_options, form_text, get_controller, open_screen_controller,
    close_screen_controllers, DECIMAL_PATTERN
)
from ui.orders import create_order_form, order_form_states, order_form_values, ORDER_FORM_FIELDS
from src.controllers.inventory import ALL_ITEMS, STATUS_FILTERS, InventoryItemController
from src.controllers.orders import new_order_form
from src.controllers.status import INVENTORY_STATUS_COLORS, inventory_status_color
from src.data.models import InventoryItem

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger('inventory_ui')

# Import settings if available
try:
    from config.settings import INVENTORY_CATEGORIES, UNITS
except ImportError:
    INVENTORY_CATEGORIES = ["Dairy", "Meat", "Produce", "Bakery", "Pantry", "Beverages"]
    UNITS = ["Kg", "g", "L", "ml", "pcs", "dozen", "box"]

ITEM_STATUSES = ["In Stock", "Low Stock", "Out of Stock", "Expiring Soon"]
ITEM_FORM_FIELDS = ["name", "category", "quantity", "unit", "status", "exp_date"]
ITEM_EDIT_FIELDS = list(InventoryItem.EDITABLE_FIELDS)

# Session key of the item detail controller
ITEM_CONTROLLER = "inventory_item"

INVENTORY_COLUMNS = ["inventory_id", "name", "category", "amount", "status", "exp_date"]
INVENTORY_LABELS = {
    "inventory_id": "ID",
    "name": "Item",
    "category": "Category",
    "amount": "Quantity",
    "status": "Status",
    "exp_date": "Expires",
}


def selected_filters(filters):
    """Checklist value for a status filter map."""
    return [name for name in [ALL_ITEMS] + STATUS_FILTERS if filters.get(name)]


def create_item_form(form):
    """
    Create the fields of the add-item form.

    Args:
        form: Current form values

    Returns:
        dbc.Form: Form component
    """
    return dbc.Form([
        dbc.Row([
            create_form_field("Item Name", dbc.Input(id="inventory-form-name", value=form.get("name"))),
            create_form_field("Category", dcc.Dropdown(
                id="inventory-form-category", options=to_options(INVENTORY_CATEGORIES),
                value=form.get("category"), clearable=False)),
        ]),
        dbc.Row([
            create_form_field("Quantity", dbc.Input(
                id="inventory-form-quantity", type="text", inputmode="numeric", pattern=DECIMAL_PATTERN, value=form.get("quantity"))),
            create_form_field("Unit", dcc.Dropdown(
                id="inventory-form-unit", options=to_options(UNITS),
                value=form.get("unit"), clearable=False)),
        ]),
        dbc.Row([
            create_form_field("Status", dcc.Dropdown(
                id="inventory-form-status", options=to_options(ITEM_STATUSES),
                value=form.get("status"), clearable=False)),
            create_form_field("Expiry Date", dbc.Input(
                id="inventory-form-exp_date", type="date", value=form.get("exp_date"))),
        ]),
    ])


def create_inventory_table(controller):
    rows = [
        {
            "id": item.inventory_id,
            "inventory_id": item.inventory_id,
            "name": item.name,
            "category": item.category,
            "amount": f"{item.quantity} {item.unit}",
            "status": item.status,
            "exp_date": item.exp_date,
        }
        for item in controller.visible_items()
    ]
    df = records_to_frame(rows, ["id"] + INVENTORY_COLUMNS)
    return create_records_table("inventory-table", df, INVENTORY_LABELS, controller.empty_message,
                                style_data_conditional=status_cell_styles("status", INVENTORY_STATUS_COLORS),
                                style_cell_conditional=[{"if": {"column_id": "name"}, "cursor": "pointer"}])


# Item detail view

def create_detail_field(label, value):
    return dbc.Col([
        html.P(label, className="small fw-bold text-muted mb-0"),
        html.P(value or "-", className="mb-2"),
    ], md=6)


def create_ingredient_usage_figure(usage, unit):
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[point.date for point in usage],
        y=[point.usage for point in usage],
        mode="lines+markers",
        name="Usage",
        line=dict(color="#3498db", width=2),
    ))
    fig.update_layout(
        height=280,
        margin=dict(l=40, r=20, t=20, b=40),
        yaxis_title=f"Usage ({unit})" if unit else "Usage",
        template="plotly_white",
    )
    return fig


def create_recipe_usage_list(recipe_usage):
    if not recipe_usage:
        return html.P("No recipes use this item.", className="text-muted")
    return dbc.ListGroup([
        dbc.ListGroupItem([
            html.Div([
                html.Strong(usage.name),
                html.Small(f"Last used: {usage.last_used}", className="text-muted"),
            ], className="d-flex justify-content-between"),
            html.Small(f"Uses {usage.usage_amount} {usage.unit} per serving. Frequency: {usage.frequency}",
                       className="text-muted"),
        ])
        for usage in recipe_usage
    ])


def create_item_detail(controller):
    """
    Body of the item detail modal.

    Args:
        controller: Mounted InventoryItemController

    Returns:
        Component showing the item, or the not-found message
    """
    if not controller.found:
        return html.P(controller.empty_message, className="text-muted text-center py-4")

    item = controller.data
    return dbc.Row([
        dbc.Col(dbc.Card([
            dbc.CardHeader(html.Span("Item Details", style={"fontWeight": "600"})),
            dbc.CardBody(dbc.Row([
                create_detail_field("Category", item.category),
                create_detail_field("Current Quantity", f"{item.quantity} {item.unit}"),
                create_detail_field("Status", item.status),
                create_detail_field("Expiry Date", item.exp_date),
            ])),
        ], className="shadow-sm mb-3"), md=5),
        dbc.Col(dbc.Card([
            dbc.CardHeader(html.Span("Usage Analytics", style={"fontWeight": "600"})),
            dbc.CardBody(dbc.Tabs([
                dbc.Tab(dcc.Graph(figure=create_ingredient_usage_figure(controller.usage, item.unit),
                                  config={"displayModeBar": False}),
                        label="Usage Trend"),
                dbc.Tab(html.Div(create_recipe_usage_list(controller.recipe_usage), className="pt-3"),
                        label="Recipes"),
            ])),
        ], className="shadow-sm mb-3"), md=7),
    ])


def create_detail_title(controller):
    if not controller.found:
        return f"Item #{controller.inventory_id}"
    item = controller.data
    return [item.name, " ", create_status_badge(item.status, inventory_status_color(item.status))]


def create_item_edit_form():
    """Static edit fields; their values are set when the edit section opens."""
    return dbc.Form([
        dbc.Row([
            create_form_field("Quantity", dbc.Input(
                id="inventory-detail-edit-quantity", type="text", inputmode="numeric", pattern=DECIMAL_PATTERN), width=3),
            create_form_field("Unit", dcc.Dropdown(
                id="inventory-detail-edit-unit", options=to_options(UNITS), clearable=False), width=3),
            create_form_field("Status", dcc.Dropdown(
                id="inventory-detail-edit-status", options=to_options(ITEM_STATUSES), clearable=False), width=3),
            create_form_field("Expiry Date", dbc.Input(
                id="inventory-detail-edit-exp_date", type="date"), width=3),
        ]),
    ])


def create_item_detail_modal():
    """Detail modal; every input lives in the layout from the start."""
    return dbc.Modal([
        dbc.ModalHeader(dbc.ModalTitle(id="inventory-detail-title")),
        dbc.ModalBody([
            create_notice_area("inventory-detail-notices"),
            html.Div(id="inventory-detail-banner"),
            html.Div(id="inventory-detail-body"),
            dbc.Collapse([
                html.H6("Order More", className="mt-2"),
                html.Div(id="inventory-detail-order-body",
                         children=create_order_form("inventory-detail", new_order_form(), [])),
                html.Div([
                    dbc.Button("Cancel", id="inventory-detail-order-cancel", color="secondary",
                               outline=True, className="me-2"),
                    dbc.Button("Create Order", id="inventory-detail-order-save", color="primary"),
                ], className="text-end"),
            ], id="inventory-detail-order-collapse", is_open=False),
            dbc.Collapse([
                html.H6("Edit Item", className="mt-2"),
                create_item_edit_form(),
                html.Div([
                    dbc.Button("Cancel", id="inventory-detail-edit-cancel", color="secondary",
                               outline=True, className="me-2"),
                    dbc.Button("Save Changes", id="inventory-detail-edit-save", color="primary"),
                ], className="text-end"),
            ], id="inventory-detail-edit-collapse", is_open=False),
        ]),
        dbc.ModalFooter([
            dbc.Button([html.I(className="fas fa-shopping-cart me-2"), "Order More"],
                       id="inventory-detail-order-button", color="primary", outline=True),
            dbc.Button([html.I(className="fas fa-edit me-2"), "Edit"],
                       id="inventory-detail-edit-button", color="secondary", outline=True),
            dbc.Button("Close", id="inventory-detail-close", color="secondary"),
        ]),
    ], id="inventory-detail-modal", is_open=False, size="xl")


def detail_view(controller, order_open=False, edit_open=False, order_body=no_update, load_edit_values=False):
    """Values for the outputs listed by detail_outputs(), in the same order."""
    edit_values = [controller.edit_form.get(field) if load_edit_values else no_update for field in ITEM_EDIT_FIELDS]
    return [
        True,
        create_detail_title(controller),
        create_fallback_banner(controller),
        create_item_detail(controller),
        create_notice_toasts(controller.drain_notices()),
        order_open,
        order_body,
        edit_open,
        *edit_values,
    ]


def detail_outputs(allow_duplicate=False):
    extra = {"allow_duplicate": True} if allow_duplicate else {}
    return [
        Output("inventory-detail-modal", "is_open", **extra),
        Output("inventory-detail-title", "children", **extra),
        Output("inventory-detail-banner", "children", **extra),
        Output("inventory-detail-body", "children", **extra),
        Output("inventory-detail-notices", "children", **extra),
        Output("inventory-detail-order-collapse", "is_open", **extra),
        Output("inventory-detail-order-body", "children", **extra),
        Output("inventory-detail-edit-collapse", "is_open", **extra),
    ] + [Output(f"inventory-detail-edit-{field}", "value", **extra) for field in ITEM_EDIT_FIELDS]


def open_item_detail(app, session_id, inventory_id):
    """Replace the session's item detail controller and mount it for inventory_id."""
    return open_screen_controller(
        app, session_id, ITEM_CONTROLLER,
        factory=lambda client: InventoryItemController(client, inventory_id),
    )


def create_inventory_tab_content(controller):
    """
    Create content for the inventory management tab.

    Args:
        controller: Mounted InventoryOverviewController

    Returns:
        html.Div: Tab content
    """
    return html.Div([
        create_notice_area("inventory-notices"),
        html.Div(id="inventory-banner", children=create_fallback_banner(controller)),
        dbc.Row([
            dbc.Col(html.H4("Inventory Overview", className="mb-0"), md=4),
            dbc.Col(dbc.Input(id="inventory-search", placeholder="Search inventory...",
                              debounce=True, value=controller.search_term), md=4),
            dbc.Col(dbc.Button([html.I(className="fas fa-plus me-2"), "Add Item"],
                               id="inventory-add-button", color="primary"), md=4, className="text-end"),
        ], className="mb-3", align="center"),
        dbc.Checklist(
            id="inventory-status-filters",
            options=to_options([ALL_ITEMS] + STATUS_FILTERS),
            value=selected_filters(controller.status_filters),
            inline=True,
            switch=True,
            className="mb-3"
        ),
        html.Small("Select an item to see its details.", className="text-muted d-block mb-2"),
        dcc.Loading(html.Div(id="inventory-table-container", children=create_inventory_table(controller))),
        dbc.Modal([
            dbc.ModalHeader(dbc.ModalTitle("Add Inventory Item")),
            dbc.ModalBody(id="inventory-form-body", children=create_item_form(controller.form)),
            dbc.ModalFooter([
                dbc.Button("Cancel", id="inventory-cancel-button", color="secondary", outline=True),
                dbc.Button("Add Item", id="inventory-save-button", color="primary"),
            ]),
        ], id="inventory-modal", is_open=False),
        create_item_detail_modal(),
    ])


def register_inventory_callbacks(app):
    """
    Register inventory-related callbacks.

    Args:
        app: Dash app instance
    """
    @app.callback(
        [
            Output("inventory-table-container", "children"),
            Output("inventory-banner", "children"),
            Output("inventory-notices", "children"),
            Output("inventory-modal", "is_open"),
            Output("inventory-form-body", "children"),
            Output("inventory-status-filters", "value"),
        ],
        [
            Input("inventory-search", "value"),
            Input("inventory-status-filters", "value"),
            Input("inventory-add-button", "n_clicks"),
            Input("inventory-cancel-button", "n_clicks"),
            Input("inventory-save-button", "n_clicks"),
        ],
        [State("session-id", "data")] + [State(f"inventory-form-{field}", "value") for field in ITEM_FORM_FIELDS],
        prevent_initial_call=True
    )
    def update_inventory(search, filter_values, add_clicks, cancel_clicks, save_clicks, session_id, *form_values):
        """Handle every interaction on the inventory screen"""
        controller = get_controller(app, session_id, "inventory")
        if controller is None:
            raise PreventUpdate

        triggered = callback_context.triggered_id
        modal_open, form_body = no_update, no_update

        try:
            if triggered == "inventory-search":
                controller.set_search(search)
            elif triggered == "inventory-status-filters":
                # The checklist reports the whole selection; apply each changed box as a toggle
                changed = set(filter_values or []) ^ set(selected_filters(controller.status_filters))
                for name in sorted(changed):
                    controller.toggle_filter(name)
            elif triggered == "inventory-add-button":
                controller.open_form()
                modal_open = True
                form_body = create_item_form(controller.form)
            elif triggered == "inventory-cancel-button":
                controller.close_form()
                modal_open = False
            elif triggered == "inventory-save-button":
                controller.update_form(**{
                    field: form_text(value) for field, value in zip(ITEM_FORM_FIELDS, form_values)
                })
                controller.add_item()
                modal_open = controller.form_open

            return (
                create_inventory_table(controller),
                create_fallback_banner(controller),
                create_notice_toasts(controller.drain_notices()),
                modal_open,
                form_body,
                selected_filters(controller.status_filters),
            )
        except Exception as e:
            logger.error(f"Error updating inventory: {str(e)}", exc_info=True)
            return (no_update, no_update, create_error_message(f"Error updating inventory: {str(e)}"),
                    no_update, no_update, no_update)

    @app.callback(
        detail_outputs(allow_duplicate=True),
        Input("inventory-table", "active_cell"),
        State("session-id", "data"),
        prevent_initial_call=True
    )
    def show_item_detail(active_cell, session_id):
        """Open the detail view of the clicked inventory row"""
        if not active_cell or active_cell.get("row_id") is None:
            raise PreventUpdate
        try:
            controller = open_item_detail(app, session_id, int(active_cell["row_id"]))
            return detail_view(controller)
        except Exception as e:
            logger.error(f"Error loading inventory item: {str(e)}", exc_info=True)
            outputs = [no_update] * len(detail_outputs())
            outputs[0] = True
            outputs[3] = create_error_message(f"Error loading inventory item: {str(e)}")
            return outputs

    @app.callback(
        detail_outputs() + [
            Output("inventory-table-container", "children", allow_duplicate=True),
            Output("inventory-banner", "children", allow_duplicate=True),
        ],
        [
            Input("inventory-detail-order-button", "n_clicks"),
            Input("inventory-detail-order-cancel", "n_clicks"),
            Input("inventory-detail-order-save", "n_clicks"),
            Input("inventory-detail-edit-button", "n_clicks"),
            Input("inventory-detail-edit-cancel", "n_clicks"),
            Input("inventory-detail-edit-save", "n_clicks"),
            Input("inventory-detail-close", "n_clicks"),
        ],
        [State("session-id", "data")]
        + order_form_states("inventory-detail")
        + [State(f"inventory-detail-edit-{field}", "value") for field in ITEM_EDIT_FIELDS],
        prevent_initial_call=True
    )
    def update_item_detail(order_clicks, order_cancel_clicks, order_save_clicks, edit_clicks,
                           edit_cancel_clicks, edit_save_clicks, close_clicks, session_id, *form_values):
        """Handle the actions of the item detail view"""
        controller = get_controller(app, session_id, ITEM_CONTROLLER)
        if controller is None:
            raise PreventUpdate

        order_values = form_values[:len(ORDER_FORM_FIELDS)]
        edit_values = form_values[len(ORDER_FORM_FIELDS):]
        triggered = callback_context.triggered_id
        overview = get_controller(app, session_id, "inventory")
        table, banner = no_update, no_update

        try:
            if triggered == "inventory-detail-close":
                close_screen_controllers(app, session_id, [ITEM_CONTROLLER])
                outputs = [no_update] * len(detail_outputs())
                outputs[0] = False
                if overview is not None:
                    # A fresh table clears the clicked cell so the same row can be opened again
                    table = create_inventory_table(overview)
                return outputs + [table, banner]

            order_open, edit_open, order_body = controller.form_open, controller.edit_open, no_update
            if triggered == "inventory-detail-order-button":
                order_open = controller.order_more()
                edit_open = False
                controller.cancel_edit()
                order_body = create_order_form("inventory-detail", controller.form, controller.supplier_names)
            elif triggered == "inventory-detail-order-cancel":
                controller.close_form()
                order_open = False
            elif triggered == "inventory-detail-order-save":
                controller.update_form(**order_form_values(order_values))
                controller.create_order()
                order_open = controller.form_open
            elif triggered == "inventory-detail-edit-button":
                edit_open = controller.open_edit()
                controller.close_form()
                order_open = False
            elif triggered == "inventory-detail-edit-cancel":
                controller.cancel_edit()
                edit_open = False
            elif triggered == "inventory-detail-edit-save":
                controller.update_edit_form(**{
                    field: form_text(value) for field, value in zip(ITEM_EDIT_FIELDS, edit_values)
                })
                if controller.save_item_changes() and overview is not None:
                    overview.refresh()
                    table, banner = create_inventory_table(overview), create_fallback_banner(overview)
                edit_open = controller.edit_open

            view = detail_view(controller, order_open=order_open, edit_open=edit_open, order_body=order_body,
                               load_edit_values=triggered == "inventory-detail-edit-button")
            return view + [table, banner]
        except Exception as e:
            logger.error(f"Error updating inventory item: {str(e)}", exc_info=True)
            outputs = [no_update] * (len(detail_outputs()) + 2)
            outputs[4] = create_error_message(f"Error updating inventory item: {str(e)}")
            return outputs
