"""
Overview dashboard module: inventory counters, the inventory overview and the
alerts panel.
"""
import sys
import os
import logging

from dash import dcc, html, Input, Output, State, ALL, callback_context, no_update
from dash.exceptions import PreventUpdate
import dash_bootstrap_components as dbc

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ui.core import (
    create_error_message, create_fallback_banner, create_info_card, create_notice_toasts,
    create_notice_area, create_status_badge, get_controller
)
from ui.inventory import create_inventory_tab_content, create_inventory_table
from ui.orders import create_order_form, order_form_states, order_form_values
from src.controllers.status import alert_icon, priority_color

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger('overview_ui')


def create_stats_cards(controller):
    """
    Create the four inventory counter cards.

    Args:
        controller: InventoryStatsController

    Returns:
        dbc.Row: Row of info cards
    """
    stats = controller.data
    if stats is None:
        return html.P("Loading inventory statistics...", className="text-muted")

    return dbc.Row([
        dbc.Col(create_info_card("Total Items", f"{stats.total_items:,}", "primary", "boxes"), md=3),
        dbc.Col(create_info_card("Low Stock", f"{stats.low_stock:,}", "warning", "exclamation-triangle"), md=3),
        dbc.Col(create_info_card("Expiring Soon", f"{stats.expiring_soon:,}", "orange", "clock"), md=3),
        dbc.Col(create_info_card("Inventory Value", f"${stats.inventory_value:,.2f}", "success", "dollar-sign"), md=3),
    ])


def create_alert_item(alert):
    icon, color = alert_icon(alert.type)
    priority = priority_color(alert.priority)
    return dbc.ListGroupItem([
        html.Div([
            html.I(className=f"fas fa-{icon} me-3", style={"fontSize": "1.25rem"}),
            html.Div([
                html.Div([
                    html.Strong(alert.title, className="me-2"),
                    create_status_badge(alert.priority.capitalize(), priority) if priority else None,
                ]),
                html.Small(alert.description, className="text-muted d-block"),
                html.Small(alert.time, className="text-muted"),
            ], className="flex-grow-1"),
            dbc.Button("Order", id={"type": "alert-action", "index": alert.id},
                       size="sm", color="primary", outline=True, className="me-2"),
            dbc.Button(html.I(className="fas fa-times"), id={"type": "alert-dismiss", "index": alert.id},
                       size="sm", color="light"),
        ], className="d-flex align-items-center"),
    ], color=color if color in ("warning", "danger") else None)


def create_alerts_list(controller):
    alerts = controller.data or []
    if not alerts:
        return html.P(controller.empty_message, className="text-muted text-center py-4")
    return dbc.ListGroup([create_alert_item(alert) for alert in alerts])


def create_overview_tab_content(stats_controller, alerts_controller, inventory_controller=None):
    """
    Create content for the overview tab.

    Args:
        stats_controller: Mounted InventoryStatsController
        alerts_controller: Mounted AlertsController
        inventory_controller: Mounted InventoryOverviewController shown beside the alerts

    Returns:
        html.Div: Tab content
    """
    alerts_card = dbc.Card([
        dbc.CardHeader(html.Span("Alerts", style={"fontWeight": "600"})),
        dbc.CardBody([
            html.Div(id="alerts-banner", children=create_fallback_banner(alerts_controller)),
            dcc.Loading(html.Div(id="alerts-list", children=create_alerts_list(alerts_controller))),
        ]),
    ], className="shadow-sm")

    if inventory_controller is None:
        columns = [dbc.Col(alerts_card)]
    else:
        columns = [
            dbc.Col(create_inventory_tab_content(inventory_controller), lg=8),
            dbc.Col(alerts_card, lg=4),
        ]

    return html.Div([
        create_notice_area("overview-notices"),
        dbc.Row([
            dbc.Col(html.H4("Dashboard", className="mb-0"), md=8),
            dbc.Col(dbc.Button([html.I(className="fas fa-sync-alt me-2"), "Refresh"],
                               id="overview-refresh-button", color="secondary", outline=True),
                    md=4, className="text-end"),
        ], className="mb-3", align="center"),
        html.Div(id="overview-stats-banner", children=create_fallback_banner(stats_controller)),
        dcc.Loading(html.Div(id="overview-stats", children=create_stats_cards(stats_controller),
                             className="mb-3")),
        dbc.Row(columns),
        dbc.Modal([
            dbc.ModalHeader(dbc.ModalTitle("Create Order")),
            dbc.ModalBody(id="alerts-form-body", children=create_order_form(
                "alerts", alerts_controller.form, alerts_controller.supplier_names)),
            dbc.ModalFooter([
                dbc.Button("Cancel", id="alerts-cancel-button", color="secondary", outline=True),
                dbc.Button("Create Order", id="alerts-save-button", color="primary"),
            ]),
        ], id="alerts-modal", is_open=False, size="lg"),
    ])


def register_overview_callbacks(app):
    """
    Register overview-related callbacks.

    Args:
        app: Dash app instance
    """
    @app.callback(
        [
            Output("overview-stats", "children"),
            Output("overview-stats-banner", "children"),
            Output("inventory-table-container", "children", allow_duplicate=True),
            Output("inventory-banner", "children", allow_duplicate=True),
        ],
        Input("overview-refresh-button", "n_clicks"),
        State("session-id", "data"),
        prevent_initial_call=True
    )
    def refresh_stats(n_clicks, session_id):
        """Reload the inventory counters and the inventory overview"""
        controller = get_controller(app, session_id, "inventory_stats")
        inventory = get_controller(app, session_id, "inventory")
        if controller is None or not n_clicks:
            raise PreventUpdate
        try:
            controller.refresh()
            table, banner = no_update, no_update
            if inventory is not None:
                inventory.refresh()
                table, banner = create_inventory_table(inventory), create_fallback_banner(inventory)
            return create_stats_cards(controller), create_fallback_banner(controller), table, banner
        except Exception as e:
            logger.error(f"Error refreshing inventory stats: {str(e)}", exc_info=True)
            return (no_update, create_error_message(f"Error refreshing inventory stats: {str(e)}"),
                    no_update, no_update)

    @app.callback(
        [
            Output("alerts-list", "children"),
            Output("alerts-banner", "children"),
            Output("overview-notices", "children"),
            Output("alerts-modal", "is_open"),
            Output("alerts-form-body", "children"),
        ],
        [
            Input("overview-refresh-button", "n_clicks"),
            Input({"type": "alert-dismiss", "index": ALL}, "n_clicks"),
            Input({"type": "alert-action", "index": ALL}, "n_clicks"),
            Input("alerts-cancel-button", "n_clicks"),
            Input("alerts-save-button", "n_clicks"),
        ],
        [State("session-id", "data")] + order_form_states("alerts"),
        prevent_initial_call=True
    )
    def update_alerts(refresh_clicks, dismiss_clicks, action_clicks, cancel_clicks, save_clicks,
                      session_id, *form_values):
        """Handle every interaction on the alerts panel"""
        controller = get_controller(app, session_id, "alerts")
        if controller is None:
            raise PreventUpdate

        triggered = callback_context.triggered_id
        # Re-rendering the list creates new buttons, which fires this callback with no click
        if not any(item.get("value") for item in callback_context.triggered):
            raise PreventUpdate

        modal_open, form_body = no_update, no_update

        try:
            if triggered == "overview-refresh-button":
                controller.refresh()
            elif isinstance(triggered, dict) and triggered.get("type") == "alert-dismiss":
                controller.dismiss(triggered["index"])
            elif isinstance(triggered, dict) and triggered.get("type") == "alert-action":
                if controller.take_action(triggered["index"]) is not None:
                    modal_open = True
                    form_body = create_order_form("alerts", controller.form, controller.supplier_names)
            elif triggered == "alerts-cancel-button":
                controller.close_form()
                modal_open = False
            elif triggered == "alerts-save-button":
                controller.update_form(**order_form_values(form_values))
                controller.create_order()
                modal_open = controller.form_open

            return (
                create_alerts_list(controller),
                create_fallback_banner(controller),
                create_notice_toasts(controller.drain_notices()),
                modal_open,
                form_body,
            )
        except Exception as e:
            logger.error(f"Error updating alerts: {str(e)}", exc_info=True)
            return (no_update, no_update, create_error_message(f"Error updating alerts: {str(e)}"),
                    no_update, no_update)
