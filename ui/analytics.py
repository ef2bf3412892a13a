"""
Analytics UI components for the Restaurant Inventory dashboard.

Charts are built with plotly from whichever data each panel controller holds,
so a panel showing substitute data renders exactly like a live one.
"""
import sys
import os
import logging

import plotly.graph_objects as go
from dash import dcc, html, Input, Output, State, callback_context, no_update
from dash.exceptions import PreventUpdate
import dash_bootstrap_components as dbc

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ui.core import (
    create_error_message, create_fallback_banner, create_info_card, create_notice_toasts,
    create_notice_area, create_records_table, records_to_frame, get_controller
)
from src.controllers.status import trend_color

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger('analytics_ui')

# Import settings if available
try:
    from config.settings import TIMEFRAMES
except ImportError:
    TIMEFRAMES = ["week", "month", "quarter", "year"]

TOP_ITEM_COLUMNS = ["name", "category", "usage", "costPerUnit", "totalCost"]
TOP_ITEM_LABELS = {
    "name": "Item",
    "category": "Category",
    "usage": "Usage",
    "costPerUnit": "Cost / Unit",
    "totalCost": "Total Cost",
}


def _trend_text(trend, change):
    arrow = "arrow-up" if trend == "up" else "arrow-down"
    return [html.I(className=f"fas fa-{arrow} me-1"), f"{change}% vs previous period"]


def create_summary_cards(controller):
    """
    Create the analytics summary cards.

    Args:
        controller: SummaryController

    Returns:
        dbc.Row: Row of info cards
    """
    summary = controller.data
    if summary is None:
        return html.P("Loading summary...", className="text-muted")

    return dbc.Row([
        dbc.Col(create_info_card(
            "Total Spent", f"${summary.totalSpent:,.2f}", "primary", "dollar-sign",
            subtitle=_trend_text(summary.spendingTrend, summary.spendingChange),
            subtitle_color=trend_color(summary.spendingTrend)), md=3),
        dbc.Col(create_info_card("Items Purchased", f"{summary.totalItems:,}", "info", "boxes"), md=3),
        dbc.Col(create_info_card("Average Cost", f"${summary.averageCost:,.2f}", "secondary", "calculator"), md=3),
        dbc.Col(create_info_card(
            "Wastage", f"{summary.wastagePercentage}%", "warning", "trash-alt",
            subtitle=_trend_text(summary.wasteTrend, summary.wasteChange),
            subtitle_color=trend_color(summary.wasteTrend)), md=3),
    ])


def create_usage_figure(points, timeframe):
    """
    Create the usage line chart.

    Args:
        points: UsagePoint records
        timeframe: Selected timeframe, used in the title

    Returns:
        go.Figure: Line chart
    """
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[point.date for point in points or []],
        y=[point.usage for point in points or []],
        mode="lines+markers",
        name="Usage",
        line=dict(color="#3498db", width=3),
    ))
    fig.update_layout(
        title=f"Inventory Usage ({timeframe.capitalize()})",
        xaxis_title="Period",
        yaxis_title="Usage",
        template="plotly_white",
        margin=dict(l=40, r=20, t=50, b=40),
        height=350,
    )
    return fig


def create_category_figure(shares):
    fig = go.Figure(go.Pie(
        labels=[share.name for share in shares or []],
        values=[share.value for share in shares or []],
        marker=dict(colors=[share.color for share in shares or []]),
        hole=0.4,
    ))
    fig.update_layout(title="Usage by Category", template="plotly_white",
                      margin=dict(l=20, r=20, t=50, b=20), height=350)
    return fig


def create_top_items_table(controller):
    rows = [
        {
            "name": item.name,
            "category": item.category,
            "usage": f"{item.usageAmount:g} {item.usageUnit}",
            "costPerUnit": f"${item.costPerUnit:,.2f}",
            "totalCost": f"${item.totalCost:,.2f}",
        }
        for item in controller.data or []
    ]
    df = records_to_frame(rows, TOP_ITEM_COLUMNS)
    return create_records_table("analytics-top-items-table", df, TOP_ITEM_LABELS, controller.empty_message)


def create_panel(title, banner_id, controller, body):
    return dbc.Card([
        dbc.CardHeader(html.Span(title, style={"fontWeight": "600"})),
        dbc.CardBody([html.Div(id=banner_id, children=create_fallback_banner(controller)), body]),
    ], className="mb-4 shadow-sm")


def create_analytics_tab_content(controller):
    """
    Create content for the analytics tab.

    Args:
        controller: Mounted AnalyticsController

    Returns:
        html.Div: Tab content
    """
    return html.Div([
        create_notice_area("analytics-notices"),
        dbc.Row([
            dbc.Col(html.H4("Analytics", className="mb-0"), md=8),
            dbc.Col(dcc.Dropdown(
                id="analytics-timeframe",
                options=[{"label": timeframe.capitalize(), "value": timeframe} for timeframe in TIMEFRAMES],
                value=controller.timeframe,
                clearable=False
            ), md=4),
        ], className="mb-3", align="center"),
        html.Div(id="analytics-connection-error",
                 children=create_error_message(controller.connection_error, "warning")
                 if controller.connection_error else None),
        html.Div(id="analytics-summary-banner", children=create_fallback_banner(controller.summary)),
        dcc.Loading(html.Div(id="analytics-summary", children=create_summary_cards(controller.summary))),
        dbc.Row([
            dbc.Col(create_panel(
                "Usage Over Time", "analytics-usage-banner", controller.usage,
                dcc.Graph(id="analytics-usage-chart",
                          figure=create_usage_figure(controller.usage.data, controller.timeframe))), md=7),
            dbc.Col(create_panel(
                "Category Breakdown", "analytics-categories-banner", controller.categories,
                dcc.Graph(id="analytics-category-chart",
                          figure=create_category_figure(controller.categories.data))), md=5),
        ]),
        create_panel("Top Items by Usage", "analytics-top-items-banner", controller.top_items,
                     create_top_items_table(controller.top_items)),
        html.Div(id="analytics-initial-notices", children=create_notice_toasts(controller.drain_notices())),
    ])


def register_analytics_callbacks(app):
    """
    Register analytics-related callbacks.

    Args:
        app: Dash app instance
    """
    @app.callback(
        [
            Output("analytics-summary", "children"),
            Output("analytics-summary-banner", "children"),
            Output("analytics-usage-chart", "figure"),
            Output("analytics-usage-banner", "children"),
            Output("analytics-notices", "children"),
        ],
        Input("analytics-timeframe", "value"),
        State("session-id", "data"),
        prevent_initial_call=True
    )
    def update_timeframe(timeframe, session_id):
        """Reload the timeframe-scoped panels"""
        controller = get_controller(app, session_id, "analytics")
        if controller is None or callback_context.triggered_id != "analytics-timeframe":
            raise PreventUpdate
        try:
            controller.set_timeframe(timeframe)
            return (
                create_summary_cards(controller.summary),
                create_fallback_banner(controller.summary),
                create_usage_figure(controller.usage.data, controller.timeframe),
                create_fallback_banner(controller.usage),
                create_notice_toasts(controller.drain_notices()),
            )
        except Exception as e:
            logger.error(f"Error updating analytics timeframe: {str(e)}", exc_info=True)
            return no_update, no_update, no_update, no_update, create_error_message(
                f"Error updating analytics: {str(e)}")
