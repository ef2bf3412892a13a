"""
Core UI components and utilities for the Restaurant Inventory dashboard.
This module contains shared components and the app factory used across the UI.
"""
import os
import sys
import uuid
import logging
import threading
from collections import OrderedDict
from dataclasses import asdict, is_dataclass

import pandas as pd
import dash
from dash import html, dash_table
import dash_bootstrap_components as dbc

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger('ui_core')

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.services.api_client import ApiClient
from src.controllers import (
    InventoryStatsController, InventoryOverviewController, OrdersController,
    SuppliersController, AlertsController, AnalyticsController, RecipesController,
    LoginController, SettingsController
)

# Import settings if available
try:
    from config.settings import ASSETS_DIR, DEFAULT_TIMEFRAME, MAX_SESSIONS
except ImportError:
    ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    ASSETS_DIR = os.path.join(ROOT_DIR, "assets")
    DEFAULT_TIMEFRAME = "month"
    MAX_SESSIONS = 200

EXTERNAL_STYLESHEETS = [
    dbc.themes.BOOTSTRAP,
    'https://use.fontawesome.com/releases/v5.15.4/css/all.css',
]

# Bootstrap has no orange contextual color
COLOR_MAP = {
    "primary": "#3498db",
    "secondary": "#95a5a6",
    "success": "#2ecc71",
    "danger": "#e74c3c",
    "warning": "#f39c12",
    "info": "#1abc9c",
    "orange": "#fd7e14",
}

# Amount inputs stay text so decimal strings such as "22.50" are sent back unchanged
DECIMAL_PATTERN = r"[0-9]*([.][0-9]*)?"

# Controllers recreated every time their screen is shown. The old instance is
# closed first so a late result cannot land on a screen that was left.
SCREEN_CONTROLLERS = {
    "inventory_stats": InventoryStatsController,
    "alerts": AlertsController,
    "inventory": InventoryOverviewController,
    "orders": OrdersController,
    "suppliers": SuppliersController,
    "analytics": lambda client: AnalyticsController(client, timeframe=DEFAULT_TIMEFRAME),
}


def create_error_message(message, severity="danger"):
    """
    Create an error message component.

    Args:
        message: Error message to display
        severity: Alert severity (danger, warning, info)

    Returns:
        dbc.Alert: Error message component
    """
    icon_map = {
        "danger": "exclamation-triangle",
        "warning": "exclamation-circle",
        "info": "info-circle",
        "success": "check-circle"
    }

    icon = icon_map.get(severity, "exclamation-triangle")

    return dbc.Alert(
        [
            html.Div([
                html.I(className=f"fas fa-{icon} me-2 me-md-3", style={"fontSize": "1.25rem"}),
                html.P(message, className="mb-0 small flex-grow-1")
            ], className="d-flex align-items-center")
        ],
        color=severity,
        dismissable=True,
        className="mb-3 shadow-sm",
        style={"borderRadius": "6px", "border": "none", "padding": "0.75rem 1rem"}
    )


def create_fallback_banner(controller):
    """Warning shown above a panel that is displaying substitute data."""
    if not controller.error:
        return None
    return create_error_message(controller.error, "warning")


def create_info_card(title, value, color="primary", icon=None, subtitle=None, subtitle_color=None):
    """
    Create an information card component.

    Args:
        title: Card title
        value: Card value
        color: Card color
        icon: Card icon
        subtitle: Card subtitle
        subtitle_color: Text color of the subtitle

    Returns:
        dbc.Card: Information card component
    """
    bg_color = COLOR_MAP.get(color, COLOR_MAP["primary"])

    card_header = html.Div([
        html.I(className=f"fas fa-{icon} me-2", style={"opacity": "0.8"}) if icon else "",
        html.Span(title, style={"fontWeight": "600"})
    ], className="d-flex align-items-center")

    header_style = {
        "backgroundColor": bg_color,
        "color": "white",
        "padding": "0.75rem 1.25rem",
        "borderBottom": "none"
    }

    body = [html.H3(value, className="card-title", style={"fontWeight": "700", "fontSize": "1.75rem"})]
    if subtitle:
        style = {"color": COLOR_MAP[subtitle_color]} if subtitle_color in COLOR_MAP else {"opacity": "0.8"}
        body.append(html.P(subtitle, className="card-text small", style=style))

    return dbc.Card([
        dbc.CardHeader(card_header, style=header_style),
        dbc.CardBody(body, className="bg-white")
    ], style={"boxShadow": "0 4px 6px rgba(0, 0, 0, 0.1)", "border": "none", "borderRadius": "6px"},
        className="mb-4 metric-card")


def create_status_badge(label, color):
    """Badge for a status value; colors outside Bootstrap's set get an inline style."""
    if color in ("primary", "secondary", "success", "danger", "warning", "info"):
        return dbc.Badge(label, color=color, className="me-1")
    return dbc.Badge(label, color="light", className="me-1",
                     style={"backgroundColor": COLOR_MAP.get(color, COLOR_MAP["secondary"]), "color": "white"})


def create_notice_toasts(notices):
    """
    Render pending notices as toasts.

    Args:
        notices: List of Notice objects drained from a controller

    Returns:
        list: dbc.Toast components
    """
    return [
        dbc.Toast(
            notice.description,
            header=notice.title,
            icon="danger" if notice.variant == "destructive" else "success",
            duration=4000,
            dismissable=True,
            is_open=True,
            className="mb-2",
        )
        for notice in notices
    ]


def create_notice_area(notice_id):
    return html.Div(id=notice_id, style={"position": "fixed", "top": 70, "right": 20, "width": 320, "zIndex": 1080})


def to_options(values):
    return [{"label": value, "value": value} for value in values]


def form_text(value):
    """Normalize an input value to the string form the controllers keep."""
    if value is None:
        return ""
    return str(value)


def create_form_field(label, component, width=6):
    return dbc.Col([dbc.Label(label, className="small fw-bold"), component], md=width, className="mb-3")


def records_to_frame(records, columns):
    """
    Build a DataFrame from a list of records.

    Args:
        records: Dataclass records or dicts
        columns: Column names to keep, in display order

    Returns:
        pd.DataFrame: One row per record
    """
    rows = [asdict(record) if is_dataclass(record) else dict(record) for record in records or []]
    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows)[columns]


def status_cell_styles(column, status_colors):
    """Conditional DataTable styles coloring a status column by value."""
    return [
        {
            "if": {"filter_query": f'{{{column}}} = "{status}"', "column_id": column},
            "color": COLOR_MAP.get(color, COLOR_MAP["secondary"]),
            "fontWeight": "600",
        }
        for status, color in status_colors.items()
    ]


def create_records_table(table_id, df, column_labels, empty_message="No data available.", **kwargs):
    """
    Create a DataTable from a DataFrame.

    Args:
        table_id: Component id
        df: DataFrame to show
        column_labels: dict of column name -> header label
        empty_message: Text shown instead of an empty table

    An "id" column is not displayed; DataTable uses it as the row id.

    Returns:
        dash_table.DataTable or html.P
    """
    if df is None or len(df) == 0:
        return html.P(empty_message, className="text-muted text-center py-4")

    return dash_table.DataTable(
        id=table_id,
        columns=[{"name": column_labels.get(col, col), "id": col} for col in df.columns if col != "id"],
        data=df.to_dict("records"),
        page_size=15,
        sort_action="native",
        style_table={"overflowX": "auto"},
        style_cell={"textAlign": "left", "padding": "8px", "fontFamily": "inherit"},
        style_header={"backgroundColor": "#f8f9fa", "fontWeight": "600"},
        **kwargs
    )


def create_tab_layout():
    """
    Create the tabs of the dashboard.

    Returns:
        dict: Tab layout structure
    """
    return {
        'overview': dbc.Tab(label="Dashboard", tab_id="tab-overview"),
        'inventory': dbc.Tab(label="Inventory", tab_id="tab-inventory"),
        'orders': dbc.Tab(label="Orders", tab_id="tab-orders"),
        'suppliers': dbc.Tab(label="Suppliers", tab_id="tab-suppliers"),
        'recipes': dbc.Tab(label="Recipes", tab_id="tab-recipes"),
        'analytics': dbc.Tab(label="Analytics", tab_id="tab-analytics"),
        'settings': dbc.Tab(label="Settings", tab_id="tab-settings"),
    }


def new_session_id():
    return str(uuid.uuid4())


def create_session_controllers(client):
    """Controllers a browser session keeps for as long as it lives."""
    return {
        "login": LoginController(client),
        "recipes": RecipesController(),
        "settings": SettingsController(),
    }


def _close_all(controllers):
    for controller in controllers.values():
        close = getattr(controller, "close", None)
        if close is not None:
            close()


def session_controllers(app, session_id):
    """
    Get the controllers of one browser session, creating them on first use.

    The least recently used session is dropped once more than MAX_SESSIONS
    are held.

    Args:
        app: Dash app created by create_app
        session_id: Value of the session-id store

    Returns:
        dict: Controller name -> controller
    """
    with app.sessions_lock:
        controllers = app.sessions.get(session_id)
        if controllers is None:
            controllers = create_session_controllers(app.api_client)
            app.sessions[session_id] = controllers
            logger.debug(f"Created controllers for session {session_id}")
            while len(app.sessions) > MAX_SESSIONS:
                evicted_id, evicted = app.sessions.popitem(last=False)
                _close_all(evicted)
                logger.info(f"Dropped controllers of idle session {evicted_id}")
        else:
            app.sessions.move_to_end(session_id)
    return controllers


def get_controller(app, session_id, name):
    return session_controllers(app, session_id).get(name)


def open_screen_controller(app, session_id, name, factory=None):
    """
    Replace a screen's controller with a fresh one and mount it.

    Args:
        app: Dash app created by create_app
        session_id: Browser session the screen belongs to
        name: Key in SCREEN_CONTROLLERS, or any name when factory is given
        factory: Callable taking the API client (defaults to SCREEN_CONTROLLERS[name])

    Returns:
        The mounted controller
    """
    controllers = session_controllers(app, session_id)
    previous = controllers.get(name)
    if previous is not None:
        previous.close()
    controller = (factory or SCREEN_CONTROLLERS[name])(app.api_client)
    controllers[name] = controller
    controller.mount()
    return controller


def close_screen_controllers(app, session_id, names):
    controllers = session_controllers(app, session_id)
    for name in names:
        controller = controllers.pop(name, None)
        if controller is not None:
            controller.close()


def create_app(api_url=None, timeout=None, client=None):
    """
    Create the Dash application and the objects its screens share.

    Args:
        api_url: Backend base URL (defaults to the configured one)
        timeout: Per-request timeout in seconds
        client: Prebuilt ApiClient, mainly for tests

    Returns:
        dash.Dash: The app, with api_client and the per-session controller registry attached
    """
    app = dash.Dash(__name__,
                    external_stylesheets=EXTERNAL_STYLESHEETS,
                    suppress_callback_exceptions=True,
                    title="Restaurant Inventory",
                    meta_tags=[
                        {"name": "viewport", "content": "width=device-width, initial-scale=1, shrink-to-fit=no"}
                    ],
                    assets_folder=ASSETS_DIR)

    app.api_client = client if client is not None else ApiClient(api_url, timeout)
    logger.info(f"Dashboard using backend at {app.api_client.base_url}")

    # Controllers are held per browser session, keyed by the session-id store
    app.sessions = OrderedDict()
    app.sessions_lock = threading.Lock()
    return app
