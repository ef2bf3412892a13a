#!/usr/bin/env python3
"""
Main dashboard module for the Restaurant Inventory System.
This module builds the layout, wires the tab routing and registers the
callbacks of every screen.
"""
import sys
import os
import logging
import argparse
import traceback

from dash import dcc, html, Input, Output, State
import dash_bootstrap_components as dbc

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ui.core import (
    create_app, create_tab_layout, create_error_message, create_notice_area, new_session_id,
    session_controllers, open_screen_controller, close_screen_controllers, SCREEN_CONTROLLERS
)
from ui.overview import create_overview_tab_content, register_overview_callbacks
from ui.inventory import create_inventory_tab_content, register_inventory_callbacks, ITEM_CONTROLLER
from ui.orders import create_orders_tab_content, register_orders_callbacks
from ui.suppliers import create_suppliers_tab_content, register_suppliers_callbacks
from ui.recipes import create_recipes_tab_content, register_recipes_callbacks
from ui.analytics import create_analytics_tab_content, register_analytics_callbacks
from ui.account import (
    create_login_content, create_settings_tab_content, register_account_callbacks, HIDDEN, VISIBLE
)

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger('dashboard')

# Import settings if available
try:
    from config.settings import DASHBOARD_HOST, DASHBOARD_PORT, DEFAULT_TAB, RESTAURANT_NAME
except ImportError:
    DASHBOARD_HOST = "0.0.0.0"
    DASHBOARD_PORT = 8050
    DEFAULT_TAB = "tab-overview"
    RESTAURANT_NAME = "Restaurant Inventory"

# Backend-backed controllers each tab mounts when shown
TAB_CONTROLLERS = {
    "tab-overview": ["inventory_stats", "inventory", "alerts"],
    "tab-inventory": ["inventory"],
    "tab-orders": ["orders"],
    "tab-suppliers": ["suppliers"],
    "tab-analytics": ["analytics"],
}


def create_dashboard_layout(authenticated=False, session_id=None):
    """
    Create the main dashboard layout.

    Dash calls this on every page load, so each browser tab gets its own
    session id and with it its own set of controllers.

    Args:
        authenticated: Show the dashboard straight away instead of the login view
        session_id: Session id to use instead of a newly generated one

    Returns:
        html.Div: Dashboard layout
    """
    tabs = create_tab_layout()

    return html.Div([
        dcc.Store(id="session-id", data=session_id or new_session_id()),
        create_notice_area("login-notices"),
        html.Div(id="login-view", children=create_login_content(),
                 style=HIDDEN if authenticated else VISIBLE),
        html.Div(id="dashboard-view", style=VISIBLE if authenticated else HIDDEN, children=[
            dbc.Navbar(
                dbc.Container([
                    dbc.NavbarBrand([html.I(className="fas fa-utensils me-2"), RESTAURANT_NAME]),
                    html.Div([
                        html.Span(id="navbar-user", className="text-light small me-3"),
                        dbc.Button("Sign out", id="logout-button", color="light", size="sm", outline=True),
                    ], className="d-flex align-items-center"),
                ], fluid=True),
                color="dark",
                dark=True,
                className="mb-3 shadow-sm"
            ),
            dbc.Container([
                dbc.Tabs(
                    [
                        tabs['overview'],
                        tabs['inventory'],
                        tabs['orders'],
                        tabs['suppliers'],
                        tabs['recipes'],
                        tabs['analytics'],
                        tabs['settings'],
                    ],
                    id="main-tabs",
                    active_tab=DEFAULT_TAB,
                    className="mb-3"
                ),
                html.Div(id="tab-content", className="pt-2"),
            ], fluid=True, className="pb-4"),
        ]),
    ], className="dashboard-container")


def render_tab(app, session_id, active_tab):
    """
    Mount the controllers of the selected tab and build its content.

    Controllers of the tabs that are no longer shown are closed, so any
    result they are still waiting for is dropped. Only the given browser
    session is touched.

    Args:
        app: Dash app instance
        session_id: Browser session the tab is rendered for
        active_tab: tab_id of the selected tab

    Returns:
        Tab content component
    """
    wanted = TAB_CONTROLLERS.get(active_tab, [])
    stale = [name for name in SCREEN_CONTROLLERS if name not in wanted] + [ITEM_CONTROLLER]
    close_screen_controllers(app, session_id, stale)
    controllers = {name: open_screen_controller(app, session_id, name) for name in wanted}
    session = session_controllers(app, session_id)

    if active_tab == "tab-overview":
        return create_overview_tab_content(controllers["inventory_stats"], controllers["alerts"],
                                           controllers["inventory"])
    elif active_tab == "tab-inventory":
        return create_inventory_tab_content(controllers["inventory"])
    elif active_tab == "tab-orders":
        return create_orders_tab_content(controllers["orders"])
    elif active_tab == "tab-suppliers":
        return create_suppliers_tab_content(controllers["suppliers"])
    elif active_tab == "tab-recipes":
        recipes = session["recipes"]
        recipes.mount()
        return create_recipes_tab_content(recipes)
    elif active_tab == "tab-analytics":
        return create_analytics_tab_content(controllers["analytics"])
    elif active_tab == "tab-settings":
        return create_settings_tab_content(session["settings"])
    return html.P("Select a tab to get started.", className="text-muted")


def register_callbacks(app):
    """
    Register all callbacks for the dashboard.

    Args:
        app: Dash app instance
    """
    @app.callback(
        Output("tab-content", "children"),
        Input("main-tabs", "active_tab"),
        State("session-id", "data"),
    )
    def render_tab_content(active_tab, session_id):
        """Render the content of the selected tab"""
        try:
            return render_tab(app, session_id, active_tab)
        except Exception as e:
            logger.error(f"Error rendering {active_tab}: {str(e)}", exc_info=True)
            return create_error_message(f"Error loading this tab: {str(e)}")

    register_account_callbacks(app)
    register_overview_callbacks(app)
    register_inventory_callbacks(app)
    register_orders_callbacks(app)
    register_suppliers_callbacks(app)
    register_recipes_callbacks(app)
    register_analytics_callbacks(app)


def create_dashboard(api_url=None, timeout=None, client=None):
    """
    Create and configure the dashboard application.

    Args:
        api_url: Backend base URL
        timeout: Per-request timeout in seconds
        client: Prebuilt ApiClient (optional)

    Returns:
        dash.Dash: Configured dashboard application
    """
    app = create_app(api_url, timeout, client)
    app.layout = create_dashboard_layout
    register_callbacks(app)
    return app


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Restaurant Inventory Dashboard')
    parser.add_argument('--port', type=int, default=DASHBOARD_PORT, help='Port to run the dashboard on')
    parser.add_argument('--host', type=str, default=DASHBOARD_HOST, help='Host to run the dashboard on')
    parser.add_argument('--debug', action='store_true', help='Run in debug mode')
    parser.add_argument('--api-url', type=str, default=None, help='Base URL of the inventory backend')
    parser.add_argument('--timeout', type=float, default=None, help='Backend request timeout in seconds')
    return parser.parse_args(argv)


def main(argv=None):
    """
    Main function to run the dashboard.
    """
    args = parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        app = create_dashboard(api_url=args.api_url, timeout=args.timeout)
        logger.info(f"Starting dashboard on {args.host}:{args.port}")
        app.run(host=args.host, port=args.port, debug=args.debug)
    except Exception as e:
        logger.critical(f"Critical error starting dashboard: {e}")
        traceback.print_exc()
        print(f"\nERROR: Failed to start dashboard: {e}\n")
        print("Check log for details.")
        return 1
    return 0


def run_dashboard():
    """
    Run the dashboard as a standalone application.
    """
    return main()


if __name__ == '__main__':
    sys.exit(run_dashboard())
