"""
Login screen and settings tab for the Restaurant Inventory dashboard.
"""
import sys
import os
import logging

from dash import html, Input, Output, State, ALL, callback_context, no_update
from dash.exceptions import PreventUpdate
import dash_bootstrap_components as dbc

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ui.core import (
    create_error_message, create_notice_toasts, create_notice_area, create_form_field, get_controller
)

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger('account_ui')

SETTINGS_GROUP_TITLES = {
    "profile": "Profile",
    "restaurant": "Restaurant",
    "notifications": "Notifications",
    "security": "Security",
    "system": "System",
}

HIDDEN = {"display": "none"}
VISIBLE = {"display": "block"}


def create_login_content():
    """
    Create the login card shown before the dashboard.

    Returns:
        dbc.Container: Login view
    """
    return dbc.Container([
        dbc.Row(dbc.Col(dbc.Card([
            dbc.CardHeader(html.H4("Sign in", className="mb-0")),
            dbc.CardBody([
                create_form_field("Username", dbc.Input(id="login-username", placeholder="admin"), width=12),
                create_form_field("Password", dbc.Input(id="login-password", type="password"), width=12),
                dbc.Button("Sign in", id="login-button", color="primary", className="w-100"),
            ]),
        ], className="shadow-sm mt-5"), md=4), justify="center"),
    ])


def _settings_label(key):
    return key.replace("_", " ").capitalize()


def create_settings_field(group, key, value):
    field_id = {"type": "settings-field", "group": group, "key": key}
    if isinstance(value, bool):
        return dbc.Col(dbc.Switch(id=field_id, label=_settings_label(key), value=value), md=6, className="mb-2")
    return create_form_field(_settings_label(key), dbc.Input(id=field_id, value=value))


def create_settings_form(controller):
    cards = []
    for group in controller.GROUPS:
        values = getattr(controller.draft, group)
        cards.append(dbc.Card([
            dbc.CardHeader(html.Span(SETTINGS_GROUP_TITLES.get(group, group), style={"fontWeight": "600"})),
            dbc.CardBody(dbc.Row([create_settings_field(group, key, value) for key, value in values.items()])),
        ], className="mb-3 shadow-sm"))
    return cards


def create_settings_tab_content(controller):
    """
    Create content for the settings tab.

    Args:
        controller: SettingsController

    Returns:
        html.Div: Tab content
    """
    return html.Div([
        create_notice_area("settings-notices"),
        dbc.Row([
            dbc.Col(html.H4("Settings", className="mb-0"), md=6),
            dbc.Col([
                dbc.Button("Discard", id="settings-discard-button", color="secondary", outline=True,
                           className="me-2"),
                dbc.Button("Save Changes", id="settings-save-button", color="primary"),
            ], md=6, className="text-end"),
        ], className="mb-3", align="center"),
        html.Div(id="settings-form", children=create_settings_form(controller)),
    ])


def register_account_callbacks(app):
    """
    Register login and settings callbacks.

    Args:
        app: Dash app instance
    """
    @app.callback(
        [
            Output("login-view", "style"),
            Output("dashboard-view", "style"),
            Output("login-notices", "children"),
            Output("navbar-user", "children"),
        ],
        [
            Input("login-button", "n_clicks"),
            Input("logout-button", "n_clicks"),
        ],
        [
            State("session-id", "data"),
            State("login-username", "value"),
            State("login-password", "value"),
        ],
        prevent_initial_call=True
    )
    def update_login(login_clicks, logout_clicks, session_id, username, password):
        """Switch between the login view and the dashboard"""
        controller = get_controller(app, session_id, "login")
        triggered = callback_context.triggered_id

        try:
            if triggered == "logout-button":
                controller.logout()
            elif triggered == "login-button":
                controller.login(username, password)

            notices = create_notice_toasts(controller.drain_notices())
            if controller.authenticated:
                return HIDDEN, VISIBLE, notices, f"Signed in as {controller.display_name}"
            return VISIBLE, HIDDEN, notices, ""
        except Exception as e:
            logger.error(f"Error during login: {str(e)}", exc_info=True)
            return no_update, no_update, create_error_message(f"Error during login: {str(e)}"), no_update

    @app.callback(
        [
            Output("settings-form", "children"),
            Output("settings-notices", "children"),
        ],
        [
            Input("settings-save-button", "n_clicks"),
            Input("settings-discard-button", "n_clicks"),
        ],
        [
            State("session-id", "data"),
            State({"type": "settings-field", "group": ALL, "key": ALL}, "value"),
            State({"type": "settings-field", "group": ALL, "key": ALL}, "id"),
        ],
        prevent_initial_call=True
    )
    def update_settings(save_clicks, discard_clicks, session_id, values, ids):
        """Save or discard the settings form"""
        controller = get_controller(app, session_id, "settings")
        triggered = callback_context.triggered_id
        if triggered not in ("settings-save-button", "settings-discard-button"):
            raise PreventUpdate

        try:
            if triggered == "settings-save-button":
                for field_id, value in zip(ids, values):
                    controller.update(field_id["group"], field_id["key"], value)
                controller.save()
            else:
                controller.discard()
            return create_settings_form(controller), create_notice_toasts(controller.drain_notices())
        except Exception as e:
            logger.error(f"Error saving settings: {str(e)}", exc_info=True)
            return no_update, create_error_message(f"Error saving settings: {str(e)}")
