"""
Login and settings controllers.

Authentication is a stub: credentials are checked against the demo account
and the backend is told about the login on a best-effort basis.
"""
import copy
import logging

from src.controllers.base import Notice, validate_required
from src.data.models import SettingsProfile
from src.services import fetchers
from src.services.errors import ValidationError

try:
    from config.settings import DEMO_USERNAME, DEMO_PASSWORD, RESTAURANT_NAME
except ImportError:
    DEMO_USERNAME = "admin"
    DEMO_PASSWORD = "password"
    RESTAURANT_NAME = "Restaurant Inventory"

logger = logging.getLogger('controllers.account')


class LoginController:

    def __init__(self, client=None):
        self.client = client
        self.authenticated = False
        self.username = None
        self.display_name = None
        self.notices = []

    def login(self, username, password):
        try:
            validate_required({"username": username, "password": password}, ("username", "password"))
        except ValidationError:
            self.notices.append(Notice("Login failed", "Please enter your username and password", "destructive"))
            return False

        if username != DEMO_USERNAME or password != DEMO_PASSWORD:
            logger.info(f"Rejected login for '{username}'")
            self.notices.append(Notice("Login failed", "Please check your credentials and try again", "destructive"))
            return False

        if self.client is not None:
            result = fetchers.login(self.client, username, password)
            if not result.ok:
                logger.warning(f"Backend login not recorded: {result.reason}")

        self.authenticated = True
        self.username = username
        self.display_name = self._current_user_name(username)
        self.notices.append(Notice("Login successful", "Welcome back to your inventory dashboard"))
        return True

    def logout(self):
        if self.client is not None and self.authenticated:
            result = fetchers.logout(self.client)
            if not result.ok:
                logger.warning(f"Backend logout not recorded: {result.reason}")
        self.authenticated = False
        self.username = None
        self.display_name = None

    def _current_user_name(self, username):
        """Name the backend knows the signed-in user by, or the login name."""
        if self.client is None:
            return username
        result = fetchers.get_current_user(self.client)
        if result.ok and isinstance(result.data, dict):
            return result.data.get("name") or result.data.get("username") or username
        return username

    def drain_notices(self):
        notices, self.notices = self.notices, []
        return notices


def default_settings():
    return SettingsProfile(
        profile={"first_name": "John", "last_name": "Doe",
                 "email": "john.doe@example.com", "phone": "(555) 123-4567"},
        restaurant={"name": RESTAURANT_NAME, "address": "123 Main Street",
                    "phone": "(555) 987-6543", "email": "info@restaurant.example"},
        notifications={"low_stock": True, "expiring_items": True,
                       "order_updates": True, "email_digest": False},
        security={"two_factor": False, "session_timeout": True},
        system={"currency": "USD", "weight_unit": "Kg", "date_format": "MM/DD/YYYY"},
    )


class SettingsController:
    """Settings held on the client; saving only confirms to the user."""

    GROUPS = ("profile", "restaurant", "notifications", "security", "system")

    def __init__(self):
        self.saved = default_settings()
        self.draft = copy.deepcopy(self.saved)
        self.notices = []

    def update(self, group, key, value):
        if group not in self.GROUPS:
            raise KeyError(f"Unknown settings group: {group}")
        getattr(self.draft, group)[key] = value

    def is_dirty(self):
        return self.draft != self.saved

    def save(self):
        self.saved = copy.deepcopy(self.draft)
        self.notices.append(Notice("Settings saved", "Your settings have been saved successfully."))
        logger.info("Settings saved")

    def discard(self):
        self.draft = copy.deepcopy(self.saved)

    def drain_notices(self):
        notices, self.notices = self.notices, []
        return notices
