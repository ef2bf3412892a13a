"""
Screen controllers for the Restaurant Inventory Dashboard.

This package contains one controller per screen. Controllers own fetch
orchestration, fallback handling, derived filtering and form submission;
the ui package only renders their state.
"""
from .base import Notice, IDLE, LOADING, READY, FAILED
from .inventory import InventoryStatsController, InventoryOverviewController, InventoryItemController
from .orders import OrdersController
from .suppliers import SuppliersController
from .alerts import AlertsController
from .analytics import AnalyticsController
from .recipes import RecipesController
from .account import LoginController, SettingsController
