"""
Configuration settings for the Restaurant Inventory Dashboard.

This module defines global settings and constants used throughout the system.
"""
import os

# Base directory
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Backend connection settings
API_BASE_URL = os.environ.get("INVENTORY_API_URL", "http://localhost:8080/")
REQUEST_TIMEOUT = float(os.environ.get("INVENTORY_API_TIMEOUT", "10"))  # seconds
HEALTH_PATH = "/health"
MAX_PARALLEL_FETCHES = 4   # Worker threads for views composed from several sources

# Analytics settings
TIMEFRAMES = ["week", "month", "quarter", "year"]
DEFAULT_TIMEFRAME = "month"

# Form choices
INVENTORY_CATEGORIES = ["Dairy", "Meat", "Produce", "Bakery", "Pantry", "Beverages"]
ORDER_CATEGORIES = ["Pantry", "Dairy", "Meat", "Produce", "Bakery", "Beverages"]
SUPPLIER_CATEGORIES = ["Produce", "Meat", "Dairy", "Bakery", "Pantry", "Beverages", "Seafood"]
RECIPE_CATEGORIES = ["Main Course", "Appetizer", "Dessert", "Side Dish", "Beverage"]
UNITS = ["Kg", "g", "L", "ml", "pcs", "dozen", "box"]

# Login stub
DEMO_USERNAME = "admin"
DEMO_PASSWORD = "password"

# Directory settings
ASSETS_DIR = os.path.join(ROOT_DIR, "assets")

# Dashboard display settings
DASHBOARD_HOST = "0.0.0.0"
DASHBOARD_PORT = 8050
DEFAULT_TAB = "tab-overview"  # Default tab to show on dashboard load
MAX_SESSIONS = 200  # Browser sessions whose controllers are kept in memory
RESTAURANT_NAME = "Restaurant Inventory"
