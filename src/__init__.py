"""
Core of the Restaurant Inventory Dashboard: backend client, fetchers,
fallback data and screen controllers.
"""
