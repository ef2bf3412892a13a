"""
User interface components for the Restaurant Inventory System.

This package contains the Dash screens of the inventory dashboard. The
modular structure includes:

- core: Shared components, the app factory and screen controller lifecycle
- dashboard: Main dashboard module with tab structure, login and navigation
- overview: Inventory counters and the alerts panel
- inventory: Inventory table, status filters and the add-item form
- orders: Orders list, new-order and edit-order forms
- suppliers: Supplier directory and the add-supplier form
- recipes: Locally held recipe catalogue
- analytics: Spending summary, usage and category charts, top items
- account: Login view and the settings tab
"""
