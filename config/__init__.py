"""
Configuration for the Restaurant Inventory System.
"""
