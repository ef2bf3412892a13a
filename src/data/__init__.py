"""
Record types and the static fallback datasets.
"""
