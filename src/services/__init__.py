"""
Backend access: HTTP client, availability probe and resource fetchers.
"""
