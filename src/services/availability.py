"""
Backend availability probe.
"""
import logging

from src.services.errors import ApiError

try:
    from config.settings import HEALTH_PATH
except ImportError:
    HEALTH_PATH = "/health"

logger = logging.getLogger('availability')


class AvailabilityProber:
    """
    Lightweight liveness check against the backend.

    known_available stays None until the first probe; controllers read it to
    skip requests that are bound to fail.
    """

    def __init__(self, client, path=HEALTH_PATH):
        self.client = client
        self.path = path
        self.known_available = None

    def probe(self):
        """
        Issue a single health-check request.

        Returns:
            bool: True only if the backend answered successfully
        """
        try:
            self.client.get(self.path)
            available = True
        except ApiError as e:
            logger.warning(f"API server is not available: {e}")
            available = False
        self.known_available = available
        return available

    def known_unavailable(self):
        return self.known_available is False

    def reset(self):
        self.known_available = None
