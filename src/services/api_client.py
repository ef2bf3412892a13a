#!/usr/bin/env python3
"""
HTTP client for the inventory backend service.
This module wraps all outbound calls to the REST backend and translates
transport and protocol failures into the ApiError family.
"""
import logging
import requests

from src.services.errors import (
    ApiError, NetworkUnreachable, RequestTimeout, ServerError, MalformedResponse
)

# Import settings if available
try:
    from config.settings import API_BASE_URL, REQUEST_TIMEOUT
except ImportError:
    API_BASE_URL = "http://localhost:8080/"
    REQUEST_TIMEOUT = 10

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger('api_client')


class ApiClient:
    """
    Client for the inventory backend REST API.

    Every request carries a fixed timeout and JSON headers. Failures are raised
    as ApiError subclasses; the *_data helpers swallow them and return None.

    Example:
    ```
    client = ApiClient("http://localhost:8080/")
    items = client.get("/inventory/getAll")
    client.post("/inventory/save", {"name": "Milk", ...})
    ```
    """

    def __init__(self, base_url=None, timeout=None, session=None):
        """
        Initialize the API client

        Args:
            base_url: Root URL of the backend (defaults to API_BASE_URL)
            timeout: Request timeout in seconds (defaults to REQUEST_TIMEOUT)
            session: Optional requests.Session to reuse
        """
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else REQUEST_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    def _url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method, path, params=None, body=None):
        """
        Issue a single request and decode the JSON body.

        Args:
            method: HTTP method
            path: Endpoint path relative to the base URL
            params: Optional query parameters
            body: Optional JSON-serializable request body

        Returns:
            Decoded JSON body, or None for an empty 2xx response

        Raises:
            RequestTimeout, NetworkUnreachable, ServerError, MalformedResponse
        """
        url = self._url(path)
        try:
            response = self.session.request(
                method, url, params=params, json=body, timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Request to {method} {path} timed out after {self.timeout}s: {e}")
            raise RequestTimeout(f"Request timed out after {self.timeout} seconds", path) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"No response received from {method} {path}: {e}")
            raise NetworkUnreachable("No response received from server", path) from e

        if not 200 <= response.status_code < 300:
            message = None
            try:
                payload = response.json()
                if isinstance(payload, dict):
                    message = payload.get("message")
            except ValueError:
                pass
            logger.error(f"API error from {method} {path}: status {response.status_code} {message or ''}")
            raise ServerError(response.status_code, message, path)

        if not response.content or not response.content.strip():
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Malformed response from {method} {path}: {e}")
            raise MalformedResponse(f"Response from {path} is not valid JSON", path) from e

    def get(self, path, params=None):
        return self.request("GET", path, params=params)

    def post(self, path, body):
        return self.request("POST", path, body=body)

    def put(self, path, body):
        return self.request("PUT", path, body=body)

    def delete(self, path):
        return self.request("DELETE", path)

    def fetch_data(self, path, params=None):
        """GET that returns None instead of raising."""
        try:
            return self.get(path, params=params)
        except ApiError as e:
            logger.error(f"Error fetching data from {path}: {e}")
            return None

    def post_data(self, path, body):
        """POST that returns None instead of raising."""
        try:
            return self.post(path, body)
        except ApiError as e:
            logger.error(f"Error posting data to {path}: {e}")
            return None

    def put_data(self, path, body):
        """PUT that returns None instead of raising."""
        try:
            return self.put(path, body)
        except ApiError as e:
            logger.error(f"Error updating data at {path}: {e}")
            return None

    def delete_data(self, path):
        """DELETE that returns None instead of raising."""
        try:
            return self.delete(path)
        except ApiError as e:
            logger.error(f"Error deleting data at {path}: {e}")
            return None

    def close(self):
        self.session.close()


def get_api_client(base_url=None, timeout=None):
    """
    Create an API client using the configured backend settings.

    Args:
        base_url: Optional override for the backend URL
        timeout: Optional override for the request timeout

    Returns:
        ApiClient: Configured client
    """
    return ApiClient(base_url=base_url, timeout=timeout)
