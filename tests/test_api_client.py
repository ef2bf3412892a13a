import unittest
from unittest import mock
import sys
import os

import requests

# Add parent directory to path so we can import the project modules
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.services.api_client import ApiClient, get_api_client
from src.services.errors import (
    ApiError, NetworkUnreachable, RequestTimeout, ServerError, MalformedResponse
)


def make_response(status_code=200, payload=None, content=None, invalid_json=False):
    response = mock.Mock()
    response.status_code = status_code
    if content is None:
        content = b"" if payload is None else b"{}"
    response.content = content
    if invalid_json:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = payload
    return response


class TestApiClient(unittest.TestCase):
    """Test cases for the backend HTTP client"""

    def setUp(self):
        self.client = ApiClient("http://backend.test/", timeout=3)

    def test_joins_base_url_and_path(self):
        """The trailing slash of the base URL and the leading slash of the path collapse"""
        with mock.patch.object(requests.Session, "request", return_value=make_response(payload=[])) as request:
            self.client.get("/inventory/getAll")
        method, url = request.call_args[0]
        self.assertEqual(method, "GET")
        self.assertEqual(url, "http://backend.test/inventory/getAll")

    def test_sends_timeout_params_and_json_body(self):
        with mock.patch.object(requests.Session, "request", return_value=make_response(payload={"ok": True})) as request:
            self.client.get("/analytics/usage", params={"timeframe": "week"})
            self.client.post("/order/save", {"name": "Basil"})
        get_kwargs = request.call_args_list[0][1]
        post_kwargs = request.call_args_list[1][1]
        self.assertEqual(get_kwargs["params"], {"timeframe": "week"})
        self.assertEqual(get_kwargs["timeout"], 3)
        self.assertEqual(post_kwargs["json"], {"name": "Basil"})

    def test_json_headers_are_set(self):
        self.assertEqual(self.client.session.headers["Content-Type"], "application/json")
        self.assertEqual(self.client.session.headers["Accept"], "application/json")

    def test_decodes_json_body(self):
        with mock.patch.object(requests.Session, "request", return_value=make_response(payload=[{"a": 1}])):
            self.assertEqual(self.client.get("/inventory/getAll"), [{"a": 1}])

    def test_empty_body_returns_none(self):
        with mock.patch.object(requests.Session, "request", return_value=make_response(content=b"  ")):
            self.assertIsNone(self.client.post("/inventory/save", {}))

    def test_timeout_raises_request_timeout(self):
        with mock.patch.object(requests.Session, "request", side_effect=requests.exceptions.Timeout("slow")):
            with self.assertRaises(RequestTimeout) as ctx:
                self.client.get("/inventory/getAll")
        self.assertEqual(ctx.exception.endpoint, "/inventory/getAll")
        self.assertIsInstance(ctx.exception, ApiError)

    def test_connection_error_raises_network_unreachable(self):
        with mock.patch.object(requests.Session, "request",
                               side_effect=requests.exceptions.ConnectionError("refused")):
            with self.assertRaises(NetworkUnreachable) as ctx:
                self.client.get("/health")
        self.assertEqual(ctx.exception.message, "No response received from server")

    def test_server_error_uses_backend_message(self):
        response = make_response(500, payload={"message": "Database unavailable"})
        with mock.patch.object(requests.Session, "request", return_value=response):
            with self.assertRaises(ServerError) as ctx:
                self.client.get("/order/getAll")
        self.assertEqual(ctx.exception.status, 500)
        self.assertEqual(ctx.exception.message, "Database unavailable")

    def test_server_error_default_message(self):
        response = make_response(404, content=b"", invalid_json=True)
        with mock.patch.object(requests.Session, "request", return_value=response):
            with self.assertRaises(ServerError) as ctx:
                self.client.get("/missing")
        self.assertEqual(ctx.exception.message, "Server responded with status: 404")

    def test_invalid_json_raises_malformed_response(self):
        response = make_response(200, content=b"<html>", invalid_json=True)
        with mock.patch.object(requests.Session, "request", return_value=response):
            with self.assertRaises(MalformedResponse):
                self.client.get("/inventory/getAll")

    def test_data_helpers_return_none_on_error(self):
        with mock.patch.object(requests.Session, "request",
                               side_effect=requests.exceptions.ConnectionError("refused")):
            self.assertIsNone(self.client.fetch_data("/inventory/getAll"))
            self.assertIsNone(self.client.post_data("/inventory/save", {}))
            self.assertIsNone(self.client.put_data("/order/update", {}))
            self.assertIsNone(self.client.delete_data("/order/1"))

    def test_factory_uses_given_settings(self):
        client = get_api_client("http://other.test", timeout=7)
        self.assertEqual(client.base_url, "http://other.test")
        self.assertEqual(client.timeout, 7)
        client.close()


if __name__ == '__main__':
    unittest.main()
