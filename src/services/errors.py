"""
Error types for the Restaurant Inventory Dashboard.

Remote failures are raised by the API client as ApiError subclasses and
converted to tagged fetch results by the resource fetchers. Local form
validation raises ValidationError before any request is made.
"""


class InventoryAppError(Exception):
    """Base class for all application errors."""


class ApiError(InventoryAppError):
    """A call to the backend did not produce a usable response."""

    def __init__(self, message, endpoint=None):
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint


class NetworkUnreachable(ApiError):
    """No response was received from the backend."""


class RequestTimeout(ApiError):
    """The backend did not answer within the configured timeout."""


class ServerError(ApiError):
    """The backend answered with a status outside 2xx."""

    def __init__(self, status, message=None, endpoint=None):
        self.status = status
        super().__init__(message or f"Server responded with status: {status}", endpoint)


class MalformedResponse(ApiError):
    """The response body could not be parsed into the expected shape."""


class ValidationError(InventoryAppError):
    """A form was submitted with required fields left empty."""

    def __init__(self, missing_fields):
        self.missing_fields = list(missing_fields)
        super().__init__(f"Missing required fields: {', '.join(self.missing_fields)}")


class PartialAggregateFailure(InventoryAppError):
    """One or more of several parallel sources for a combined view failed."""

    def __init__(self, failures):
        # source name -> reason
        self.failures = dict(failures)
        detail = "; ".join(f"{name}: {reason}" for name, reason in self.failures.items())
        super().__init__(f"{len(self.failures)} source(s) failed ({detail})")
