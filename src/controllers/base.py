"""
Shared fetch/fallback/reconcile machinery for the screen controllers.

A controller owns the state of one screen: the collection read from the
backend (or its fallback substitute), a load state, a user-visible error,
pending notices and any open form. Filtering is done by pure functions over
whatever collection is held; mutations go through submit_form, which
validates, calls the backend and then re-fetches the whole collection.
"""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from src.services.errors import ValidationError
from src.services.fetchers import Fallback
from src.data.fallback_data import CONNECTION_NOTICE

try:
    from config.settings import MAX_PARALLEL_FETCHES
except ImportError:
    MAX_PARALLEL_FETCHES = 4

# Load states
IDLE = "idle"
LOADING = "loading"
READY = "ready"
FAILED = "failed"

UNAVAILABLE_REASON = "Backend reported unavailable"


@dataclass
class Notice:
    """A one-line message for the user (rendered as a toast)."""
    title: str
    description: str
    variant: str = "default"  # default, destructive


class CancellationScope:
    """
    Generation counter tied to one controller's lifetime.

    Every refresh takes a token; results are applied only while their token is
    still the latest one and the scope has not been closed.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._generation = 0
        self._closed = False

    def begin(self):
        with self._lock:
            self._generation += 1
            return self._generation

    def is_current(self, token):
        with self._lock:
            return not self._closed and token == self._generation

    def close(self):
        with self._lock:
            self._closed = True

    @property
    def closed(self):
        return self._closed


def missing_fields(form, required):
    return [name for name in required if not str(form.get(name) or "").strip()]


def validate_required(form, required):
    """
    Check that every required field of a form holds a non-blank value.

    Raises:
        ValidationError: Listing the empty fields
    """
    missing = missing_fields(form, required)
    if missing:
        raise ValidationError(missing)


def matches_search(search_term, *values):
    """Case-insensitive substring match over any of the given values."""
    term = (search_term or "").strip().lower()
    if not term:
        return True
    return any(term in (value or "").lower() for value in values)


class ViewController:
    """
    Base class for screen controllers.

    Subclasses implement load() and fallback(); everything else (state
    transitions, availability short-circuit, stale result dropping, notices,
    form submission) lives here.
    """

    name = "view"
    empty_message = "No data available."
    required_fields = ()

    def __init__(self, client, prober=None):
        self.client = client
        self.prober = prober
        self.state = IDLE
        self.data = None
        self.error = None
        self.fallback_reason = None
        self.notices = []
        self.form = self.default_form()
        self.form_open = False
        self.scope = CancellationScope()
        self._lock = threading.RLock()
        self.logger = logging.getLogger(f'controllers.{self.name}')

    # Subclass hooks

    def load(self):
        """Fetch the screen's data and return a FetchResult."""
        raise NotImplementedError

    def fallback(self):
        """Static substitute for the screen's data."""
        raise NotImplementedError

    def default_form(self):
        return {}

    # Lifecycle

    @property
    def loading(self):
        return self.state == LOADING

    @property
    def is_fallback(self):
        return self.state == FAILED

    def mount(self):
        return self.refresh()

    def close(self):
        """Drop any results that arrive after the screen goes away."""
        self.scope.close()
        self.logger.debug(f"{self.name} closed")

    def refresh(self):
        """
        Re-enter the loading state and fetch the screen's data.

        Returns:
            bool: True if the result was applied, False if it went stale
        """
        token = self.scope.begin()
        with self._lock:
            self.state = LOADING
            self.error = None
        if self.prober is not None and self.prober.known_unavailable():
            self.logger.info(f"Skipping {self.name} fetch, backend known unavailable")
            result = Fallback(self.fallback(), UNAVAILABLE_REASON)
        else:
            result = self.load()
        return self.apply_result(token, result)

    def apply_result(self, token, result):
        if not self.scope.is_current(token):
            self.logger.debug(f"Dropping stale {self.name} result ({result!r})")
            return False
        with self._lock:
            if result.ok:
                self.state = READY
                self.data = result.data
                self.error = None
                self.fallback_reason = None
            else:
                self.state = FAILED
                self.data = result.data if result.data is not None else self.fallback()
                self.error = CONNECTION_NOTICE
                self.fallback_reason = result.reason
                self.logger.warning(f"{self.name} showing fallback data: {result.reason}")
        return True

    def run_parallel(self, tasks):
        """
        Run several fetchers at once and wait for all of them.

        Args:
            tasks: dict of source name -> zero-argument callable returning a FetchResult

        Returns:
            dict: source name -> FetchResult
        """
        with ThreadPoolExecutor(max_workers=min(MAX_PARALLEL_FETCHES, len(tasks)) or 1) as executor:
            futures = {name: executor.submit(task) for name, task in tasks.items()}
            return {name: future.result() for name, future in futures.items()}

    # Notices

    def notify(self, title, description, variant="default"):
        with self._lock:
            self.notices.append(Notice(title, description, variant))

    def drain_notices(self):
        with self._lock:
            notices, self.notices = self.notices, []
        return notices

    # Forms

    def open_form(self, **prefill):
        self.form = self.default_form()
        self.form.update(prefill)
        self.form_open = True

    def update_form(self, **values):
        self.form.update(values)

    def close_form(self):
        self.form_open = False

    def reset_form(self):
        self.form = self.default_form()

    def submit_form(self, submit, success_message, failure_message, required=None, payload=None):
        """
        Validate the open form, send it, and reconcile with the backend.

        Args:
            submit: Callable taking the payload and returning a FetchResult
            success_message: Notice text on success
            failure_message: Notice text when the backend rejects the call
            required: Required field names (defaults to required_fields)
            payload: Body to send (defaults to a copy of the form)

        Returns:
            bool: True if the mutation succeeded
        """
        required = self.required_fields if required is None else required
        try:
            validate_required(self.form, required)
        except ValidationError as e:
            self.logger.info(f"{self.name} form rejected: {e}")
            self.notify("Missing information", "Please fill in all required fields", "destructive")
            return False

        result = submit(dict(self.form) if payload is None else payload)
        if not result.ok:
            self.notify("Error", failure_message, "destructive")
            return False

        self.notify("Success", success_message)
        self.close_form()
        self.reset_form()
        self.refresh()
        return True
