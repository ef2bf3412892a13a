"""
Analytics screen controllers.

The analytics screen is made of four independent panels. Each panel is its
own controller with its own fallback, so one failing endpoint does not blank
the others. AnalyticsController owns its prober: it is cleared and probed on
every mount and shared only with its own panels.
"""
from src.controllers.base import ViewController
from src.data import fallback_data
from src.data.fallback_data import CONNECTION_NOTICE
from src.services import fetchers
from src.services.availability import AvailabilityProber

try:
    from config.settings import TIMEFRAMES, DEFAULT_TIMEFRAME
except ImportError:
    TIMEFRAMES = ["week", "month", "quarter", "year"]
    DEFAULT_TIMEFRAME = "month"


class SummaryController(ViewController):
    name = "analytics_summary"

    def __init__(self, client, prober=None, timeframe=DEFAULT_TIMEFRAME):
        super().__init__(client, prober)
        self.timeframe = timeframe

    def load(self):
        return fetchers.get_analytics_summary(self.client, self.timeframe)

    def fallback(self):
        return fallback_data.sample_summary()


class UsageChartController(ViewController):
    name = "analytics_usage"

    def __init__(self, client, prober=None, timeframe=DEFAULT_TIMEFRAME):
        super().__init__(client, prober)
        self.timeframe = timeframe

    def load(self):
        return fetchers.get_usage(self.client, self.timeframe)

    def fallback(self):
        return fallback_data.sample_usage(self.timeframe)


class CategoryBreakdownController(ViewController):
    name = "analytics_categories"

    def load(self):
        return fetchers.get_category_breakdown(self.client)

    def fallback(self):
        return fallback_data.sample_categories()


class TopItemsController(ViewController):
    name = "analytics_top_items"
    empty_message = "No usage recorded yet."

    def load(self):
        return fetchers.get_top_items(self.client)

    def fallback(self):
        return fallback_data.sample_top_items()


class AnalyticsController:
    """Coordinates the analytics panels and the selected timeframe."""

    def __init__(self, client, prober=None, timeframe=DEFAULT_TIMEFRAME):
        self.client = client
        self.prober = prober if prober is not None else AvailabilityProber(client)
        self.timeframe = timeframe if timeframe in TIMEFRAMES else DEFAULT_TIMEFRAME
        self.connection_error = None
        self.summary = SummaryController(client, self.prober, self.timeframe)
        self.usage = UsageChartController(client, self.prober, self.timeframe)
        self.categories = CategoryBreakdownController(client, self.prober)
        self.top_items = TopItemsController(client, self.prober)

    @property
    def panels(self):
        return [self.summary, self.usage, self.categories, self.top_items]

    def mount(self):
        self.prober.reset()
        if not self.prober.probe():
            self.connection_error = CONNECTION_NOTICE
            self.summary.notify(
                "Connection Error",
                "Could not connect to the backend server. Using mock data instead.",
                "destructive",
            )
        else:
            self.connection_error = None
        for panel in self.panels:
            panel.refresh()

    def set_timeframe(self, timeframe):
        """Switch timeframe and reload the timeframe-scoped panels."""
        if timeframe not in TIMEFRAMES:
            raise ValueError(f"Unknown timeframe: {timeframe}")
        self.timeframe = timeframe
        self.summary.timeframe = timeframe
        self.usage.timeframe = timeframe
        self.summary.refresh()
        self.usage.refresh()

    def drain_notices(self):
        notices = []
        for panel in self.panels:
            notices.extend(panel.drain_notices())
        return notices

    def close(self):
        for panel in self.panels:
            panel.close()
