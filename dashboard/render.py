# dashboard/render.py
from __future__ import annotations
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

import altair as alt
import requests

from dashboard.config import DEMO_ENVELOPE
from dashboard.data import FetchError, fetch_analytics_data, is_valid_envelope
from dashboard.widgets.charts import build_charts

log = logging.getLogger(__name__)

NO_VALUE = "–"
MSG_FETCHING = "Fetching latest data from Google Analytics..."
MSG_UPDATED = "Dashboard updated successfully!"
MSG_DEMO = "Showing demo data - check console for API connection details"


@dataclass
class Summary:
    total_users: int
    total_sessions: int
    avg_bounce: Optional[float]   # None when there are no cities
    top_city: str

    def display(self) -> Dict[str, str]:
        return {
            "Total Users": f"{self.total_users:,}",
            "Total Sessions": f"{self.total_sessions:,}",
            "Avg. Bounce Rate": NO_VALUE if self.avg_bounce is None else f"{self.avg_bounce * 100:.1f}%",
            "Most Active City": self.top_city,
        }


@dataclass
class Status:
    message: str
    kind: str = "success"   # "success" | "error" | "info"


@dataclass
class RefreshControl:
    """Refresh button state; disabled while a fetch is in flight."""
    disabled: bool = False

    @contextmanager
    def in_flight(self):
        self.disabled = True
        try:
            yield self
        finally:
            self.disabled = False


@dataclass
class RenderContext:
    """Everything currently on screen. Replaced wholesale by redraw()."""
    charts: Dict[str, alt.Chart] = field(default_factory=dict)
    summary: Optional[Summary] = None
    last_updated: Optional[str] = None
    status: Optional[Status] = None
    demo: bool = False

    def teardown(self) -> None:
        self.charts.clear()
        self.summary = None


def compute_summary(envelope: dict) -> Summary:
    cities = envelope.get("cityData") or []
    total_users = sum(r.get("users", 0) for r in cities)
    total_sessions = sum(r.get("sessions", 0) for r in cities)
    avg_bounce = (sum(r.get("bounceRate", 0) for r in cities) / len(cities)) if cities else None

    # max() keeps the first of equal pageviews, same as a stable descending sort
    top = max(cities, key=lambda r: r.get("pageviews", 0), default=None)
    top_city = top.get("city", NO_VALUE) if top else NO_VALUE
    return Summary(total_users, total_sessions, avg_bounce, top_city)


def redraw(ctx: RenderContext, envelope: dict) -> RenderContext:
    """Tear down ctx's charts, then build a fresh context for envelope."""
    ctx.teardown()
    return RenderContext(
        charts=build_charts(envelope),
        summary=compute_summary(envelope),
        last_updated=envelope.get("lastUpdated"),
        status=ctx.status,
    )


def demo_envelope() -> dict:
    # same shape as the gateway: 2025-01-31T09:15:02.123Z
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return {**DEMO_ENVELOPE, "lastUpdated": stamp}


def load_data(
    ctx: RenderContext,
    control: RefreshControl,
    fetch: Callable[[], dict] = fetch_analytics_data,
    on_status: Optional[Callable[[Status], None]] = None,
) -> RenderContext:
    """
    One refresh cycle: fetch the envelope, fall back to demo data on any
    failure, redraw. The control is disabled for the duration of the fetch.
    """
    def report(status: Status):
        if on_status:
            on_status(status)

    data = None
    with control.in_flight():
        report(Status(MSG_FETCHING, "info"))
        try:
            data = fetch()
        except (requests.RequestException, FetchError, ValueError) as e:
            log.error(f"Error fetching analytics data: {e}")
            report(Status(f"Error: {e}", "error"))

    if data is not None and is_valid_envelope(data):
        new_ctx = redraw(ctx, data)
        new_ctx.status = Status(MSG_UPDATED, "success")
        return new_ctx

    if data is not None:
        log.warning(f"Invalid data structure: {data!r}")
    new_ctx = redraw(ctx, demo_envelope())
    new_ctx.status = Status(MSG_DEMO, "error")
    new_ctx.demo = True
    return new_ctx
