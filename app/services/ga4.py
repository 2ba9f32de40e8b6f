# app/services/ga4.py
import logging
from typing import List, Dict, Optional

from google.analytics.data_v1beta import (
    BetaAnalyticsDataClient, DateRange, RunReportRequest, Dimension, Metric, OrderBy
)
from google.oauth2 import service_account
from fastapi import Request

from app.config import Settings

log = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/analytics.readonly"]
TOKEN_URI = "https://oauth2.googleapis.com/token"

# Trailing 30-day window ending today, in GA4's relative-date syntax
DEFAULT_START_DATE = "30daysAgo"
DEFAULT_END_DATE = "today"
ROW_LIMIT = 10


def _unescape_private_key(raw: str) -> str:
    return raw.replace("\\n", "\n")


def client(settings: Settings) -> BetaAnalyticsDataClient:
    creds = service_account.Credentials.from_service_account_info(
        {
            "client_email": settings.GOOGLE_CLIENT_EMAIL,
            "private_key": _unescape_private_key(settings.GOOGLE_PRIVATE_KEY or ""),
            "token_uri": TOKEN_URI,
        },
        scopes=SCOPES,
    )
    return BetaAnalyticsDataClient(credentials=creds)


def init_client(settings: Settings, factory=client) -> BetaAnalyticsDataClient:
    """Startup check: exits the process when credentials are missing or the client can't be built."""
    missing = settings.missing_credentials()
    if missing:
        log.error(f"❌ Missing required environment variables: {missing}")
        log.error("Please set these environment variables in your deployment dashboard")
        raise SystemExit(1)

    try:
        ga_client = factory(settings)
    except Exception as e:
        log.error(f"❌ Failed to initialize Google Analytics client: {e}")
        raise SystemExit(1)

    log.info("✅ Google Analytics client initialized successfully")
    return ga_client


def get_client(request: Request) -> BetaAnalyticsDataClient:
    """FastAPI dependency: the client built once at startup."""
    return request.app.state.ga4_client


def _date_range(start_date: str, end_date: str) -> DateRange:
    return DateRange(start_date=start_date, end_date=end_date)


def run_report(
    ga_client: BetaAnalyticsDataClient,
    property_id: str,
    dimensions: List[str],
    metrics: List[str],
    start_date: str = DEFAULT_START_DATE,
    end_date: str = DEFAULT_END_DATE,
    limit: int = ROW_LIMIT,
) -> List[Dict[str, Optional[str]]]:
    """
    Top `limit` rows ordered by the first metric, descending.
    Rows come back as {name: raw string value}; empty values become None so
    callers decide their own defaults.
    """
    req = RunReportRequest(
        property=f"properties/{property_id}",
        date_ranges=[_date_range(start_date, end_date)],
        dimensions=[Dimension(name=d) for d in dimensions],
        metrics=[Metric(name=m) for m in metrics],
        order_bys=[OrderBy(metric=OrderBy.MetricOrderBy(metric_name=metrics[0]), desc=True)],
        limit=limit,
    )
    try:
        resp = ga_client.run_report(req)
    except Exception as e:
        log.error(f"Error running GA4 report: {e}")
        raise

    out = []
    for row in resp.rows:
        d = {}
        for i, dim in enumerate(dimensions):
            d[dim] = _value_at(row.dimension_values, i)
        for j, met in enumerate(metrics):
            d[met] = _value_at(row.metric_values, j)
        out.append(d)
    return out


def _value_at(values, idx: int) -> Optional[str]:
    if idx >= len(values):
        return None
    return values[idx].value or None
