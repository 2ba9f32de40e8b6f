# dashboard/data.py
import logging
from numbers import Real

import requests

from dashboard.config import API_BASE_URL, API_TIMEOUT_SECONDS, RECORD_FIELDS

log = logging.getLogger(__name__)


class FetchError(Exception):
    """Gateway answered with a non-2xx status."""


def fetch_analytics_data(base_url: str = API_BASE_URL, timeout: float = API_TIMEOUT_SECONDS,
                         session=None) -> dict:
    """
    GET {base_url}/api/analytics-data and return the decoded JSON.
    Raises FetchError on a non-2xx status; network/JSON errors propagate as-is.
    """
    http = session or requests
    resp = http.get(f"{base_url}/api/analytics-data", timeout=timeout)
    if not resp.ok:
        raise FetchError(f"HTTP error! status: {resp.status_code}")
    return resp.json()


def _is_number(val) -> bool:
    # bool is an int subclass; JSON true/false isn't a metric
    return isinstance(val, Real) and not isinstance(val, bool)


def _is_valid_record(rec, label: str, metrics) -> bool:
    if not isinstance(rec, dict) or not isinstance(rec.get(label), str):
        return False
    return all(_is_number(rec.get(m)) for m in metrics)


def is_valid_envelope(data) -> bool:
    """Every report is a list of records with a string label and numeric metrics."""
    if not isinstance(data, dict):
        return False
    for key, (label, metrics) in RECORD_FIELDS.items():
        records = data.get(key)
        if not isinstance(records, list):
            return False
        if not all(_is_valid_record(r, label, metrics) for r in records):
            return False
    return True
