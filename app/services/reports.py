# app/services/reports.py
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel

from app.models import (
    CityRecord, TrafficSourceRecord, PlatformRecord, LocationRecord, DashboardEnvelope,
)
from app.services.ga4 import run_report, ROW_LIMIT
from app.utils.common import utc_now_iso

UNKNOWN = "Unknown"


def _num(val, to_int=False):
    try:
        f = float(val)
        return int(f) if to_int else f
    except Exception:
        return 0 if to_int else 0.0


def _label(val: Optional[str]) -> str:
    return val or UNKNOWN


# -------------------- ROW SHAPERS --------------------

def city_record(r: Dict[str, Optional[str]]) -> CityRecord:
    return CityRecord(
        city=_label(r.get("city")),
        users=_num(r.get("totalUsers"), to_int=True),
        sessions=_num(r.get("sessions"), to_int=True),
        bounce_rate=_num(r.get("bounceRate")),
        pageviews=_num(r.get("screenPageViews"), to_int=True),
    )


def traffic_source_record(r: Dict[str, Optional[str]]) -> TrafficSourceRecord:
    return TrafficSourceRecord(
        source=_label(r.get("sessionDefaultChannelGroup")),
        sessions=_num(r.get("sessions"), to_int=True),
    )


def platform_record(r: Dict[str, Optional[str]]) -> PlatformRecord:
    return PlatformRecord(
        platform=_label(r.get("deviceCategory")),
        sessions=_num(r.get("sessions"), to_int=True),
    )


def location_record(r: Dict[str, Optional[str]]) -> LocationRecord:
    return LocationRecord(
        location=_label(r.get("country")),
        pageviews=_num(r.get("screenPageViews"), to_int=True),
    )


# -------------------- REPORT DEFINITIONS --------------------

@dataclass(frozen=True)
class ReportSpec:
    key: str                 # envelope field (snake_case)
    dimension: str
    metrics: List[str]
    shape: Callable[[Dict[str, Optional[str]]], BaseModel]
    sort_field: str          # record attribute matching metrics[0]


# Order matters: reports are issued in this sequence.
REPORTS: List[ReportSpec] = [
    ReportSpec("city_data", "city",
               ["totalUsers", "sessions", "bounceRate", "screenPageViews"],
               city_record, "users"),
    ReportSpec("traffic_sources", "sessionDefaultChannelGroup",
               ["sessions"], traffic_source_record, "sessions"),
    ReportSpec("platforms", "deviceCategory",
               ["sessions"], platform_record, "sessions"),
    ReportSpec("location_data", "country",
               ["screenPageViews"], location_record, "pageviews"),
]


def top_records(records: List[BaseModel], sort_field: str, limit: int = ROW_LIMIT) -> List[BaseModel]:
    """Stable descending sort + cap; a no-op on rows GA4 already ordered."""
    ordered = sorted(records, key=lambda rec: getattr(rec, sort_field), reverse=True)
    return ordered[:limit]


def fetch_report(ga_client, property_id: str, spec: ReportSpec) -> List[BaseModel]:
    rows = run_report(ga_client, property_id, [spec.dimension], spec.metrics)
    return top_records([spec.shape(r) for r in rows], spec.sort_field)


def build_envelope(ga_client, property_id: str) -> DashboardEnvelope:
    """
    Runs the four reports one after another and assembles the envelope.
    Any upstream exception propagates; there's no partial result.
    """
    data = {}
    for spec in REPORTS:
        data[spec.key] = fetch_report(ga_client, property_id, spec)
    return DashboardEnvelope(**data, last_updated=utc_now_iso())
