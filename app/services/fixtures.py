# app/services/fixtures.py
from app.models import (
    CityRecord, TrafficSourceRecord, PlatformRecord, LocationRecord, DashboardEnvelope,
)
from app.utils.common import utc_now_iso

# Served by /api/test-data so the dashboard can be demoed without GA4.
SAMPLE_CITIES = [
    ("New York", 1250, 1890, 0.45, 3450),
    ("London",    980, 1456, 0.52, 2890),
    ("Tokyo",     756, 1123, 0.38, 2234),
    ("Sydney",    543,  798, 0.48, 1567),
    ("Paris",     432,  645, 0.41, 1234),
]

SAMPLE_TRAFFIC_SOURCES = [
    ("Organic Search", 2456),
    ("Direct",         1789),
    ("Social Media",    987),
    ("Email",           654),
    ("Referral",        432),
]

SAMPLE_PLATFORMS = [
    ("Desktop", 3567),
    ("Mobile",  2789),
    ("Tablet",   456),
]

SAMPLE_LOCATIONS = [
    ("United States",  4567),
    ("United Kingdom", 3234),
    ("Canada",         2456),
    ("Australia",      1789),
    ("Germany",        1234),
]


def sample_envelope() -> DashboardEnvelope:
    return DashboardEnvelope(
        city_data=[
            CityRecord(city=c, users=u, sessions=s, bounce_rate=b, pageviews=p)
            for c, u, s, b, p in SAMPLE_CITIES
        ],
        traffic_sources=[TrafficSourceRecord(source=n, sessions=s) for n, s in SAMPLE_TRAFFIC_SOURCES],
        platforms=[PlatformRecord(platform=n, sessions=s) for n, s in SAMPLE_PLATFORMS],
        location_data=[LocationRecord(location=n, pageviews=p) for n, p in SAMPLE_LOCATIONS],
        last_updated=utc_now_iso(),
    )
