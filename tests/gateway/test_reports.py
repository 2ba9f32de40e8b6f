import pytest

from app.services.reports import (
    REPORTS, build_envelope, city_record, traffic_source_record, platform_record,
    location_record, top_records,
)
from app.utils.common import parse_iso_z


def test_reports_are_issued_in_fixed_order(fake_ga4):
    build_envelope(fake_ga4, "123")
    dims = [req.dimensions[0].name for req in fake_ga4.requests]
    assert dims == ["city", "sessionDefaultChannelGroup", "deviceCategory", "country"]
    assert [s.key for s in REPORTS] == ["city_data", "traffic_sources", "platforms", "location_data"]


def test_city_record_parses_metrics():
    rec = city_record({
        "city": "Rome", "totalUsers": "12", "sessions": "20.9",
        "bounceRate": "0.4375", "screenPageViews": "77",
    })
    assert rec.city == "Rome"
    assert rec.users == 12
    assert rec.sessions == 20
    assert rec.bounce_rate == pytest.approx(0.4375)
    assert rec.pageviews == 77


def test_missing_values_fall_back_to_defaults():
    rec = city_record({"city": None, "totalUsers": None, "sessions": "", "bounceRate": "n/a"})
    assert rec.model_dump(by_alias=True) == {
        "city": "Unknown", "users": 0, "sessions": 0, "bounceRate": 0.0, "pageviews": 0,
    }
    assert traffic_source_record({}).model_dump() == {"source": "Unknown", "sessions": 0}
    assert platform_record({}).model_dump() == {"platform": "Unknown", "sessions": 0}
    assert location_record({}).model_dump() == {"location": "Unknown", "pageviews": 0}


def test_top_records_caps_and_sorts_descending():
    recs = [platform_record({"deviceCategory": f"d{i}", "sessions": str(i)}) for i in range(12)]
    out = top_records(recs, "sessions")
    assert len(out) == 10
    assert [r.sessions for r in out] == list(range(11, 1, -1))


def test_top_records_keeps_upstream_order_for_ties():
    recs = [
        location_record({"country": "A", "screenPageViews": "5"}),
        location_record({"country": "B", "screenPageViews": "5"}),
        location_record({"country": "C", "screenPageViews": "9"}),
    ]
    assert [r.location for r in top_records(recs, "pageviews")] == ["C", "A", "B"]


def test_build_envelope_with_empty_reports(fake_ga4):
    env = build_envelope(fake_ga4, "123")
    assert env.city_data == []
    assert env.traffic_sources == []
    assert env.platforms == []
    assert env.location_data == []
    assert parse_iso_z(env.last_updated).tzinfo is not None


def test_build_envelope_reshapes_rows(fake_ga4_factory, ga4_response):
    client = fake_ga4_factory(responses={
        "city": ga4_response([
            (["Berlin"], ["10", "15", "0.5", "40"]),
            ([""], ["3", "4", "0.25", "9"]),
        ]),
        "deviceCategory": ga4_response([(["mobile"], ["30"]), (["desktop"], ["12"])]),
    })
    env = build_envelope(client, "123").model_dump(by_alias=True)

    assert env["cityData"][0] == {
        "city": "Berlin", "users": 10, "sessions": 15, "bounceRate": 0.5, "pageviews": 40,
    }
    assert env["cityData"][1]["city"] == "Unknown"
    assert env["platforms"] == [
        {"platform": "mobile", "sessions": 30},
        {"platform": "desktop", "sessions": 12},
    ]
    assert env["trafficSources"] == []
    assert env["locationData"] == []


def test_build_envelope_propagates_upstream_errors(fake_ga4_factory):
    client = fake_ga4_factory(error=RuntimeError("quota exhausted"))
    with pytest.raises(RuntimeError, match="quota exhausted"):
        build_envelope(client, "123")
    # no further reports after the first failure
    assert len(client.requests) == 1
