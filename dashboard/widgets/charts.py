# dashboard/widgets/charts.py
from typing import Dict, List

import altair as alt
import pandas as pd

from dashboard.config import COLORS, CATEGORY_PALETTE, CHART_HEIGHT

CITY_COLUMNS = ["city", "users", "sessions", "bounceRate", "pageviews"]


def _frame(records: List[dict], columns: List[str]) -> pd.DataFrame:
    # Fixed columns so empty reports still produce (empty) charts
    return pd.DataFrame(records or [], columns=columns)


def users_sessions_chart(city: pd.DataFrame) -> alt.Chart:
    """Grouped bars: total users next to sessions for each city."""
    order = list(city["city"])
    long = city.melt(id_vars="city", value_vars=["users", "sessions"], var_name="metric", value_name="value")
    long["metric"] = long["metric"].map({"users": "Total Users", "sessions": "Sessions"})
    return (
        alt.Chart(long)
        .mark_bar()
        .encode(
            x=alt.X("city:N", sort=order, title=None),
            xOffset=alt.XOffset("metric:N", sort=["Total Users", "Sessions"]),
            y=alt.Y("value:Q", title=None),
            color=alt.Color(
                "metric:N",
                title=None,
                sort=["Total Users", "Sessions"],
                scale=alt.Scale(range=[COLORS["primary"], COLORS["secondary"]]),
                legend=alt.Legend(orient="top"),
            ),
            tooltip=["city:N", "metric:N", "value:Q"],
        )
        .properties(height=CHART_HEIGHT)
    )


def bounce_chart(city: pd.DataFrame) -> alt.Chart:
    return (
        alt.Chart(city)
        .mark_line(point=True, color=COLORS["danger"])
        .encode(
            x=alt.X("city:N", sort=list(city["city"]), title=None),
            y=alt.Y("bounceRate:Q", title=None, scale=alt.Scale(domain=[0, 1]), axis=alt.Axis(format="%")),
            tooltip=["city:N", alt.Tooltip("bounceRate:Q", format=".1%")],
        )
        .properties(height=CHART_HEIGHT)
    )


def views_chart(city: pd.DataFrame) -> alt.Chart:
    return (
        alt.Chart(city)
        .mark_bar(color=COLORS["accent"])
        .encode(
            x=alt.X("city:N", sort=list(city["city"]), title=None),
            y=alt.Y("pageviews:Q", title="Page Views"),
            tooltip=["city:N", "pageviews:Q"],
        )
        .properties(height=CHART_HEIGHT)
    )


def _arc_chart(df: pd.DataFrame, label: str, value: str, inner_radius: int, legend_orient: str) -> alt.Chart:
    return (
        alt.Chart(df)
        .mark_arc(innerRadius=inner_radius)
        .encode(
            theta=alt.Theta(f"{value}:Q"),
            color=alt.Color(
                f"{label}:N",
                title=None,
                sort=list(df[label]),
                scale=alt.Scale(range=CATEGORY_PALETTE),
                legend=alt.Legend(orient=legend_orient),
            ),
            tooltip=[f"{label}:N", f"{value}:Q"],
        )
        .properties(height=CHART_HEIGHT)
    )


def traffic_source_chart(sources: pd.DataFrame) -> alt.Chart:
    """Doughnut of sessions per default channel group."""
    return _arc_chart(sources, "source", "sessions", inner_radius=60, legend_orient="right")


def platform_chart(platforms: pd.DataFrame) -> alt.Chart:
    return _arc_chart(platforms, "platform", "sessions", inner_radius=0, legend_orient="bottom")


def location_chart(locations: pd.DataFrame) -> alt.Chart:
    return (
        alt.Chart(locations)
        .mark_bar(color=COLORS["primary"])
        .encode(
            x=alt.X("pageviews:Q", title="Page Views"),
            y=alt.Y("location:N", sort=list(locations["location"]), title=None),
            tooltip=["location:N", "pageviews:Q"],
        )
        .properties(height=CHART_HEIGHT)
    )


def build_charts(envelope: dict) -> Dict[str, alt.Chart]:
    """The six dashboard charts, keyed like CHART_TITLES."""
    city = _frame(envelope.get("cityData"), CITY_COLUMNS)
    sources = _frame(envelope.get("trafficSources"), ["source", "sessions"])
    platforms = _frame(envelope.get("platforms"), ["platform", "sessions"])
    locations = _frame(envelope.get("locationData"), ["location", "pageviews"])

    return {
        "users_sessions": users_sessions_chart(city),
        "bounce":         bounce_chart(city),
        "views":          views_chart(city),
        "traffic_source": traffic_source_chart(sources),
        "platform":       platform_chart(platforms),
        "location":       location_chart(locations),
    }
