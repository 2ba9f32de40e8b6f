# dashboard/config.py
import os
from dotenv import load_dotenv

# Load env for local/dev; harmless in prod
load_dotenv()

API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:3000").rstrip("/")
API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", "30"))

# envelope key -> (label field, numeric metric fields)
RECORD_FIELDS = {
    "cityData":       ("city", ("users", "sessions", "bounceRate", "pageviews")),
    "trafficSources": ("source", ("sessions",)),
    "platforms":      ("platform", ("sessions",)),
    "locationData":   ("location", ("pageviews",)),
}

# Shown whenever the gateway can't be reached or returns something unusable.
DEMO_ENVELOPE = {
    "cityData": [
        {"city": "New York", "users": 1250, "sessions": 1890, "bounceRate": 0.45, "pageviews": 3450},
        {"city": "London",   "users": 980,  "sessions": 1456, "bounceRate": 0.52, "pageviews": 2890},
        {"city": "Tokyo",    "users": 756,  "sessions": 1123, "bounceRate": 0.38, "pageviews": 2234},
        {"city": "Sydney",   "users": 543,  "sessions": 798,  "bounceRate": 0.48, "pageviews": 1567},
        {"city": "Paris",    "users": 432,  "sessions": 645,  "bounceRate": 0.41, "pageviews": 1234},
    ],
    "trafficSources": [
        {"source": "Organic Search", "sessions": 2456},
        {"source": "Direct",         "sessions": 1789},
        {"source": "Social",         "sessions": 987},
        {"source": "Email",          "sessions": 654},
        {"source": "Referral",       "sessions": 432},
    ],
    "platforms": [
        {"platform": "Desktop", "sessions": 3567},
        {"platform": "Mobile",  "sessions": 2789},
        {"platform": "Tablet",  "sessions": 456},
    ],
    "locationData": [
        {"location": "United States",  "pageviews": 4567},
        {"location": "United Kingdom", "pageviews": 3234},
        {"location": "Canada",         "pageviews": 2456},
        {"location": "Australia",      "pageviews": 1789},
        {"location": "Germany",        "pageviews": 1234},
    ],
}

# ─── Chart look ───────────────────────────────────────────────────────────────
COLORS = {
    "primary":   "#00796b",
    "secondary": "#ff9800",
    "accent":    "#3f51b5",
    "danger":    "#f44336",
}
CATEGORY_PALETTE = ["#00796b", "#ff9800", "#3f51b5", "#f44336", "#4caf50", "#9c27b0"]
CHART_HEIGHT = 320

# Chart slots in display order: key -> title
CHART_TITLES = {
    "users_sessions":  "Users & Sessions by City",
    "bounce":          "Bounce Rate by City",
    "views":           "Views by City",
    "traffic_source":  "Traffic Sources",
    "platform":        "Traffic by Platform",
    "location":        "Views by Location",
}
