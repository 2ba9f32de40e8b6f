# app/services/routes_ga.py
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.config import Settings, get_settings
from app.errors import ReportError
from app.models import DashboardEnvelope, ErrorEnvelope, HealthReport
from app.services.fixtures import sample_envelope
from app.services.ga4 import get_client
from app.services.reports import build_envelope
from app.utils.common import utc_now_iso

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Google Analytics"])


# -------------------- MAIN ROUTE --------------------

@router.get(
    "/analytics-data",
    response_model=DashboardEnvelope,
    responses={500: {"model": ErrorEnvelope}},
)
def analytics_data(
    settings: Settings = Depends(get_settings),
    ga_client=Depends(get_client),
):
    log.info("📊 Fetching analytics data...")
    try:
        envelope = build_envelope(ga_client, settings.GA_PROPERTY_ID)
    except Exception as e:
        log.error(f"❌ Error fetching analytics data: {e}", exc_info=True)
        raise ReportError(str(e))

    log.info("✅ Analytics data fetched successfully")
    return envelope


# -------------------- SUPPORT ROUTES --------------------

@router.get("/health", response_model=HealthReport)
def health(settings: Settings = Depends(get_settings)):
    return HealthReport(
        status="OK",
        timestamp=utc_now_iso(),
        environment=settings.credential_flags(),
    )


@router.get("/test-data", response_model=DashboardEnvelope)
def test_data():
    return sample_envelope()


root_router = APIRouter()


@root_router.get("/", response_class=PlainTextResponse)
def root():
    return "📡 Barocci Analytics API is up and running."
