# main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.config import settings
from app.errors import ServiceError
from app.services.ga4 import init_client
from app.services.routes_ga import router as analytics_router, root_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Exits on missing credentials / client construction failure
    app.state.ga4_client = init_client(settings)
    log.info(f"🚀 Server running on port {settings.PORT}")
    log.info(f"📊 Environment: {settings.ENVIRONMENT}")
    yield


app = FastAPI(title="Barocci Analytics", version="1.0.0", lifespan=lifespan)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# ── Routers ───────────────────────────────────────────────────────────────────
app.include_router(analytics_router)
app.include_router(root_router)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
