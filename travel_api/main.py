import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.responses import JSONResponse

from travel_api.api.clients import router as clients_router
from travel_api.api.error_handlers import register_error_handlers
from travel_api.api.trips import router as trips_router
from travel_api.config import get_settings
from travel_api.db import travel

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Travel API started")
    yield
    logger.info("Travel API shutting down")


app = FastAPI(
    title="Travel Trips API",
    version="0.1.0",
    lifespan=lifespan,
)

register_error_handlers(app)


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/health/ready")
def readiness_check():
    try:
        travel.ping()
    except Exception:
        logger.exception("Database readiness check failed")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready"}


app.include_router(trips_router)
app.include_router(clients_router)
