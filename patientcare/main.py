"""
FastAPI application entrypoint.

Run locally:  uvicorn patientcare.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from patientcare.api.errors import register_error_handlers
from patientcare.api.routes import health_router, router
from patientcare.config import settings
from patientcare.models.database import Base, engine
from patientcare.seed import seed_demo_data

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    if settings.SEED_DEMO_DATA:
        seed_demo_data()
    logger.info("%s ready (%s)", settings.CLINIC_NAME, settings.ENVIRONMENT)
    yield
    logger.info("Shutting down")


app = FastAPI(
    lifespan=lifespan,
    title="Patient Care API",
    description=(
        "Administrative patient records for a clinic: create, read, update, "
        "soft delete, filtered search and summary statistics."
    ),
    version="1.0.0",
)

register_error_handlers(app)
app.include_router(router, prefix="/api/patients")
app.include_router(health_router)

