"""
FastAPI routes for the patient catalog.

Handlers only decode the request, call the service and encode the result;
failures propagate to the handlers in ``patientcare.api.errors``.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from patientcare.api.dependencies import get_patient_service
from patientcare.config import settings
from patientcare.models.database import get_db
from patientcare.models.patient import BloodType, Gender
from patientcare.schemas.api import (
    HealthResponse,
    PatientRequest,
    PatientResponse,
    StatisticsResponse,
)
from patientcare.services.patients import PatientService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["patients"])
health_router = APIRouter(tags=["health"])


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

@health_router.get("/health", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db)):
    """Basic health endpoint – verifies DB connectivity."""
    try:
        db.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception:
        logger.warning("Health check could not reach the database", exc_info=True)
        db_status = "disconnected"
    return HealthResponse(
        status="healthy",
        environment=settings.ENVIRONMENT,
        database=db_status,
    )


# ---------------------------------------------------------------------------
# Fixed paths (registered before /{patient_id})
# ---------------------------------------------------------------------------

@router.get("/info", response_class=PlainTextResponse)
def info():
    return f"Welcome to {settings.CLINIC_NAME}!"


@router.get("/search", response_model=list[PatientResponse])
def search_patients(
    gender: Gender | None = None,
    blood_type: BloodType | None = Query(None, alias="bloodType"),
    age_from: int | None = Query(None, alias="ageFrom", ge=0),
    age_to: int | None = Query(None, alias="ageTo", ge=0),
    service: PatientService = Depends(get_patient_service),
):
    """Active patients matching every supplied filter; age bounds are inclusive."""
    return service.search(gender, blood_type, age_from, age_to)


@router.get("/statistics", response_model=StatisticsResponse)
def statistics(service: PatientService = Depends(get_patient_service)):
    return service.statistics()


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------

@router.get("", response_model=list[PatientResponse])
@router.get("/", response_model=list[PatientResponse], include_in_schema=False)
def list_patients(service: PatientService = Depends(get_patient_service)):
    return service.get_all()


@router.get("/{patient_id}", response_model=PatientResponse)
def get_patient(patient_id: int, service: PatientService = Depends(get_patient_service)):
    return service.get_by_id(patient_id)


@router.post("", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
@router.post(
    "/",
    response_model=PatientResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_patient(
    patient: PatientRequest,
    service: PatientService = Depends(get_patient_service),
):
    return service.create(patient)


@router.put("/{patient_id}", response_model=PatientResponse)
def update_patient(
    patient_id: int,
    patient: PatientRequest,
    service: PatientService = Depends(get_patient_service),
):
    """Replace the business fields of an active patient; id and createdAt are kept."""
    return service.update(patient_id, patient)


@router.delete(
    "/{patient_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_patient(patient_id: int, service: PatientService = Depends(get_patient_service)):
    """Soft delete: the row stays in storage and disappears from every read."""
    service.soft_delete(patient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
