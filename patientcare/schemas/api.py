"""Pydantic models for API request/response serialization."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from patientcare.models.patient import BloodType, Gender


# ---------------------------------------------------------------------------
# Patient
# ---------------------------------------------------------------------------

class PatientRequest(BaseModel):
    """
    Inbound patient body for create and update.

    Every field is optional here so that missing values reach the validator
    and are reported per field; ``id``, ``createdAt`` and ``deleted`` are not
    declared and are therefore ignored along with any other unknown key.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    first_name: str | None = None
    last_name: str | None = None
    date_of_birth: date | None = None
    gender: Gender | None = None
    insurance_number: str | None = None
    blood_type: BloodType | None = None


class PatientResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int | None
    first_name: str
    last_name: str
    date_of_birth: date
    gender: Gender
    insurance_number: str
    blood_type: BloodType
    created_at: datetime
    deleted: bool


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------

class StatisticsResponse(BaseModel):
    totalPatients: int
    maleCount: int
    femaleCount: int
    otherCount: int
    olderThan60: int


# ---------------------------------------------------------------------------
# Errors and health check
# ---------------------------------------------------------------------------

class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "healthy"
    environment: str
    database: str = "connected"
