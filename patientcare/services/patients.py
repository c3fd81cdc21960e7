"""
Patient domain service.

Applies the soft-delete rule to every read, enforces insurance-number
uniqueness among active patients, turns age bounds into birth-date bounds and
assembles the statistics summary. Holds no state beyond its collaborators.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from patientcare.errors import (
    ConcurrentModificationError,
    DuplicateInsuranceError,
    PatientNotFoundError,
    PatientValidationError,
    StaleRecordError,
    UniqueViolationError,
)
from patientcare.models.patient import BloodType, Gender, Patient
from patientcare.schemas.api import PatientRequest
from patientcare.services.store import PatientStore
from patientcare.services.validation import validate_patient

logger = logging.getLogger(__name__)

OLDER_THAN_AGE = 60

# Business fields copied from a request; id, created_at and deleted never are
MUTABLE_FIELDS = (
    "first_name",
    "last_name",
    "date_of_birth",
    "gender",
    "insurance_number",
    "blood_type",
)


def years_before(day: date, years: int) -> date:
    """
    ``day`` shifted back by whole years; 29 February becomes the 28th when needed.
    Shifts past year 1 clamp to ``date.min``, which no birth date precedes.
    """
    if day.year - years < date.min.year:
        return date.min
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


class PatientService:
    def __init__(self, store: PatientStore, today: date | None = None):
        self.store = store
        self.today = today or date.today()

    def get_all(self) -> list[Patient]:
        logger.info("Fetching all patients")
        return self.store.find_active()

    def get_by_id(self, patient_id: int) -> Patient:
        logger.info("Fetching patient by ID: %s", patient_id)
        patient = self.store.find_by_id(patient_id)
        if patient is None or patient.deleted:
            logger.warning("Patient not found with ID: %s", patient_id)
            raise PatientNotFoundError(patient_id)
        return patient

    def create(self, request: PatientRequest) -> Patient:
        self._validate(request)
        logger.info("Creating new patient: %s %s", request.first_name, request.last_name)

        if self.store.exists_by_insurance_number(request.insurance_number):
            logger.warning("Duplicate insurance number: %s", request.insurance_number)
            raise DuplicateInsuranceError(request.insurance_number)

        patient = Patient(**request.model_dump(include=set(MUTABLE_FIELDS)))
        try:
            saved = self.store.insert(patient)
        except UniqueViolationError as exc:
            logger.warning("Insurance number taken at commit: %s", request.insurance_number)
            raise DuplicateInsuranceError(request.insurance_number) from exc

        logger.info("Patient created successfully with ID: %s", saved.id)
        return saved

    def update(self, patient_id: int, request: PatientRequest) -> Patient:
        self._validate(request)
        logger.info("Updating patient with ID: %s", patient_id)

        patient = self.get_by_id(patient_id)
        if (
            request.insurance_number != patient.insurance_number
            and self.store.exists_by_insurance_number(request.insurance_number)
        ):
            logger.warning("Duplicate insurance number: %s", request.insurance_number)
            raise DuplicateInsuranceError(request.insurance_number)

        for field, value in request.model_dump(include=set(MUTABLE_FIELDS)).items():
            setattr(patient, field, value)

        saved = self._save(patient)
        logger.info("Patient updated successfully: ID %s", patient_id)
        return saved

    def soft_delete(self, patient_id: int) -> None:
        logger.info("Soft-deleting patient with ID: %s", patient_id)
        patient = self.get_by_id(patient_id)
        patient.deleted = True
        self._save(patient)
        logger.info("Patient soft-deleted: ID %s", patient_id)

    def search(
        self,
        gender: Gender | None = None,
        blood_type: BloodType | None = None,
        age_from: int | None = None,
        age_to: int | None = None,
    ) -> list[Patient]:
        """
        Search active patients.

        ``age_to`` becomes the earliest allowed birth date and ``age_from`` the
        latest one; both bounds are inclusive, so ``age_from > age_to`` matches
        nothing.
        """
        logger.info(
            "Searching patients with filters: gender=%s, bloodType=%s, ageFrom=%s, ageTo=%s",
            gender, blood_type, age_from, age_to,
        )
        # Youngest age -> latest birth date, oldest age -> earliest birth date
        birth_before = years_before(self.today, age_from) if age_from is not None else None
        birth_after = years_before(self.today, age_to) if age_to is not None else None
        return self.store.search(gender, blood_type, birth_before, birth_after)

    def statistics(self) -> dict[str, int]:
        logger.info("Getting patient statistics")
        return {
            "totalPatients": self.store.count_active(),
            "maleCount": self.store.count_by_gender(Gender.MALE),
            "femaleCount": self.store.count_by_gender(Gender.FEMALE),
            "otherCount": self.store.count_by_gender(Gender.OTHER),
            "olderThan60": self.store.count_dob_before(years_before(self.today, OLDER_THAN_AGE)),
        }

    # -- helpers -----------------------------------------------------------

    def _validate(self, request: PatientRequest) -> None:
        payload: dict[str, Any] = request.model_dump(by_alias=True, mode="json")
        errors = validate_patient(payload, self.today)
        if errors:
            logger.warning("Validation failed: %s", errors)
            raise PatientValidationError(errors)

    def _save(self, patient: Patient) -> Patient:
        try:
            return self.store.update(patient)
        except UniqueViolationError as exc:
            logger.warning("Insurance number taken at commit: %s", patient.insurance_number)
            raise DuplicateInsuranceError(patient.insurance_number) from exc
        except StaleRecordError as exc:
            logger.warning("Concurrent modification of patient %s", patient.id)
            raise ConcurrentModificationError(patient.id) from exc
