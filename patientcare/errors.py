"""Domain and persistence errors raised below the HTTP layer."""

from __future__ import annotations


class PatientError(Exception):
    """Base class for errors the API translates into client responses."""


class PatientValidationError(PatientError):
    """One or more fields failed validation."""

    def __init__(self, errors: dict[str, str]):
        super().__init__(f"Validation failed for: {', '.join(sorted(errors))}")
        self.errors = errors


class DuplicateInsuranceError(PatientError):
    def __init__(self, insurance_number: str | None = None):
        super().__init__("Insurance number must be unique")
        self.insurance_number = insurance_number


class PatientNotFoundError(PatientError):
    def __init__(self, patient_id: int | None = None):
        super().__init__("Patient not found")
        self.patient_id = patient_id


class ConcurrentModificationError(PatientError):
    code = "OPTIMISTIC_LOCK"

    def __init__(self, patient_id: int | None = None):
        super().__init__("data has been changed")
        self.patient_id = patient_id


# ---------------------------------------------------------------------------
# Store-level failures; the service converts these before they reach the API
# ---------------------------------------------------------------------------

class UniqueViolationError(Exception):
    pass


class StaleRecordError(Exception):
    pass
