from datetime import date

from fastapi import Depends
from sqlalchemy.orm import Session

from patientcare.models.database import get_db
from patientcare.services.patients import PatientService
from patientcare.services.store import PatientStore


def get_today() -> date:
    """
    The server's current date; overridden in tests to pin the clock.
    """
    return date.today()


def get_patient_service(
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
) -> PatientService:
    """
    Build a service over a request-scoped session.
    """
    return PatientService(PatientStore(db), today=today)
