"""
Persistence of Patient rows.

Every filtered read honors the ``deleted`` flag; ``find_by_id`` is the one
lookup that does not, so the service can tell a soft-deleted row apart from a
missing one if it ever needs to.
"""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from patientcare.errors import StaleRecordError, UniqueViolationError
from patientcare.models.patient import BloodType, Gender, Patient

logger = logging.getLogger(__name__)


class PatientStore:
    """Primitive queries over the ``patients`` table, one session per instance."""

    def __init__(self, db: Session):
        self.db = db

    def _active(self):
        return self.db.query(Patient).filter(Patient.deleted.is_(False))

    # -- writes ------------------------------------------------------------

    def insert(self, patient: Patient) -> Patient:
        patient.deleted = False
        self.db.add(patient)
        self._commit()
        self.db.refresh(patient)
        logger.debug("Inserted patient %s", patient.id)
        return patient

    def update(self, patient: Patient) -> Patient:
        """Persist the mutable columns of an already-loaded patient."""
        self._commit()
        self.db.refresh(patient)
        return patient

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise UniqueViolationError(str(exc.orig)) from exc
        except StaleDataError as exc:
            self.db.rollback()
            raise StaleRecordError(str(exc)) from exc

    # -- reads -------------------------------------------------------------

    def find_by_id(self, patient_id: int) -> Patient | None:
        return self.db.get(Patient, patient_id)

    def find_active(self) -> list[Patient]:
        return self._active().order_by(Patient.id).all()

    def exists_by_insurance_number(self, insurance_number: str) -> bool:
        query = self._active().filter(Patient.insurance_number == insurance_number)
        return self.db.query(query.exists()).scalar()

    def count_active(self) -> int:
        return self._count(self._active())

    def count_by_gender(self, gender: Gender) -> int:
        return self._count(self._active().filter(Patient.gender == gender))

    def count_dob_before(self, cutoff: date) -> int:
        return self._count(self._active().filter(Patient.date_of_birth < cutoff))

    def search(
        self,
        gender: Gender | None = None,
        blood_type: BloodType | None = None,
        birth_before: date | None = None,
        birth_after: date | None = None,
    ) -> list[Patient]:
        """Active patients matching every supplied filter; ``None`` means unfiltered."""
        query = self._active()
        if gender is not None:
            query = query.filter(Patient.gender == gender)
        if blood_type is not None:
            query = query.filter(Patient.blood_type == blood_type)
        if birth_before is not None:
            query = query.filter(Patient.date_of_birth <= birth_before)
        if birth_after is not None:
            query = query.filter(Patient.date_of_birth >= birth_after)
        return query.order_by(Patient.id).all()

    @staticmethod
    def _count(query) -> int:
        return query.with_entities(func.count(Patient.id)).scalar()
