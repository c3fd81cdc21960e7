"""
Demo data seeder.

Loads a handful of patients so a fresh database has something to browse and
search. Rows are keyed by insurance number, so calling this on every startup
is safe: patients whose number is already active are left alone.
"""

import logging
from datetime import date

from patientcare.models.database import SessionLocal
from patientcare.models.patient import BloodType, Gender, Patient
from patientcare.services.store import PatientStore

logger = logging.getLogger(__name__)

DEMO_PATIENTS = [
    {
        "first_name": "John",
        "last_name": "Doe",
        "date_of_birth": date(1985, 6, 15),
        "gender": Gender.MALE,
        "insurance_number": "M8506151234",
        "blood_type": BloodType.O_POS,
    },
    {
        "first_name": "Jane",
        "last_name": "Smith",
        "date_of_birth": date(1990, 3, 20),
        "gender": Gender.FEMALE,
        "insurance_number": "F9003205678",
        "blood_type": BloodType.A_POS,
    },
    {
        "first_name": "Maria",
        "last_name": "Garcia",
        "date_of_birth": date(1995, 8, 25),
        "gender": Gender.FEMALE,
        "insurance_number": "F9508259012",
        "blood_type": BloodType.AB_POS,
    },
    {
        "first_name": "Alex",
        "last_name": "Brown",
        "date_of_birth": date(2000, 2, 15),
        "gender": Gender.MALE,
        "insurance_number": "M0002153456",
        "blood_type": BloodType.O_NEG,
    },
]


def seed_demo_data(session_factory=SessionLocal) -> int:
    """Insert missing demo patients; returns how many were added."""
    db = session_factory()
    try:
        store = PatientStore(db)
        added = 0
        for record in DEMO_PATIENTS:
            if store.exists_by_insurance_number(record["insurance_number"]):
                continue
            store.insert(Patient(**record))
            added += 1
        logger.info("Seeded %d demo patients", added)
        return added
    finally:
        db.close()
