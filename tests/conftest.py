"""Shared fixtures – an in-memory SQLite database and a clock pinned to 2026-02-01."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEMO_DATA"] = "false"

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from patientcare.api.dependencies import get_today  # noqa: E402
from patientcare.main import app  # noqa: E402
from patientcare.models.database import Base, SessionLocal, engine  # noqa: E402
from patientcare.models.patient import BloodType, Gender, Patient  # noqa: E402
from patientcare.services.patients import PatientService  # noqa: E402
from patientcare.services.store import PatientStore  # noqa: E402

TODAY = date(2026, 2, 1)


def make_patient(
    insurance_number="INS-001",
    first_name="Anna",
    last_name="Smith",
    date_of_birth=date(1985, 5, 10),
    gender=Gender.FEMALE,
    blood_type=BloodType.O_POS,
):
    return Patient(
        first_name=first_name,
        last_name=last_name,
        date_of_birth=date_of_birth,
        gender=gender,
        insurance_number=insurance_number,
        blood_type=blood_type,
    )


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return PatientStore(db)


@pytest.fixture
def service(store):
    return PatientService(store, today=TODAY)


@pytest.fixture
def client():
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def new_patient():
    return make_patient


@pytest.fixture
def four_patients(store):
    """The fixed population used by the search and statistics scenarios."""
    rows = [
        make_patient("M1", "John", "Doe", date(1985, 6, 15), Gender.MALE, BloodType.O_POS),
        make_patient("F1", "Jane", "Roe", date(1990, 3, 20), Gender.FEMALE, BloodType.A_POS),
        make_patient("F2", "Mia", "Lee", date(1995, 8, 25), Gender.FEMALE, BloodType.AB_POS),
        make_patient("M2", "Tom", "Kay", date(2000, 2, 15), Gender.MALE, BloodType.O_NEG),
    ]
    return [store.insert(row) for row in rows]
