"""Tests for the mapping of domain errors to HTTP responses."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from patientcare.api.errors import register_error_handlers
from patientcare.errors import (
    ConcurrentModificationError,
    DuplicateInsuranceError,
    PatientNotFoundError,
    PatientValidationError,
)

ERRORS = {
    "validation": PatientValidationError({"lastName": "Last name is mandatory"}),
    "duplicate": DuplicateInsuranceError("999999"),
    "missing": PatientNotFoundError(7),
    "conflict": ConcurrentModificationError(7),
    "crash": RuntimeError("connection string postgresql://secret@db leaked"),
}


@pytest.fixture
def error_client():
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/raise/{kind}")
    def raise_error(kind: str):
        raise ERRORS[kind]

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.parametrize(
    "kind, status_code, body",
    [
        ("validation", 400, {"lastName": "Last name is mandatory"}),
        ("duplicate", 400, {"error": "Insurance number must be unique"}),
        ("missing", 404, {"error": "Patient not found"}),
        ("conflict", 409, {"code": "OPTIMISTIC_LOCK", "error": "data has been changed"}),
        ("crash", 500, {"error": "Internal server error"}),
    ],
)
def test_error_mapping(error_client, kind, status_code, body):
    response = error_client.get(f"/raise/{kind}")

    assert response.status_code == status_code
    assert response.json() == body
