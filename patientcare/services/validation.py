"""
JSON Schema validation of inbound patient records.

- Collects every failing field rather than stopping at the first one
- Reports one fixed message per field, taken from the schema itself
"""

from __future__ import annotations

from datetime import date
from typing import Any

import jsonschema
from jsonschema import validators
from jsonschema.exceptions import ValidationError

from patientcare.schemas.patient import PATIENT_SCHEMA


def _past_date(validator, reference, instance, schema):
    """``pastDate``: true compares with today, an ISO date string with that day."""
    if not reference or not isinstance(instance, str):
        return
    cutoff = date.today() if reference is True else date.fromisoformat(reference)
    try:
        value = date.fromisoformat(instance)
    except ValueError:
        yield ValidationError(f"{instance!r} is not an ISO 8601 date")
        return
    if value >= cutoff:
        yield ValidationError(f"{instance} is not before {cutoff.isoformat()}")


PatientValidator = validators.extend(jsonschema.Draft7Validator, {"pastDate": _past_date})


def _schema_as_of(today: date) -> dict[str, Any]:
    properties = dict(PATIENT_SCHEMA["properties"])
    properties["dateOfBirth"] = {**properties["dateOfBirth"], "pastDate": today.isoformat()}
    return {**PATIENT_SCHEMA, "properties": properties}


def validate_patient(data: dict[str, Any], today: date) -> dict[str, str]:
    """
    Validate a camelCase patient dict.
    Returns ``{fieldName: message}`` for every violated field (empty dict = valid).
    """
    # Absent fields are checked as null so they report "is mandatory"
    record = {name: data.get(name) for name in PATIENT_SCHEMA["properties"]}

    errors: dict[str, str] = {}
    for error in PatientValidator(_schema_as_of(today)).iter_errors(record):
        field = str(error.absolute_path[0])
        message = error.schema.get("messages", {}).get(error.validator, error.message)
        errors.setdefault(field, message)
    return errors
