"""
JSON schema for an inbound patient record.

Each property lists the constraint keywords it must satisfy and, under
``messages``, the client-facing text reported when a keyword fails. The
validator ignores ``messages``; the validation service reads it back from
the failing subschema. ``pastDate`` is a custom keyword (see
``patientcare.services.validation``).
"""

from patientcare.models.patient import BloodType, Gender

_NOT_BLANK = {"type": "string", "pattern": "\\S"}

PATIENT_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Patient",
    "description": "Administrative patient record as accepted by create and update.",
    "type": "object",
    "properties": {
        "firstName": {
            **_NOT_BLANK,
            "messages": {
                "type": "First name is mandatory",
                "pattern": "First name is mandatory",
            },
        },
        "lastName": {
            **_NOT_BLANK,
            "messages": {
                "type": "Last name is mandatory",
                "pattern": "Last name is mandatory",
            },
        },
        "dateOfBirth": {
            "type": "string",
            "pastDate": True,
            "description": "ISO 8601 date (YYYY-MM-DD), strictly before today.",
            "messages": {
                "type": "Date of birth is mandatory",
                "pastDate": "Date of birth must be in the past",
            },
        },
        "gender": {
            "type": "string",
            "enum": [g.value for g in Gender],
            "messages": {
                "type": "Gender is mandatory",
                "enum": "Gender is mandatory",
            },
        },
        "insuranceNumber": {
            **_NOT_BLANK,
            "messages": {
                "type": "Insurance number is mandatory",
                "pattern": "Insurance number is mandatory",
            },
        },
        "bloodType": {
            "type": "string",
            "enum": [b.value for b in BloodType],
            "messages": {
                "type": "Blood type is mandatory",
                "enum": "Blood type is mandatory",
            },
        },
    },
}
