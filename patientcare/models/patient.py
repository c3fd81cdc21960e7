"""
Data model for the clinic's patient catalog.

- One row per patient; deletion is logical via the ``deleted`` flag
- Insurance numbers are unique among active rows (partial unique index)
- ``version`` drives SQLAlchemy's optimistic concurrency check
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Enum,
    Index,
    Integer,
    String,
    text,
)

from patientcare.models.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Gender(str, enum.Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class BloodType(str, enum.Enum):
    O_POS = "O_POS"
    O_NEG = "O_NEG"
    A_POS = "A_POS"
    A_NEG = "A_NEG"
    B_POS = "B_POS"
    B_NEG = "B_NEG"
    AB_POS = "AB_POS"
    AB_NEG = "AB_NEG"


# ---------------------------------------------------------------------------
# Patient
# ---------------------------------------------------------------------------
class Patient(Base):
    __tablename__ = "patients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    date_of_birth = Column(Date, nullable=False)
    gender = Column(Enum(Gender, name="gender_enum"), nullable=False)
    insurance_number = Column(String, nullable=False, comment="Unique among active patients")
    blood_type = Column(Enum(BloodType, name="blood_type_enum"), nullable=False)
    # Naive UTC; never rewritten after insert
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    __table_args__ = (
        Index(
            "uq_patients_active_insurance_number",
            "insurance_number",
            unique=True,
            postgresql_where=text("deleted = false"),
            sqlite_where=text("deleted = 0"),
        ),
        Index("ix_patients_deleted", "deleted"),
    )

    def __repr__(self) -> str:
        return f"<Patient id={self.id} insurance_number={self.insurance_number!r} deleted={self.deleted}>"
