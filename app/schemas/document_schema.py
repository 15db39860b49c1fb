# app/schemas/document_schema.py
from datetime import date
from typing import Optional

from pydantic import BaseModel, field_validator

from app.schemas.common import blank_to_none


class PayslipRequest(BaseModel):
    salaryId: str


class WorkCertificateRequest(BaseModel):
    employeeId: str
    isCurrent: bool = False
    issuanceDate: Optional[date] = None
    ville: Optional[str] = None
    departement: Optional[str] = None
    dateFin: Optional[date] = None
    civilite: Optional[str] = None

    normalize_blank = field_validator("issuanceDate", "ville", "departement", "dateFin", "civilite", mode="before")(blank_to_none)


class InternshipCertificateRequest(BaseModel):
    employeeId: str
    dateDebut: Optional[date] = None
    dateFin: Optional[date] = None
    issuanceDate: Optional[date] = None
    ville: Optional[str] = None
    departement: Optional[str] = None
    civilite: Optional[str] = None

    normalize_blank = field_validator("dateDebut", "dateFin", "issuanceDate", "ville", "departement", "civilite", mode="before")(blank_to_none)
