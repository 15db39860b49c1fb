# app/schemas/employee_schema.py
from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

from app.schemas.common import blank_to_none

ContractType = Literal["CDI", "CDD", "STAGE", "FREELANCE", "INTERIM", "SIVP", "VERBAL"]
IdType = Literal["CIN", "Passeport"]

OPTIONAL_FIELDS = ("code", "service", "id_date", "id_place", "nationalite", "id_type")


class EmployeeCreateSchema(BaseModel):
    code: Optional[str] = None
    nom: str
    prenom: str
    cin: str
    type_contrat: ContractType
    service: Optional[str] = None
    poste: str
    date_embauche: date
    nationalite: Optional[str] = "tunisienne"
    id_type: Optional[IdType] = "CIN"
    id_date: Optional[date] = None
    id_place: Optional[str] = None

    normalize_blank = field_validator(*OPTIONAL_FIELDS, mode="before")(blank_to_none)


class EmployeeUpdateSchema(BaseModel):
    code: Optional[str] = None
    nom: Optional[str] = None
    prenom: Optional[str] = None
    cin: Optional[str] = None
    type_contrat: Optional[ContractType] = None
    service: Optional[str] = None
    poste: Optional[str] = None
    date_embauche: Optional[date] = None
    nationalite: Optional[str] = None
    id_type: Optional[IdType] = None
    id_date: Optional[date] = None
    id_place: Optional[str] = None

    normalize_blank = field_validator(*OPTIONAL_FIELDS, mode="before")(blank_to_none)


class EmployeeOut(BaseModel):
    id: str
    code: str
    nom: str
    prenom: str
    cin: str
    type_contrat: str
    service: Optional[str] = None
    poste: str
    date_embauche: date
    nationalite: Optional[str] = None
    id_type: Optional[str] = None
    id_date: Optional[date] = None
    id_place: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
