# app/schemas/company_schema.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class CompanySchema(BaseModel):
    nom: str
    adresse: Optional[str] = None
    ville: Optional[str] = None
    logo_url: Optional[str] = None
    cnss_employeur: Optional[str] = None
    rib: Optional[str] = None
    matricule_fiscal: Optional[str] = None
    banque: Optional[str] = None
    ccb: Optional[str] = None
    capital: Optional[str] = None
    telephone: Optional[str] = None


class CompanyOut(CompanySchema):
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
