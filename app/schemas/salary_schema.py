# app/schemas/salary_schema.py
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import blank_to_none, blank_to_zero
from app.schemas.employee_schema import EmployeeOut


class SalaryCreateSchema(BaseModel):
    employee_id: str
    year: int = Field(ge=1900, le=2200)
    month: int = Field(ge=1, le=12)
    salaire: Decimal = Field(ge=0)
    prime: Decimal = Decimal("0")
    absence: Decimal = Decimal("0")
    avance: Decimal = Decimal("0")
    date_avance: Optional[date] = None

    normalize_amounts = field_validator("prime", "absence", "avance", mode="before")(blank_to_zero)
    normalize_blank = field_validator("date_avance", mode="before")(blank_to_none)


class SalaryUpdateSchema(BaseModel):
    employee_id: Optional[str] = None
    year: Optional[int] = Field(default=None, ge=1900, le=2200)
    month: Optional[int] = Field(default=None, ge=1, le=12)
    salaire: Optional[Decimal] = Field(default=None, ge=0)
    prime: Optional[Decimal] = None
    absence: Optional[Decimal] = None
    avance: Optional[Decimal] = None
    date_avance: Optional[date] = None

    normalize_amounts = field_validator("prime", "absence", "avance", mode="before")(blank_to_zero)
    normalize_blank = field_validator("date_avance", mode="before")(blank_to_none)


class SalaryOut(BaseModel):
    id: str
    employee_id: str
    year: int
    month: int
    salaire: float
    prime: Optional[float] = None
    absence: Optional[float] = None
    avance: Optional[float] = None
    date_avance: Optional[date] = None
    created_at: datetime
    updated_at: datetime
    employee: Optional[EmployeeOut] = None

    model_config = {"from_attributes": True}
