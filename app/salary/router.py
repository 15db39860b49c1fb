# app/salary/router.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.company.models import Company
from app.employees.models import Employee
from app.salary.models import Salary
from app.schemas.common import blank_to_none
from app.schemas.salary_schema import SalaryCreateSchema, SalaryUpdateSchema, SalaryOut
from app.schemas.document_schema import PayslipRequest
from app.utils.pdf_generator import render_payslip, PdfRenderError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["salaries"])

DUPLICATE_MONTH_MESSAGE = "Un salaire existe déjà pour cet employé ce mois-ci"


def pdf_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def int_filter(name: str, value: Optional[str]) -> Optional[int]:
    """Query filter as an int; a blank value means no filter."""
    value = blank_to_none(value)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"{name}: must be an integer")


@router.get("/salaries", response_model=List[SalaryOut])
def list_salaries(year: Optional[str] = None, month: Optional[str] = None, db: Session = Depends(get_db)):
    year = int_filter("year", year)
    month = int_filter("month", month)
    q = db.query(Salary)
    if year:
        q = q.filter(Salary.year == year)
    if month:
        q = q.filter(Salary.month == month)
    try:
        salaries = q.order_by(Salary.created_at.desc()).all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch salaries")
        raise HTTPException(status_code=500, detail="Failed to fetch salaries")

    logger.info("Fetched %s salaries for filters year=%s month=%s", len(salaries), year, month)
    return salaries


@router.get("/salaries/{salary_id}", response_model=SalaryOut)
def get_salary(salary_id: str, db: Session = Depends(get_db)):
    salary = db.get(Salary, salary_id)
    if not salary:
        raise HTTPException(status_code=404, detail="Salary not found")
    return salary


@router.post("/salaries", response_model=SalaryOut)
def create_salary(body: SalaryCreateSchema, db: Session = Depends(get_db)):
    if not db.get(Employee, body.employee_id):
        raise HTTPException(status_code=404, detail="Employee not found")

    # one row per employee and month: enforced by uq_salary_employee_month
    salary = Salary(**body.model_dump())
    db.add(salary)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Duplicate salary for employee %s %s-%s", body.employee_id, body.year, body.month)
        raise HTTPException(status_code=409, detail=DUPLICATE_MONTH_MESSAGE)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create salary")
        raise HTTPException(status_code=500, detail="Failed to create salary")

    db.refresh(salary)
    return salary


@router.put("/salaries/{salary_id}", response_model=SalaryOut)
def update_salary(salary_id: str, body: SalaryUpdateSchema, db: Session = Depends(get_db)):
    salary = db.get(Salary, salary_id)
    if not salary:
        raise HTTPException(status_code=404, detail="Salary not found")

    changes = body.model_dump(exclude_unset=True)
    for field in ("employee_id", "year", "month", "salaire"):
        if changes.get(field, "") is None:
            changes.pop(field)
    if "employee_id" in changes and not db.get(Employee, changes["employee_id"]):
        raise HTTPException(status_code=404, detail="Employee not found")

    for field, value in changes.items():
        setattr(salary, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail=DUPLICATE_MONTH_MESSAGE)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update salary %s", salary_id)
        raise HTTPException(status_code=500, detail="Failed to update salary")

    db.refresh(salary)
    return salary


@router.delete("/salaries/{salary_id}")
def delete_salary(salary_id: str, db: Session = Depends(get_db)):
    try:
        db.query(Salary).filter(Salary.id == salary_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete salary %s", salary_id)
        raise HTTPException(status_code=500, detail="Failed to delete salary")
    return {"message": "Salary deleted"}


@router.post("/generate-payslip")
def generate_payslip(body: PayslipRequest, db: Session = Depends(get_db)):
    salary = db.get(Salary, body.salaryId)
    if not salary or not salary.employee:
        raise HTTPException(status_code=404, detail="Salaire ou employé non trouvé")

    company = Company.first(db)
    try:
        pdf = render_payslip(salary, company)
    except PdfRenderError:
        raise HTTPException(status_code=500, detail="Erreur lors de la génération du PDF")

    logger.info("Payslip generated for %s %s-%02d", salary.employee.code, salary.year, salary.month)
    return pdf_response(pdf, f"bulletin-{salary.employee.code}.pdf")
