# app/employees/router.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.employees.models import Employee
from app.employees.sequence import next_code
from app.schemas.employee_schema import EmployeeCreateSchema, EmployeeUpdateSchema, EmployeeOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/employees", tags=["employees"])

PLACEHOLDER_CODE = "TEMP"
REQUIRED_FIELDS = {"code", "nom", "prenom", "cin", "type_contrat", "poste", "date_embauche"}
DUPLICATE_MESSAGE = "Un employé avec ce matricule ou ce CIN existe déjà"


def needs_generated_code(code) -> bool:
    return not code or code == PLACEHOLDER_CODE


def get_employee_or_404(db: Session, employee_id: str) -> Employee:
    emp = db.get(Employee, employee_id)
    if not emp:
        raise HTTPException(status_code=404, detail="Employee not found")
    return emp


@router.get("", response_model=List[EmployeeOut])
def list_employees(db: Session = Depends(get_db)):
    try:
        return db.query(Employee).order_by(Employee.created_at.desc()).all()
    except SQLAlchemyError:
        logger.exception("Failed to fetch employees")
        raise HTTPException(status_code=500, detail="Failed to fetch employees")


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: str, db: Session = Depends(get_db)):
    return get_employee_or_404(db, employee_id)


@router.post("", response_model=EmployeeOut)
def create_employee(body: EmployeeCreateSchema, db: Session = Depends(get_db)):
    data = body.model_dump()
    # blank optional inputs fall back to the column defaults
    data = {k: v for k, v in data.items() if v is not None}

    try:
        if needs_generated_code(data.get("code")):
            data["code"] = next_code(db)
        emp = Employee(**data)
        db.add(emp)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Duplicate employee code/CIN: code=%s cin=%s", data.get("code"), data.get("cin"))
        raise HTTPException(status_code=409, detail=DUPLICATE_MESSAGE)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error creating employee")
        raise HTTPException(status_code=500, detail="Failed to create employee")

    db.refresh(emp)
    logger.info("Employee %s created (%s %s)", emp.code, emp.nom, emp.prenom)
    return emp


@router.put("/{employee_id}", response_model=EmployeeOut)
def update_employee(employee_id: str, body: EmployeeUpdateSchema, db: Session = Depends(get_db)):
    emp = get_employee_or_404(db, employee_id)

    for field, value in body.model_dump(exclude_unset=True).items():
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(emp, field, value)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail=DUPLICATE_MESSAGE)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error updating employee %s", employee_id)
        raise HTTPException(status_code=500, detail="Failed to update employee")

    db.refresh(emp)
    return emp


@router.delete("/{employee_id}")
def delete_employee(employee_id: str, db: Session = Depends(get_db)):
    """Deleting an unknown id is not an error. Salaries are not removed here."""
    try:
        deleted = db.query(Employee).filter(Employee.id == employee_id).delete(synchronize_session=False)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Cet employé a encore des salaires enregistrés")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error deleting employee %s", employee_id)
        raise HTTPException(status_code=500, detail="Failed to delete employee")

    logger.info("Employee %s delete -> %s row(s)", employee_id, deleted)
    return {"message": "Employee deleted"}
