# app/company/router.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.company.models import Company
from app.schemas.company_schema import CompanySchema, CompanyOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/company", tags=["company"])


@router.get("", response_model=Optional[CompanyOut])
def get_company(db: Session = Depends(get_db)):
    try:
        return Company.first(db)
    except SQLAlchemyError:
        logger.exception("Failed to fetch company")
        raise HTTPException(status_code=500, detail="Failed to fetch company")


@router.post("", response_model=CompanyOut)
def save_company(body: CompanySchema, db: Session = Depends(get_db)):
    """Upsert of the company profile: update the first row, create it if there is none."""
    try:
        company = Company.first(db)
        if company is None:
            company = Company(**body.model_dump())
            db.add(company)
            logger.info("Company profile created: %s", body.nom)
        else:
            for field, value in body.model_dump(exclude_unset=True).items():
                setattr(company, field, value)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to save company settings")
        raise HTTPException(status_code=500, detail="Failed to save company settings")

    db.refresh(company)
    return company
