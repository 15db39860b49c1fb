# app/attestations/router.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.company.models import Company
from app.employees.models import Employee
from app.salary.router import pdf_response
from app.schemas.document_schema import WorkCertificateRequest, InternshipCertificateRequest
from app.utils.certificate_generator import render_work_certificate, render_internship_certificate
from app.utils.pdf_generator import PdfRenderError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["attestations"])

RENDER_ERROR = "Erreur lors de la génération de l'attestation"


@router.post("/generate-work-certificate")
def generate_work_certificate(body: WorkCertificateRequest, db: Session = Depends(get_db)):
    employee = db.get(Employee, body.employeeId)
    if not employee:
        raise HTTPException(status_code=404, detail="Employé non trouvé")

    company = Company.first(db)
    try:
        pdf = render_work_certificate(
            employee, company,
            is_current=body.isCurrent,
            issuance_date=body.issuanceDate,
            ville=body.ville,
            departement=body.departement,
            date_fin=body.dateFin,
            civilite=body.civilite,
        )
    except PdfRenderError:
        raise HTTPException(status_code=500, detail=RENDER_ERROR)

    logger.info("Work certificate generated for %s (current=%s)", employee.code, body.isCurrent)
    return pdf_response(pdf, f"attestation-travail-{employee.code}.pdf")


@router.post("/generate-internship-certificate")
def generate_internship_certificate(body: InternshipCertificateRequest, db: Session = Depends(get_db)):
    employee = db.get(Employee, body.employeeId)
    if not employee:
        raise HTTPException(status_code=404, detail="Stagiaire non trouvé")

    company = Company.first(db)
    try:
        pdf = render_internship_certificate(
            employee, company,
            date_debut=body.dateDebut,
            date_fin=body.dateFin,
            issuance_date=body.issuanceDate,
            ville=body.ville,
            departement=body.departement,
            civilite=body.civilite,
        )
    except PdfRenderError:
        raise HTTPException(status_code=500, detail=RENDER_ERROR)

    logger.info("Internship certificate generated for %s", employee.code)
    return pdf_response(pdf, f"attestation-stage-{employee.code}.pdf")
