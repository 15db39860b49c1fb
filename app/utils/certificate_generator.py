# app/utils/certificate_generator.py
# Attestation de travail / attestation de stage (A4)
import io
import logging
from datetime import date
from typing import List, NamedTuple, Optional, Tuple
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_JUSTIFY, TA_LEFT
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph

from app.utils import pdf_layout as L
from app.utils.formatting import format_date_fr, format_date_long_fr
from app.utils.pdf_generator import PageWriter, PdfRenderError

logger = logging.getLogger(__name__)

CLOSING_TEXT = "Nous délivrons la présente attestation pour servir et valoir ce que de droit."


class Run(NamedTuple):
    text: str
    bold: bool = False
    size: Optional[int] = None


def civility_abbrev(civilite: Optional[str]) -> str:
    return "Mr." if civilite == "Monsieur" else "Mme"


def issuance_text(issuance_date: Optional[date], today: date) -> str:
    """The chosen issuance date as dd/mm/yyyy; without one, today written out ('19 octobre 2026')."""
    if issuance_date:
        return format_date_fr(issuance_date)
    return format_date_long_fr(today)


def _identity_runs(employee, company, civilite) -> List[Run]:
    return [
        Run("Nous, "),
        Run(getattr(company, "nom", None) or "", True),
        Run(", attestons par la présente que "),
        Run(f"{civility_abbrev(civilite)} {employee.nom.upper()} {employee.prenom}", True, L.CERTIFICATE_NAME_FONT_SIZE),
        Run(", de nationalité "),
        Run(employee.nationalite or "tunisienne", True),
        Run(", titulaire du "),
        Run(employee.id_type or "CIN", True),
        Run(" n° "),
        Run(employee.cin, True),
        Run(", délivré le "),
        Run(format_date_fr(employee.id_date) if employee.id_date else "(date)", True),
        Run(" à "),
        Run(employee.id_place or "(lieu)", True),
    ]


def _department_runs(departement: Optional[str], lead: str = " dans le département ") -> List[Run]:
    if not departement:
        return []
    return [Run(lead), Run(departement, True)]


def work_certificate_runs(employee, company, *, is_current: bool, end_text: str,
                          departement: Optional[str] = None, civilite: Optional[str] = None) -> List[Run]:
    """
    Body of the work certificate.

    Current staff: "occupe actuellement le poste de ... depuis le <hire date>".
    Former staff: "a effectué une mission ... du <hire date> au <end_text>".
    """
    runs = _identity_runs(employee, company, civilite)
    runs.append(Run(", "))
    hire_date = format_date_fr(employee.date_embauche)

    if is_current:
        runs.append(Run("occupe actuellement le poste de "))
        runs.append(Run(employee.poste, True))
        runs.extend(_department_runs(departement))
        runs.append(Run(" au sein de notre entreprise depuis le "))
        runs.append(Run(hire_date, True))
    else:
        runs.append(Run("a effectué une mission au sein de notre entreprise en tant que "))
        runs.append(Run(employee.poste, True))
        runs.extend(_department_runs(departement))
        runs.append(Run(" du "))
        runs.append(Run(hire_date, True))
        runs.append(Run(" au "))
        runs.append(Run(end_text, True))
    return runs


def internship_certificate_runs(employee, company, *, start_text: str, end_text: str,
                                departement: Optional[str] = None, civilite: Optional[str] = None) -> List[Run]:
    runs = _identity_runs(employee, company, civilite)
    runs.append(Run(", a effectué un stage au sein de notre entreprise du "))
    runs.append(Run(start_text, True))
    runs.append(Run(" au "))
    runs.append(Run(end_text, True))
    if departement:
        runs.extend(_department_runs(departement, lead=", dans le département "))
    else:
        runs.append(Run("."))
    return runs


def runs_to_text(runs: List[Run]) -> str:
    return "".join(r.text for r in runs)


def runs_to_markup(runs: List[Run]) -> str:
    """reportlab Paragraph mini-markup for the runs."""
    parts = []
    for r in runs:
        chunk = escape(r.text)
        if r.size:
            chunk = f'<font size="{r.size}">{chunk}</font>'
        if r.bold:
            chunk = f"<b>{chunk}</b>"
        parts.append(chunk)
    return "".join(parts)


BODY_STYLE = ParagraphStyle(
    "certificate-body",
    fontName=L.REGULAR,
    fontSize=L.CERTIFICATE_BODY_FONT_SIZE,
    leading=L.CERTIFICATE_BODY_LEADING,
    alignment=TA_LEFT,
)
CLOSING_STYLE = ParagraphStyle("certificate-closing", parent=BODY_STYLE, alignment=TA_JUSTIFY)


def _paragraph(w: PageWriter, markup: str, style: ParagraphStyle, box: L.Box):
    p = Paragraph(markup, style)
    _, height = p.wrap(box.width, w.height)
    p.drawOn(w.canvas, box.x, w.height - box.y - height)


def render_certificate(title: str, runs: List[Run], company, *, ville: Optional[str], issued: str) -> bytes:
    """Shared A4 layout: header, title, body paragraph, closing, place/date, signature, footer."""
    logger.debug("%s body: %s", title, runs_to_text(runs))
    buffer = io.BytesIO()
    try:
        w = PageWriter(buffer, L.CERTIFICATE_PAGE)
        w.canvas.setTitle(title.title())

        # header
        w.logo(getattr(company, "logo_url", None), L.CERTIFICATE_LOGO)
        header = {
            "matricule_fiscal": f"MF : {getattr(company, 'matricule_fiscal', None) or ''}",
            "banque": f"BANQUE : {getattr(company, 'banque', None) or ''}",
            "ccb": f"CCB : {getattr(company, 'ccb', None) or ''}",
        }
        for key, slot in L.CERTIFICATE_HEADER.items():
            w.text(slot, header[key])
        w.line(0, L.CERTIFICATE_HEADER_RULE_Y, w.width, L.CERTIFICATE_HEADER_RULE_Y, color=L.BRAND_BLUE)

        w.text(L.CERTIFICATE_TITLE, title)

        _paragraph(w, runs_to_markup(runs), BODY_STYLE, L.CERTIFICATE_BODY)
        _paragraph(w, escape(CLOSING_TEXT), CLOSING_STYLE, L.CERTIFICATE_CLOSING)

        city = ville or getattr(company, "ville", None) or ""
        w.text(L.CERTIFICATE_PLACE_DATE, f"Fait à {city}, le {issued}")
        w.text(L.CERTIFICATE_SIGNATURE, "Cachet & Signature")

        # footer
        w.line(0, L.CERTIFICATE_FOOTER_RULE_Y, w.width, L.CERTIFICATE_FOOTER_RULE_Y, color=L.BRAND_BLUE)
        footer = L.CERTIFICATE_FOOTER
        w.text(footer["capital"], f"S.A.R.L Au capital de {getattr(company, 'capital', None) or ''}")
        w.text(footer["head_office"],
               f"Siège Social : {getattr(company, 'adresse', None) or ''}, {getattr(company, 'ville', None) or ''}")
        telephone = getattr(company, "telephone", None)
        if telephone:
            w.text(footer["telephone"], f"( Tél ) : {telephone}")

        w.finish()
    except Exception as e:
        logger.exception("Error while building %s", title)
        raise PdfRenderError(f"ReportLab error while generating PDF: {e}") from e

    return buffer.getvalue()


def work_certificate_body(employee, company, *, is_current: bool, issuance_date: Optional[date] = None,
                          departement: Optional[str] = None, date_fin: Optional[date] = None,
                          civilite: Optional[str] = None, today: Optional[date] = None) -> Tuple[List[Run], str]:
    """Body runs and issuance text of a work certificate."""
    issued = issuance_text(issuance_date, today or date.today())
    # a past mission without an end date ends on the issuance date
    end_text = format_date_fr(date_fin) if date_fin else issued
    runs = work_certificate_runs(employee, company, is_current=is_current, end_text=end_text,
                                 departement=departement, civilite=civilite)
    return runs, issued


def internship_certificate_body(employee, company, *, date_debut: Optional[date] = None,
                                date_fin: Optional[date] = None, issuance_date: Optional[date] = None,
                                departement: Optional[str] = None, civilite: Optional[str] = None,
                                today: Optional[date] = None) -> Tuple[List[Run], str]:
    """Body runs and issuance text of an internship certificate: from the hire date to today by default."""
    today = today or date.today()
    issued = issuance_text(issuance_date, today)
    start_text = format_date_fr(date_debut or employee.date_embauche)
    end_text = format_date_fr(date_fin or today)
    runs = internship_certificate_runs(employee, company, start_text=start_text, end_text=end_text,
                                       departement=departement, civilite=civilite)
    return runs, issued


def render_work_certificate(employee, company, *, is_current: bool, issuance_date: Optional[date] = None,
                            ville: Optional[str] = None, departement: Optional[str] = None,
                            date_fin: Optional[date] = None, civilite: Optional[str] = None,
                            today: Optional[date] = None) -> bytes:
    runs, issued = work_certificate_body(employee, company, is_current=is_current, issuance_date=issuance_date,
                                         departement=departement, date_fin=date_fin, civilite=civilite,
                                         today=today)
    return render_certificate("ATTESTATION DE TRAVAIL", runs, company, ville=ville, issued=issued)


def render_internship_certificate(employee, company, *, date_debut: Optional[date] = None,
                                  date_fin: Optional[date] = None, issuance_date: Optional[date] = None,
                                  ville: Optional[str] = None, departement: Optional[str] = None,
                                  civilite: Optional[str] = None, today: Optional[date] = None) -> bytes:
    runs, issued = internship_certificate_body(employee, company, date_debut=date_debut, date_fin=date_fin,
                                               issuance_date=issuance_date, departement=departement,
                                               civilite=civilite, today=today)
    return render_certificate("ATTESTATION DE STAGE", runs, company, ville=ville, issued=issued)
