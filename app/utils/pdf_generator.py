# app/utils/pdf_generator.py
import io
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

from reportlab.pdfgen import canvas
from reportlab.lib import colors
from reportlab.lib.utils import ImageReader

from app.config import UPLOAD_DIR
from app.salary.engine import PayslipFigures, compute_for_salary, format_amount, format_days
from app.utils import pdf_layout as L
from app.utils.formatting import format_date_fr

logger = logging.getLogger(__name__)

# share of the font size between the top of a line and its baseline (Helvetica)
ASCENT = 0.75


class PdfRenderError(RuntimeError):
    pass


def resolve_logo_path(logo_url: Optional[str], upload_dir: Path = None) -> Optional[Path]:
    """
    Map a public /uploads/<file> URL back to the stored file.
    Returns None for external URLs or when the file is not on disk.
    """
    if not logo_url or "/uploads/" not in logo_url:
        return None
    name = logo_url.split("/uploads/")[-1].split("?")[0]
    name = Path(name).name  # no directory parts
    if not name:
        return None
    path = Path(upload_dir or UPLOAD_DIR) / name
    return path if path.is_file() else None


class PageWriter:
    """reportlab canvas addressed with the top-down coordinates of pdf_layout."""

    def __init__(self, buffer, pagesize):
        self.canvas = canvas.Canvas(buffer, pagesize=pagesize)
        self.width, self.height = pagesize

    def text(self, slot: L.TextSlot, value: Any):
        value = "" if value is None else str(value)
        c = self.canvas
        c.setFont(slot.font, slot.size)
        baseline = self.height - slot.y - slot.size * ASCENT
        if slot.align == "right" and slot.width:
            c.drawRightString(slot.x + slot.width, baseline, value)
        elif slot.align == "center" and slot.width:
            c.drawCentredString(slot.x + slot.width / 2.0, baseline, value)
        else:
            c.drawString(slot.x, baseline, value)

    def rect(self, box: L.Box):
        self.canvas.rect(box.x, self.height - box.y - box.height, box.width, box.height, stroke=1, fill=0)

    def line(self, x1, y1, x2, y2, color=None, width=1):
        c = self.canvas
        c.saveState()
        c.setLineWidth(width)
        if color:
            c.setStrokeColor(colors.HexColor(color))
        c.line(x1, self.height - y1, x2, self.height - y2)
        c.restoreState()

    def image(self, path: Path, box: L.Box):
        reader = ImageReader(str(path))
        iw, ih = reader.getSize()
        height = box.height or box.width * float(ih) / float(iw)
        self.canvas.drawImage(reader, box.x, self.height - box.y - height,
                              width=box.width, height=height, mask="auto")

    def logo(self, logo_url: Optional[str], box: L.Box):
        """Draw the company logo if it is a stored upload; a bad file never breaks the document."""
        path = resolve_logo_path(logo_url)
        if path is None:
            if logo_url:
                logger.info("Logo %s not found in %s, skipped", logo_url, UPLOAD_DIR)
            return
        try:
            self.image(path, box)
        except Exception:
            logger.exception("Logo loading error: %s", path)

    def finish(self):
        self.canvas.showPage()
        self.canvas.save()


# ------------------------------------------------------------------
# Payslip
# ------------------------------------------------------------------
def payslip_values(employee, company, figures: PayslipFigures, today: date) -> Dict[str, str]:
    """Text of every fixed slot of the payslip, keyed like the pdf_layout tables."""
    return {
        "company_name": getattr(company, "nom", None) or "",
        "company_cnss": f"CNSS Employeur : {getattr(company, 'cnss_employeur', None) or ''}",
        "company_rib": f"R.I.B : {getattr(company, 'rib', None) or ''}",
        "company_address": f"Adresse : {getattr(company, 'adresse', None) or ''} {getattr(company, 'ville', None) or ''}",
        "title": "BULLETIN DE PAIE",
        "period": f"Mois : {figures.month_label}",

        "code": employee.code,
        "full_name": f"{employee.nom} {employee.prenom}".upper(),
        "cin": employee.cin,
        "service": employee.service or "",
        "hire_date": str(employee.date_embauche or ""),
        "poste": employee.poste or "",
        "base_salary": format_amount(figures.base_salary),
        "contract": employee.type_contrat,

        "tot_b1": "Tot.B1: 0.000",
        "leave_taken": "CG. pris mois : 0.000",
        "absence": f"Absence : {format_days(figures.absence_days)}",
        "theoretical_days": f"Nb.H/J Theo : {figures.total_working_days}",
        "trir": "T.R.IR:",
        "payment_mode": "Mode paiement : Espèce",
        "payment_rib": "Sur RIB :",
        "signature": "Signature :",
        "issue_date": format_date_fr(today),

        "net_label": "Net à payer",
        "net_total": format_amount(figures.net_total),
    }


def payslip_rows(figures: PayslipFigures, date_avance: Optional[date], today: date) -> List[Dict[str, Any]]:
    """
    Lines of the pay table, top to bottom.

    SAL_B is always there, PRIME only with a bonus, AV_SAL only with an advance.
    The closing BRUT line carries the net total (bonus added, advance deducted):
    it is labelled "SALAIRE BRUT" on the printed slip although the figure is net.
    """
    rows = [{
        "code": "SAL_B",
        "label": "SALAIRE DE BASE",
        "rate": format_amount(figures.daily_rate),
        "count": format_days(figures.worked_days),
        "gain": format_amount(figures.base_pay),
        "deduction": "",
        "bold": False,
    }]

    if figures.bonus > 0:
        rows.append({
            "code": "PRIME",
            "label": "PRIMES ET INDEMNITÉS",
            "rate": "", "count": "",
            "gain": format_amount(figures.bonus),
            "deduction": "",
            "bold": False,
        })

    if figures.advance > 0:
        rows.append({
            "code": "AV_SAL",
            "label": f"AVANCE SUR SALAIRE {format_date_fr(date_avance or today)}",
            "rate": "", "count": "", "gain": "",
            "deduction": format_amount(figures.advance),
            "bold": False,
        })

    rows.append({
        "code": "BRUT",
        "label": "SALAIRE BRUT",
        "rate": "", "count": "",
        "gain": format_amount(figures.net_total),
        "deduction": "",
        "bold": True,
    })
    return rows


def _cell_slot(col_index: int, top: float, font: str, align: str) -> L.TextSlot:
    left, right = L.PAYSLIP_COLUMNS[col_index], L.PAYSLIP_COLUMNS[col_index + 1]
    return L.TextSlot(left + 2, top, font, L.PAYSLIP_TABLE_FONT_SIZE, right - left - 4, align)


def _draw_payslip_table(w: PageWriter, rows: List[Dict[str, Any]]):
    table = L.PAYSLIP_TABLE
    bottom = table.y + table.height
    w.rect(table)
    w.line(table.x, table.y + L.PAYSLIP_TABLE_HEADER_HEIGHT,
           table.x + table.width, table.y + L.PAYSLIP_TABLE_HEADER_HEIGHT)
    for x in L.PAYSLIP_COLUMNS:
        w.line(x, table.y, x, bottom)

    cols = L.PAYSLIP_COLUMNS
    for i, (header, _key, _align) in enumerate(L.PAYSLIP_COLUMN_CELLS):
        slot = L.TextSlot(cols[i], table.y + 4, L.BOLD, L.PAYSLIP_TABLE_FONT_SIZE, cols[i + 1] - cols[i], "center")
        w.text(slot, header)

    row_top = table.y + L.PAYSLIP_TABLE_FIRST_ROW
    for row in rows:
        font = L.BOLD if row["bold"] else L.REGULAR
        for i, (_header, key, align) in enumerate(L.PAYSLIP_COLUMN_CELLS):
            if row[key]:
                w.text(_cell_slot(i, row_top, font, align), row[key])
        row_top += L.PAYSLIP_ROW_HEIGHT


def render_payslip(salary, company, today: Optional[date] = None) -> bytes:
    """Build the A5 payslip of a Salary row (with its employee loaded) and return the PDF bytes."""
    today = today or date.today()
    employee = salary.employee
    figures = compute_for_salary(salary)
    values = payslip_values(employee, company, figures, today)
    rows = payslip_rows(figures, salary.date_avance, today)

    buffer = io.BytesIO()
    try:
        w = PageWriter(buffer, L.PAYSLIP_PAGE)
        w.canvas.setTitle(f"Bulletin de paie {employee.code} {figures.month_label}")

        w.logo(getattr(company, "logo_url", None), L.PAYSLIP_LOGO)
        for key, slot in L.PAYSLIP_HEADER.items():
            w.text(slot, values[key])

        w.rect(L.PAYSLIP_EMPLOYEE_BOX)
        for label, label_slot, key, value_slot in L.PAYSLIP_EMPLOYEE_FIELDS:
            w.text(label_slot, label)
            w.text(value_slot, values[key])

        _draw_payslip_table(w, rows)

        for box in L.PAYSLIP_FOOTER_BOXES:
            w.rect(box)
        for key, slot in L.PAYSLIP_FOOTER.items():
            w.text(slot, values[key])

        w.rect(L.PAYSLIP_NET_LABEL_BOX)
        w.rect(L.PAYSLIP_NET_VALUE_BOX)
        for key, slot in L.PAYSLIP_NET.items():
            w.text(slot, values[key])

        w.finish()
    except Exception as e:
        logger.exception("Error while building payslip for salary %s", getattr(salary, "id", None))
        raise PdfRenderError(f"ReportLab error while generating PDF: {e}") from e

    return buffer.getvalue()
