# app/utils/pdf_layout.py
"""
Fixed layouts of the generated documents.

Coordinates are in points measured from the TOP-left corner of the page (as read on
paper); the y of a text slot is the top of its line. pdf_generator.PageWriter flips
them into reportlab's bottom-up space. Every position used by the renderers lives here.
"""
from collections import namedtuple

from reportlab.lib.pagesizes import A4, A5

REGULAR = "Helvetica"
BOLD = "Helvetica-Bold"

BRAND_BLUE = "#1ab0e2"

# x, y: top-left of the text box; width: box width for center/right alignment
TextSlot = namedtuple("TextSlot", "x y font size width align", defaults=(None, "left"))

Box = namedtuple("Box", "x y width height")


# --------------------------------------------------------------------------
# Payslip (bulletin de paie), A5 portrait
# --------------------------------------------------------------------------
PAYSLIP_PAGE = A5

PAYSLIP_LOGO = Box(25, 20, 55, None)  # height follows the image ratio

# company identity + title, keyed by the value name produced in pdf_generator.payslip_values()
PAYSLIP_HEADER = {
    "company_name": TextSlot(85, 20, BOLD, 11),
    "company_cnss": TextSlot(85, 34, REGULAR, 7),
    "company_rib": TextSlot(85, 42, REGULAR, 7),
    "company_address": TextSlot(85, 50, REGULAR, 7),
    "title": TextSlot(250, 20, BOLD, 11, 150, "right"),
    "period": TextSlot(250, 40, BOLD, 9, 150, "right"),
}

PAYSLIP_EMPLOYEE_BOX = Box(20, 70, 380, 60)

# (label, label slot, value name, value slot); font size 8
PAYSLIP_EMPLOYEE_FIELDS = [
    ("Matricule :", TextSlot(30, 78, BOLD, 8), "code", TextSlot(80, 78, REGULAR, 8)),
    ("Nom & prénoms :", TextSlot(30, 90, BOLD, 8), "full_name", TextSlot(105, 90, REGULAR, 8)),
    ("N° CIN/Passeport :", TextSlot(30, 102, BOLD, 8), "cin", TextSlot(105, 102, REGULAR, 8)),
    ("Service :", TextSlot(210, 78, BOLD, 8), "service", TextSlot(250, 78, REGULAR, 8)),
    ("Dat.Emb. :", TextSlot(210, 90, BOLD, 8), "hire_date", TextSlot(255, 90, REGULAR, 8)),
    ("Emploi :", TextSlot(210, 102, BOLD, 8), "poste", TextSlot(245, 102, REGULAR, 8)),
    ("Sal.B :", TextSlot(320, 90, BOLD, 8), "base_salary", TextSlot(350, 90, REGULAR, 8)),
    ("Contrat :", TextSlot(320, 102, BOLD, 8), "contract", TextSlot(360, 102, REGULAR, 8)),
]

PAYSLIP_TABLE = Box(20, 135, 380, 350)
PAYSLIP_TABLE_HEADER_HEIGHT = 15
PAYSLIP_TABLE_FIRST_ROW = 20  # offset of the first row below the table top
PAYSLIP_ROW_HEIGHT = 12
PAYSLIP_TABLE_FONT_SIZE = 8

# column boundaries; the vertical rules are drawn on each of them
PAYSLIP_COLUMNS = [20, 60, 190, 235, 275, 335, 400]

# (header label, row key, alignment inside the column)
PAYSLIP_COLUMN_CELLS = [
    ("CODE", "code", "left"),
    ("LIBELLÉ", "label", "left"),
    ("MONT.", "rate", "right"),
    ("NBR", "count", "center"),
    ("SAL/PRIME", "gain", "right"),
    ("RETENUE", "deduction", "right"),
]

PAYSLIP_FOOTER_TOP = PAYSLIP_TABLE.y + PAYSLIP_TABLE.height + 8
PAYSLIP_FOOTER_BOXES = [
    Box(20, PAYSLIP_FOOTER_TOP, 70, 45),   # Tot.B1
    Box(90, PAYSLIP_FOOTER_TOP, 70, 45),   # T.R.IR
    Box(160, PAYSLIP_FOOTER_TOP, 150, 45),  # payment
]
PAYSLIP_FOOTER = {
    "tot_b1": TextSlot(25, PAYSLIP_FOOTER_TOP + 4, REGULAR, 6),
    "leave_taken": TextSlot(25, PAYSLIP_FOOTER_TOP + 14, REGULAR, 6),
    "absence": TextSlot(25, PAYSLIP_FOOTER_TOP + 24, REGULAR, 6),
    "theoretical_days": TextSlot(25, PAYSLIP_FOOTER_TOP + 34, REGULAR, 6),
    "trir": TextSlot(95, PAYSLIP_FOOTER_TOP + 4, REGULAR, 6),
    "payment_mode": TextSlot(165, PAYSLIP_FOOTER_TOP + 4, REGULAR, 6),
    "payment_rib": TextSlot(165, PAYSLIP_FOOTER_TOP + 14, REGULAR, 6),
    "signature": TextSlot(165, PAYSLIP_FOOTER_TOP + 32, REGULAR, 6),
    "issue_date": TextSlot(335, PAYSLIP_FOOTER_TOP + 50, BOLD, 7, 65, "right"),
}

PAYSLIP_NET_LABEL_BOX = Box(320, PAYSLIP_FOOTER_TOP, 80, 20)
PAYSLIP_NET_VALUE_BOX = Box(320, PAYSLIP_FOOTER_TOP + 20, 80, 25)
PAYSLIP_NET = {
    "net_label": TextSlot(320, PAYSLIP_FOOTER_TOP + 4, BOLD, 8, 80, "center"),
    "net_total": TextSlot(320, PAYSLIP_FOOTER_TOP + 28, BOLD, 10, 80, "center"),
}


# --------------------------------------------------------------------------
# Certificates (attestation de travail / de stage), A4 portrait
# --------------------------------------------------------------------------
CERTIFICATE_PAGE = A4

CERTIFICATE_LOGO = Box(50, 50, 80, None)

CERTIFICATE_HEADER = {
    "matricule_fiscal": TextSlot(420, 50, BOLD, 9, 130),
    "banque": TextSlot(420, 68, BOLD, 9, 130),
    "ccb": TextSlot(420, 86, BOLD, 9, 130),
}
CERTIFICATE_HEADER_RULE_Y = 130

CERTIFICATE_TITLE = TextSlot(50, 180, BOLD, 24, 495, "center")

# body paragraph (rich text, wraps)
CERTIFICATE_BODY = Box(50, 300, 495, None)
CERTIFICATE_BODY_FONT_SIZE = 13
CERTIFICATE_NAME_FONT_SIZE = 14
CERTIFICATE_BODY_LEADING = 20

CERTIFICATE_CLOSING = Box(50, 420, 500, None)

CERTIFICATE_PLACE_DATE = TextSlot(0, 540, REGULAR, 12, 530, "right")
CERTIFICATE_SIGNATURE = TextSlot(0, 620, BOLD, 12, 530, "right")

CERTIFICATE_FOOTER_RULE_Y = 740
CERTIFICATE_FOOTER = {
    "capital": TextSlot(50, 750, BOLD, 9, 500, "center"),
    "head_office": TextSlot(50, 762, REGULAR, 8, 500, "center"),
    "telephone": TextSlot(50, 774, REGULAR, 8, 500, "center"),
}
