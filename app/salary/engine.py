# app/salary/engine.py
from dataclasses import dataclass
from datetime import date, timedelta
from calendar import monthrange
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Tuple

MONTHS_FR = [
    "", "Janvier", "Février", "Mars", "Avril", "Mai", "Juin",
    "Juillet", "Août", "Septembre", "Octobre", "Novembre", "Décembre",
]

SUNDAY = 6  # date.weekday()
MILLIMES = Decimal("0.001")


def _decimal(v) -> Decimal:
    if v is None or v == "":
        return Decimal("0")
    if isinstance(v, Decimal):
        return v
    try:
        return Decimal(str(v))
    except (InvalidOperation, ValueError):
        return Decimal("0")


def first_last_day(year: int, month: int) -> Tuple[date, date]:
    first = date(year, month, 1)
    last = date(year, month, monthrange(year, month)[1])
    return first, last


def count_working_days(year: int, month: int) -> int:
    """Days of the month that are not a Sunday. Public holidays are not considered."""
    first, last = first_last_day(year, month)
    days = 0
    cur = first
    while cur <= last:
        if cur.weekday() != SUNDAY:
            days += 1
        cur += timedelta(days=1)
    return days


def format_amount(value) -> str:
    """Money as printed on documents: 3 decimals, half-up (TND millimes)."""
    return str(_decimal(value).quantize(MILLIMES, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class PayslipFigures:
    year: int
    month: int
    base_salary: Decimal
    bonus: Decimal
    advance: Decimal
    absence_days: Decimal
    total_working_days: int
    worked_days: Decimal
    daily_rate: Decimal
    base_pay: Decimal
    net_total: Decimal

    @property
    def month_label(self) -> str:
        return f"{MONTHS_FR[self.month]} {self.year}"


def compute_payslip(year: int, month: int, base_salary, bonus=0, absence_days=0, advance=0) -> PayslipFigures:
    """
    Prorate the monthly base salary over the month's working days.

    net = base / working_days * (working_days - absence) + bonus - advance

    Amounts stay at full precision; rounding only happens in format_amount().
    worked days are not clamped, so an absence count above the working days
    yields a negative base pay.
    """
    total_working_days = count_working_days(year, month)
    absence = _decimal(absence_days)
    worked_days = Decimal(total_working_days) - absence

    base = _decimal(base_salary)
    daily_rate = base / Decimal(total_working_days)
    base_pay = daily_rate * worked_days

    prime = _decimal(bonus)
    avance = _decimal(advance)
    net_total = base_pay + prime - avance

    return PayslipFigures(
        year=year,
        month=month,
        base_salary=base,
        bonus=prime,
        advance=avance,
        absence_days=absence,
        total_working_days=total_working_days,
        worked_days=worked_days,
        daily_rate=daily_rate,
        base_pay=base_pay,
        net_total=net_total,
    )


def compute_for_salary(salary) -> PayslipFigures:
    """Figures for a Salary row."""
    return compute_payslip(
        salary.year,
        salary.month,
        salary.salaire,
        bonus=salary.prime,
        absence_days=salary.absence,
        advance=salary.avance,
    )


def format_days(value) -> str:
    """Day counts without a trailing '.00' (24, not 24.00; 23.5 stays 23.5)."""
    d = _decimal(value)
    if d == d.to_integral_value():
        return str(int(d))
    return format(d.normalize(), "f")
