from calendar import monthrange
from datetime import date
from decimal import Decimal

import pytest

from app.salary.engine import (
    compute_payslip, count_working_days, format_amount, format_days, first_last_day,
)


def test_april_2024_has_26_working_days():
    assert count_working_days(2024, 4) == 26


@pytest.mark.parametrize("year", [2023, 2024, 2025])
@pytest.mark.parametrize("month", range(1, 13))
def test_working_days_are_the_non_sundays(year, month):
    expected = sum(
        1 for d in range(1, monthrange(year, month)[1] + 1)
        if date(year, month, d).weekday() != 6
    )
    assert count_working_days(year, month) == expected


def test_february_leap_year():
    assert count_working_days(2024, 2) == 25
    assert count_working_days(2023, 2) == 24


def test_first_last_day():
    assert first_last_day(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))


def test_reference_payslip_figures():
    f = compute_payslip(2024, 4, Decimal("900.000"), bonus=50, absence_days=2, advance=0)
    assert f.total_working_days == 26
    assert f.worked_days == 24
    assert format_amount(f.daily_rate) == "34.615"
    assert format_amount(f.base_pay) == "830.769"
    assert format_amount(f.net_total) == "880.769"
    assert f.month_label == "Avril 2024"


def test_net_formula_with_advance():
    f = compute_payslip(2024, 4, 1300, bonus=0, absence_days=0, advance=200)
    assert f.base_pay == Decimal(1300)
    assert format_amount(f.net_total) == "1100.000"


def test_missing_optional_amounts_count_as_zero():
    f = compute_payslip(2024, 4, 780, bonus=None, absence_days=None, advance=None)
    assert f.bonus == 0 and f.advance == 0 and f.absence_days == 0
    assert format_amount(f.net_total) == "780.000"


def test_absence_beyond_working_days_is_not_clamped():
    f = compute_payslip(2024, 4, 260, absence_days=30)
    assert f.worked_days == -4
    assert format_amount(f.base_pay) == "-40.000"


def test_format_amount_rounds_half_up():
    assert format_amount(Decimal("1.0005")) == "1.001"
    assert format_amount(None) == "0.000"
    assert format_amount("12.5") == "12.500"


def test_format_days():
    assert format_days(Decimal("24.00")) == "24"
    assert format_days(Decimal("23.50")) == "23.5"
