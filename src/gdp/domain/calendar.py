"""Month labels shared by the congés endpoints and the dashboard charts."""
from __future__ import annotations

import calendar as _cal
from datetime import date

MONTH_LABELS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

FRENCH_MONTHS: dict[str, str] = {
    "Jan": "Janvier", "Feb": "Février", "Mar": "Mars", "Apr": "Avril",
    "May": "Mai", "Jun": "Juin", "Jul": "Juillet", "Aug": "Août",
    "Sep": "Septembre", "Oct": "Octobre", "Nov": "Novembre", "Dec": "Décembre",
}


def month_number(label: str) -> int | None:
    """``"Mar"`` -> 3; unknown labels -> ``None``."""
    try:
        return MONTH_LABELS.index(label) + 1
    except ValueError:
        return None


def month_bounds(label: str, year: int) -> tuple[date, date] | None:
    """First and last day of the labelled month in ``year``."""
    number = month_number(label)
    if number is None:
        return None
    last_day = _cal.monthrange(year, number)[1]
    return date(year, number, 1), date(year, number, last_day)


def french_month(label: str) -> str:
    return FRENCH_MONTHS.get(label, label)
