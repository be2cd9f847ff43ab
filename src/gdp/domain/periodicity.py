"""Recurrence rules for periodic tasks and where they land on a month calendar.

Occurrences never fall on a weekend: a Saturday or Sunday occurrence moves
to the following Monday, which may be in the next month.
"""
from __future__ import annotations

import calendar
from datetime import date, timedelta
from enum import Enum


class Periodicity(str, Enum):
    QUOTIDIEN = "QUOTIDIEN"
    MENSUEL = "MENSUEL"
    ANNUEL = "ANNUEL"


def next_weekday(day: date) -> date:
    """``day`` itself on Monday-Friday, otherwise the following Monday."""
    if day.weekday() >= 5:
        return day + timedelta(days=7 - day.weekday())
    return day


def _on_day(year: int, month: int, day: int) -> date:
    # the 31st of a 30-day month is its last day
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


def _previous_month(year: int, month: int) -> tuple[int, int]:
    return (year - 1, 12) if month == 1 else (year, month - 1)


def _anchor(start: date, periodicity: Periodicity, year: int, month: int) -> date | None:
    """Unshifted occurrence for the (year, month) slot, if the rule has one there."""
    if periodicity is Periodicity.MENSUEL:
        if year != start.year or month < start.month:
            return None
        return _on_day(year, month, start.day)
    if periodicity is Periodicity.ANNUEL:
        if year < start.year or month != start.month:
            return None
        return _on_day(year, month, start.day)
    return None


def occurrences_in_month(start: date, periodicity: Periodicity | str, year: int, month: int) -> list[date]:
    """Sorted dates in ``year``/``month`` on which a task starting on ``start`` is due.

    * ``QUOTIDIEN``: every weekday from ``start`` to the end of ``start``'s year.
    * ``MENSUEL``: ``start``'s day of month, every month of ``start``'s year
      from ``start``'s month on.
    * ``ANNUEL``: ``start``'s day and month, every year from ``start``'s year.
    """
    periodicity = Periodicity(periodicity)
    last = calendar.monthrange(year, month)[1]

    if periodicity is Periodicity.QUOTIDIEN:
        if year != start.year:
            return []
        first = max(date(year, month, 1), start)
        days = (date(year, month, d) for d in range(first.day, last + 1)) if first.month == month else ()
        return [d for d in days if d.weekday() < 5]

    found: set[date] = set()
    # a weekend anchor late in the previous month can shift into this one
    for slot in (_previous_month(year, month), (year, month)):
        anchor = _anchor(start, periodicity, *slot)
        if anchor is None:
            continue
        due = next_weekday(anchor)
        if (due.year, due.month) == (year, month):
            found.add(due)
    return sorted(found)


def is_rescheduled(start: date, periodicity: Periodicity | str) -> bool:
    """Monthly and yearly tasks anchored on a weekend day are moved to Monday."""
    return Periodicity(periodicity) is not Periodicity.QUOTIDIEN and start.weekday() >= 5
