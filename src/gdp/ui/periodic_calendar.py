"""Month calendar of periodic tasks."""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from typing import Iterable

from gdp.api.schemas.periodic_tasks import PeriodicTaskRead
from gdp.domain.calendar import MONTH_LABELS, french_month
from gdp.domain.periodicity import is_rescheduled, occurrences_in_month

WEEKDAY_LABELS = ("Lun", "Mar", "Mer", "Jeu", "Ven", "Sam", "Dim")


@dataclass(frozen=True)
class CalendarEntry:
    task: PeriodicTaskRead
    rescheduled: bool = False

    @property
    def label(self) -> str:
        suffix = " (inactive)" if not self.task.est_active else ""
        return f"{self.task.title}{suffix}"


def month_entries(tasks: Iterable[PeriodicTaskRead], year: int, month: int) -> dict[int, list[CalendarEntry]]:
    """Day of month -> tasks due that day. Inactive tasks are kept and labelled."""
    days: dict[int, list[CalendarEntry]] = {}
    for task in tasks:
        start = task.send_date.date()
        moved = is_rescheduled(start, task.periodicite)
        for due in occurrences_in_month(start, task.periodicite, year, month):
            days.setdefault(due.day, []).append(CalendarEntry(task, rescheduled=moved))
    return days


def month_grid(year: int, month: int) -> list[list[int]]:
    """Weeks Monday-first; ``0`` pads days outside the month."""
    return calendar.Calendar(firstweekday=0).monthdayscalendar(year, month)


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_title(year: int, month: int) -> str:
    return f"{french_month(MONTH_LABELS[month - 1])} {year}"
