"""Percentage helpers for dashboard productivity figures."""
from __future__ import annotations

import math
from typing import Mapping

# Stored project statuses, in donut order
COMPLETED = "Fini"
IN_PROGRESS = "En cours"
TO_DO = "A faire"


def percent(part: int, whole: int) -> int:
    """Integer percentage rounded half up; 0 when ``whole`` is 0."""
    if whole <= 0:
        return 0
    return math.floor(part * 100 / whole + 0.5)


def ratio(part: int, whole: int) -> float:
    if whole <= 0:
        return 0.0
    return part * 100 / whole


def status_rates(by_status: Mapping[str, int]) -> tuple[int, int, int]:
    """(completion, in-progress, to-do) rates over the three known statuses."""
    done = by_status.get(COMPLETED, 0)
    doing = by_status.get(IN_PROGRESS, 0)
    todo = by_status.get(TO_DO, 0)
    total = done + doing + todo
    return percent(done, total), percent(doing, total), percent(todo, total)
