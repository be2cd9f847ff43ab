"""Periodic task DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import datetime, time
from pydantic import BaseModel, Field
from gdp.domain.periodicity import Periodicity


class AssigneeRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    first_name: str
    last_name: str
    email: str


class PeriodicTaskRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    title: str
    description: str = ""
    send_date: datetime
    periodicite: Periodicity
    heure_execution: time | None = None
    est_active: bool
    users: list[AssigneeRead] = []


class PeriodicTaskList(BaseModel):
    items: list[PeriodicTaskRead]
    total: int


class PeriodicTaskCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""
    send_date: datetime
    periodicite: Periodicity = Periodicity.QUOTIDIEN
    heure_execution: time | None = None
    est_active: bool = True
    users: list[int] = []


class PeriodicTaskUpdate(BaseModel):
    """Partial update: only the fields present in the body change; ``users`` replaces the assignees."""

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    send_date: datetime | None = None
    periodicite: Periodicity | None = None
    heure_execution: time | None = None
    est_active: bool | None = None
    users: list[int] | None = None


class PeriodicTaskDeleted(BaseModel):
    id: int
    message: str = "Tâche périodique supprimée"
