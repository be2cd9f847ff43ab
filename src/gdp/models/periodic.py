"""Periodic tasks and their assignees."""
from datetime import datetime, time
from typing import List, Optional

from sqlmodel import Field, Relationship, SQLModel

from gdp.domain.periodicity import Periodicity
from gdp.models.core import User


class UserPeriodicTaskLink(SQLModel, table=True):
    user_id: Optional[int] = Field(default=None, foreign_key="user.id", primary_key=True)
    periodic_task_id: Optional[int] = Field(default=None, foreign_key="periodictask.id", primary_key=True)


class PeriodicTask(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: str = ""
    send_date: datetime = Field(index=True)
    periodicite: Periodicity = Field(default=Periodicity.QUOTIDIEN)
    heure_execution: Optional[time] = None
    est_active: bool = True

    users: List[User] = Relationship(link_model=UserPeriodicTaskLink)
