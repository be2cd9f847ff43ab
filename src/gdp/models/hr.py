"""HR tables: leave requests (congés) and notifications."""
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CongeType(str, Enum):
    MALADIE = "Maladie"
    CONGE = "Congé"
    DECES = "Décès"
    MARIAGE = "Congé Mariage"
    AUTRES = "Autres"


class CongeStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Conge(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    matricule: str = Field(index=True)
    service: str
    responsable: str
    type: CongeType
    start_date: date = Field(index=True)
    end_date: date
    date_reprise: date
    telephone: str = ""
    adresse: str = ""
    interim1: Optional[str] = None
    interim2: Optional[str] = None
    first_name: str
    last_name: str
    status: CongeStatus = Field(default=CongeStatus.PENDING)
    created_at: datetime = Field(default_factory=_utcnow)


class Notification(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    message: str
    is_read: bool = False
    created_at: datetime = Field(default_factory=_utcnow, index=True)
