"""Congé DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import date, datetime
from enum import Enum
from pydantic import BaseModel, Field, model_validator


class CongeStatusDTO(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class CongeTypeDTO(str, Enum):
    MALADIE = "Maladie"
    CONGE = "Congé"
    DECES = "Décès"
    MARIAGE = "Congé Mariage"
    AUTRES = "Autres"


class CongeRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    user_id: int
    matricule: str
    service: str
    responsable: str
    type: CongeTypeDTO
    start_date: date
    end_date: date
    date_reprise: date
    first_name: str
    last_name: str
    interim1: str | None = None
    interim2: str | None = None
    status: CongeStatusDTO
    created_at: datetime | None = None


class CongeList(BaseModel):
    items: list[CongeRead]
    total: int


class CongeCreate(BaseModel):
    user_id: int
    matricule: str = Field(min_length=1)
    service: str
    responsable: str
    type: CongeTypeDTO
    start_date: date
    end_date: date
    date_reprise: date
    telephone: str = ""
    adresse: str = ""
    interim1: str | None = None
    interim2: str | None = None
    first_name: str
    last_name: str

    @model_validator(mode="after")
    def _dates_in_order(self) -> "CongeCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class CongeStatusUpdate(BaseModel):
    status: CongeStatusDTO
