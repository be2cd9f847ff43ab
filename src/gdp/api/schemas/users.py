"""User DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import date
from enum import Enum
from pydantic import BaseModel
from gdp.domain.roles import Role
from gdp.api.schemas.projects import ProjectRead


class UserStatusDTO(str, Enum):
    ACTIF = "ACTIF"
    EN_ATTENTE = "EN_ATTENTE"
    SUSPENDU = "SUSPENDU"


class UserRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    username: str
    first_name: str
    last_name: str
    email: str
    matricule: str | None = None
    photo: str | None = None
    role: Role
    status: UserStatusDTO
    hire_date: date | None = None
    end_date: date | None = None
    projects: list[ProjectRead] = []
