"""Project & task DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import date, datetime
from enum import Enum
from pydantic import BaseModel


class ProjectStatusDTO(str, Enum):
    TO_DO = "A faire"
    IN_PROGRESS = "En cours"
    COMPLETED = "Fini"


class ProjectPriorityDTO(str, Enum):
    LOW = "Faible"
    MEDIUM = "Moyenne"
    HIGH = "Haute"


class TaskStatusDTO(str, Enum):
    TO_DO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


class TaskPriorityDTO(str, Enum):
    LOW = "low"
    HIGH = "high"


class ProjectEtatDTO(str, Enum):
    EXISTING_PROJECT = "Projet existant"
    FROM_SCRATCH = "Projet à partir de zéro"


class ProjectRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    description: str = ""
    status: ProjectStatusDTO
    priorite: ProjectPriorityDTO
    etat: ProjectEtatDTO
    linkprojet: str | None = None
    estimated_end_date: date | None = None


class ProjectList(BaseModel):
    items: list[ProjectRead]
    total: int


class TaskRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    title: str
    description: str = ""
    status: TaskStatusDTO
    priority: TaskPriorityDTO
    type: str | None = None
    creation_date: datetime | None = None
    project_id: int | None = None
    user_id: int | None = None


class TaskList(BaseModel):
    project_id: int
    items: list[TaskRead]
    total: int
