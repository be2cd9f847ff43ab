"""Core ORM tables: users, projects, tasks."""
from datetime import date, datetime, timezone
from enum import Enum
from typing import List, Optional

from sqlmodel import Field, Relationship, SQLModel

from gdp.domain.roles import Role


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserStatus(str, Enum):
    ACTIF = "ACTIF"
    EN_ATTENTE = "EN_ATTENTE"
    SUSPENDU = "SUSPENDU"


class ProjectStatus(str, Enum):
    TO_DO = "A faire"
    IN_PROGRESS = "En cours"
    COMPLETED = "Fini"


class ProjectPriority(str, Enum):
    LOW = "Faible"
    MEDIUM = "Moyenne"
    HIGH = "Haute"


class ProjectEtat(str, Enum):
    EXISTING_PROJECT = "Projet existant"
    FROM_SCRATCH = "Projet à partir de zéro"


class TaskStatus(str, Enum):
    TO_DO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"


class TaskPriority(str, Enum):
    LOW = "low"
    HIGH = "high"


class UserProjectLink(SQLModel, table=True):
    user_id: Optional[int] = Field(default=None, foreign_key="user.id", primary_key=True)
    project_id: Optional[int] = Field(default=None, foreign_key="project.id", primary_key=True)


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True, unique=True)
    first_name: str
    last_name: str
    email: str = Field(unique=True)
    matricule: Optional[str] = Field(default=None, index=True, unique=True)
    photo: Optional[str] = None
    role: Role
    status: UserStatus = Field(default=UserStatus.EN_ATTENTE)
    hire_date: Optional[date] = None
    end_date: Optional[date] = None

    projects: List["Project"] = Relationship(back_populates="users", link_model=UserProjectLink)
    taches: List["Tache"] = Relationship(back_populates="user")


class Project(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str = ""
    status: ProjectStatus = Field(default=ProjectStatus.IN_PROGRESS, index=True)
    priorite: ProjectPriority = Field(default=ProjectPriority.MEDIUM)
    etat: ProjectEtat = Field(default=ProjectEtat.EXISTING_PROJECT)
    linkprojet: Optional[str] = None
    estimated_end_date: Optional[date] = None

    users: List[User] = Relationship(back_populates="projects", link_model=UserProjectLink)
    taches: List["Tache"] = Relationship(
        back_populates="project",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )


class Tache(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: str = ""
    status: TaskStatus = Field(default=TaskStatus.TO_DO)
    priority: TaskPriority = Field(default=TaskPriority.LOW)
    type: Optional[str] = None
    creation_date: datetime = Field(default_factory=_utcnow)
    project_id: Optional[int] = Field(default=None, foreign_key="project.id", index=True)
    user_id: Optional[int] = Field(default=None, foreign_key="user.id", index=True)

    project: Optional[Project] = Relationship(back_populates="taches")
    user: Optional[User] = Relationship(back_populates="taches")
