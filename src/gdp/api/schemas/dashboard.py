"""Dashboard DTOs: pure Pydantic, zero ORM imports.

Serialized with camelCase keys (``byStatus``, ``completionRate``, ...), the
shape every dashboard consumer already reads. Snapshots are frozen: a
re-fetch replaces the whole object.
"""
from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Frozen(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ProjectProductivity(_Frozen):
    completion_rate: int = 0
    in_progress_rate: int = 0
    to_do_rate: int = 0
    high_priority_completion: int = 0
    medium_priority_completion: int = 0
    low_priority_completion: int = 0


class TaskProductivity(_Frozen):
    completion_rate: float = 0.0
    in_progress_rate: float = 0.0
    to_do_rate: float = 0.0
    high_priority_completion: float = 0.0
    low_priority_completion: float = 0.0


class UserProductivity(_Frozen):
    user_id: int
    username: str
    total_tasks: int
    completed_tasks: int
    completion_rate: float


class ProjectStats(_Frozen):
    total: int = 0
    by_status: dict[str, int] = {}
    by_priority: dict[str, int] = {}
    productivity: ProjectProductivity = ProjectProductivity()


class TaskStats(_Frozen):
    total: int = 0
    by_status: dict[str, int] = {}
    by_priority: dict[str, int] = {}
    productivity: TaskProductivity = TaskProductivity()


class UserStats(_Frozen):
    total: int = 0
    by_role: dict[str, int] = {}
    productivity: list[UserProductivity] = []


class CongeStats(_Frozen):
    total: int = 0
    by_month: list[int] = Field(default_factory=lambda: [0] * 12, min_length=12, max_length=12)
    by_type: dict[str, int] = {}
    by_status: dict[str, int] = {}


class DashboardStats(_Frozen):
    users: UserStats
    projects: ProjectStats
    tasks: TaskStats
    conges: CongeStats
