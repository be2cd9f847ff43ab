"""Importing this package registers every ORM table mapper."""
from gdp.models.core import (  # noqa: F401
    User, UserStatus, Project, ProjectStatus, ProjectPriority, ProjectEtat,
    Tache, TaskStatus, TaskPriority, UserProjectLink,
)
from gdp.models.hr import Conge, CongeType, CongeStatus, Notification  # noqa: F401
from gdp.models.periodic import PeriodicTask, UserPeriodicTaskLink  # noqa: F401
