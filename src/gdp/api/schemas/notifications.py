"""Notification DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, Field


class NotificationRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    user_id: int
    message: str
    is_read: bool
    created_at: datetime | None = None


class NotificationList(BaseModel):
    items: list[NotificationRead]
    total: int
    unread: int


class MarkReadResponse(BaseModel):
    id: int
    message: str = "Notification marquée comme lue"


class NotificationCreate(BaseModel):
    user_id: int
    message: str = Field(min_length=1)
