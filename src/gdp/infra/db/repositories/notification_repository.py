"""Repository for Notification records. No business logic."""
from __future__ import annotations
from sqlmodel import Session, select, desc
from gdp.models.hr import Notification


class NotificationRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, notification_id: int) -> Notification | None:
        return self._s.get(Notification, notification_id)

    def list_newest_first(self) -> list[Notification]:
        return list(self._s.exec(
            select(Notification).order_by(desc(Notification.created_at), desc(Notification.id))
        ).all())

    def add(self, notification: Notification) -> Notification:
        self._s.add(notification)
        self._s.flush()
        return notification
