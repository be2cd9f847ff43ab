"""Notifications use-case service."""
from __future__ import annotations
from gdp.domain.exceptions import NotFoundError
from gdp.infra.db.uow import UnitOfWork
from gdp.models.hr import Notification
from gdp.api.schemas.notifications import (
    NotificationCreate, NotificationRead, NotificationList, MarkReadResponse,
)
from gdp.logging import logger


class NotificationsService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def list_admin(self) -> NotificationList:
        items = self._uow.notifications.list_newest_first()
        return NotificationList(
            items=[NotificationRead.model_validate(n) for n in items],
            total=len(items),
            unread=sum(1 for n in items if not n.is_read),
        )

    def create(self, body: NotificationCreate) -> NotificationRead:
        if self._uow.users.get_by_id(body.user_id) is None:
            raise NotFoundError("Utilisateur introuvable")
        notification = self._uow.notifications.add(Notification(user_id=body.user_id, message=body.message))
        logger.info("Notification %s created for user %s", notification.id, body.user_id)
        return NotificationRead.model_validate(notification)

    def mark_read(self, notification_id: int) -> MarkReadResponse:
        repo = self._uow.notifications
        notification = repo.get_by_id(notification_id)
        if notification is None:
            raise NotFoundError(f"Notification {notification_id} not found")
        if not notification.is_read:
            notification.is_read = True
            self._uow.session.add(notification)
            self._uow.commit()
            logger.info("Notification %s marked as read", notification_id)
        return MarkReadResponse(id=notification_id)
