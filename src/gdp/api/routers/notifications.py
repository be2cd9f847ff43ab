"""Notification endpoints."""
from fastapi import APIRouter, Depends
from gdp.api.deps import get_uow, get_session, require
from gdp.api.schemas.notifications import (
    NotificationCreate, NotificationList, NotificationRead, MarkReadResponse,
)
from gdp.domain.roles import Capability
from gdp.infra.db.uow import UnitOfWork
from gdp.services.notifications_service import NotificationsService

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post("", response_model=NotificationRead, status_code=201, dependencies=[Depends(get_session)])
def create_notification(body: NotificationCreate, uow: UnitOfWork = Depends(get_uow)) -> NotificationRead:
    return NotificationsService(uow).create(body)


@router.get(
    "/admin",
    response_model=NotificationList,
    dependencies=[Depends(require(Capability.VIEW_ADMIN_NOTIFICATIONS))],
)
def list_admin_notifications(uow: UnitOfWork = Depends(get_uow)) -> NotificationList:
    return NotificationsService(uow).list_admin()


@router.put(
    "/read/{notification_id}",
    response_model=MarkReadResponse,
    dependencies=[Depends(get_session)],
)
def mark_notification_read(
    notification_id: int, uow: UnitOfWork = Depends(get_uow),
) -> MarkReadResponse:
    return NotificationsService(uow).mark_read(notification_id)
