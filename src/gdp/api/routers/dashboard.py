"""Dashboard endpoints."""
from fastapi import APIRouter, Depends
from gdp.api.deps import get_uow, require
from gdp.api.schemas.dashboard import DashboardStats
from gdp.domain.roles import Capability
from gdp.infra.db.uow import UnitOfWork
from gdp.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStats,
    dependencies=[Depends(require(Capability.VIEW_STATS))],
)
def get_stats(uow: UnitOfWork = Depends(get_uow)) -> DashboardStats:
    return DashboardService(uow).get_stats()
