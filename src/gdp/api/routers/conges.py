"""Congé endpoints: lookup, filing and decisions."""
from fastapi import APIRouter, Depends
from gdp.api.deps import get_session, get_uow, require
from gdp.api.schemas.conges import CongeCreate, CongeList, CongeRead, CongeStatusUpdate
from gdp.domain.roles import Capability
from gdp.infra.db.uow import UnitOfWork
from gdp.services.conges_service import CongesService

router = APIRouter(prefix="/conges", tags=["conges"])


@router.get("", response_model=CongeList, dependencies=[Depends(require(Capability.LOOKUP_CONGES))])
def find_conges(
    matricule: str | None = None,
    month: str | None = None,
    uow: UnitOfWork = Depends(get_uow),
) -> CongeList:
    return CongesService(uow).find(matricule=matricule, month=month)


@router.post("", response_model=CongeRead, status_code=201, dependencies=[Depends(get_session)])
def create_conge(body: CongeCreate, uow: UnitOfWork = Depends(get_uow)) -> CongeRead:
    return CongesService(uow).create(body)


@router.put(
    "/{conge_id}/status",
    response_model=CongeRead,
    dependencies=[Depends(require(Capability.MANAGE_CONGES))],
)
def update_conge_status(
    conge_id: int, body: CongeStatusUpdate, uow: UnitOfWork = Depends(get_uow),
) -> CongeRead:
    return CongesService(uow).update_status(conge_id, body.status)
