"""Congés use-case service."""
from __future__ import annotations
from datetime import date
from gdp.domain.calendar import month_bounds
from gdp.domain.exceptions import InvalidRequestError, NotFoundError
from gdp.infra.db.uow import UnitOfWork
from gdp.models.hr import Conge, CongeStatus, CongeType
from gdp.api.schemas.conges import CongeCreate, CongeList, CongeRead, CongeStatusDTO
from gdp.logging import logger

# Only a pending request can be decided; re-sending the current status is a no-op.
_TRANSITIONS: dict[CongeStatus, frozenset[CongeStatus]] = {
    CongeStatus.PENDING: frozenset({CongeStatus.APPROVED, CongeStatus.REJECTED}),
    CongeStatus.APPROVED: frozenset(),
    CongeStatus.REJECTED: frozenset(),
}


class CongesService:
    def __init__(self, uow: UnitOfWork, *, today: date | None = None) -> None:
        self._uow = uow
        self._today = today

    def _to_list(self, conges) -> CongeList:
        return CongeList(items=[CongeRead.model_validate(c) for c in conges], total=len(conges))

    def find(self, *, matricule: str | None = None, month: str | None = None) -> CongeList:
        """Exactly one of ``matricule`` / ``month`` selects the lookup."""
        if bool(matricule) == bool(month):
            raise InvalidRequestError("Provide exactly one of 'matricule' or 'month'")
        if matricule:
            return self.by_matricule(matricule)
        return self.by_month(month)

    def by_matricule(self, matricule: str) -> CongeList:
        return self._to_list(self._uow.conges.list_by_matricule(matricule))

    def by_month(self, month: str) -> CongeList:
        year = (self._today or date.today()).year
        bounds = month_bounds(month, year)
        if bounds is None:
            raise InvalidRequestError(f"Mois invalide: {month!r}")
        return self._to_list(self._uow.conges.list_starting_between(*bounds))

    def create(self, body: CongeCreate) -> CongeRead:
        """File a new request; it always starts out ``PENDING``."""
        if self._uow.users.get_by_id(body.user_id) is None:
            raise NotFoundError("Utilisateur introuvable")
        fields = body.model_dump(exclude={"type"})
        conge = Conge(**fields, type=CongeType(body.type.value), status=CongeStatus.PENDING)
        self._uow.conges.add(conge)
        logger.info("Congé %s filed for user %s", conge.id, body.user_id)
        return CongeRead.model_validate(conge)

    def update_status(self, conge_id: int, status: CongeStatusDTO) -> CongeRead:
        conge = self._uow.conges.get_by_id(conge_id)
        if conge is None:
            raise NotFoundError("Congé introuvable")
        target = CongeStatus(status.value)
        if target == conge.status:
            return CongeRead.model_validate(conge)
        if target not in _TRANSITIONS[conge.status]:
            raise InvalidRequestError(
                f"Statut {conge.status.value} ne peut pas passer à {target.value}"
            )
        conge.status = target
        self._uow.session.add(conge)
        self._uow.session.flush()
        logger.info("Congé %s is now %s", conge_id, target.value)
        return CongeRead.model_validate(conge)
