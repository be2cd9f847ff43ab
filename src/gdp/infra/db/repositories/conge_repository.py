"""Repository for Conge records. No business logic."""
from __future__ import annotations
from datetime import date
from sqlmodel import Session, select, desc
from gdp.models.hr import Conge


class CongeRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, conge_id: int) -> Conge | None:
        return self._s.get(Conge, conge_id)

    def list_all(self) -> list[Conge]:
        return list(self._s.exec(select(Conge)).all())

    def list_by_matricule(self, matricule: str) -> list[Conge]:
        return list(self._s.exec(
            select(Conge)
            .where(Conge.matricule == matricule)
            .order_by(desc(Conge.start_date), desc(Conge.id))
        ).all())

    def list_starting_between(self, first: date, last: date) -> list[Conge]:
        """Congés whose start date lies in [first, last], both inclusive."""
        return list(self._s.exec(
            select(Conge)
            .where(Conge.start_date >= first, Conge.start_date <= last)
            .order_by(Conge.start_date, Conge.id)
        ).all())

    def add(self, conge: Conge) -> Conge:
        self._s.add(conge)
        self._s.flush()
        return conge
