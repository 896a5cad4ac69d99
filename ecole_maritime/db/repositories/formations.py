from typing import Sequence
from sqlmodel import select

from ecole_maritime.db.repositories.base import BaseRepository
from ecole_maritime.db.models.formations import Formation

class FormationRepository(BaseRepository[Formation]):
    model = Formation

    def list_by_name(self, *, offset: int = 0, limit: int = 100) -> Sequence[Formation]:
        """Formations triées par intitulé."""
        return self.session.exec(
            select(self.model)
            .order_by(self.model.formation.asc())
            .offset(offset)
            .limit(limit)
        ).all()
