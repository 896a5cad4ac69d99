from datetime import datetime
from typing import Optional, Sequence
from sqlmodel import select

from ecole_maritime.db.repositories.base import BaseRepository
from ecole_maritime.db.models.sessions_formation import SessionFormation

class SessionFormationRepository(BaseRepository[SessionFormation]):
    model = SessionFormation

    def list_filtered(
        self,
        *,
        formation_id: Optional[int] = None,
        date_debut_gte: Optional[datetime] = None,
        offset: int = 0,
        limit: int = 500,
    ) -> Sequence[SessionFormation]:
        """
        Sessions, les plus tardives d'abord.
        - formation_id   : sessions d'une formation
        - date_debut_gte : débutant à partir de cette date
        """
        stmt = select(self.model)
        if formation_id is not None:
            stmt = stmt.where(self.model.formation_id == formation_id)
        if date_debut_gte is not None:
            stmt = stmt.where(self.model.date_debut >= date_debut_gte)
        stmt = stmt.order_by(self.model.date_debut.desc()).offset(offset).limit(limit)
        return self.session.exec(stmt).all()
