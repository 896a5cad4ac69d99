from typing import Optional, Sequence
from sqlmodel import select

from ecole_maritime.db.repositories.base import BaseRepository
from ecole_maritime.db.models.formateurs import Formateur

class FormateurRepository(BaseRepository[Formateur]):
    model = Formateur

    def get_by_rib(self, rib: str) -> Optional[Formateur]:
        return self.session.exec(
            select(self.model).where(self.model.rib == rib)
        ).first()

    def list_newest(self, *, offset: int = 0, limit: int = 100) -> Sequence[Formateur]:
        return self.session.exec(
            select(self.model)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .offset(offset)
            .limit(limit)
        ).all()
