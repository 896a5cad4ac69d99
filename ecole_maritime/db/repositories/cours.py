from typing import Sequence
from sqlmodel import select

from ecole_maritime.db.repositories.base import BaseRepository
from ecole_maritime.db.models.cours import Cours

class CoursRepository(BaseRepository[Cours]):
    model = Cours

    def list_newest(self, *, offset: int = 0, limit: int = 100) -> Sequence[Cours]:
        return self.session.exec(
            select(self.model)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .offset(offset)
            .limit(limit)
        ).all()
