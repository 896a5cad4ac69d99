from typing import Optional, Sequence
from sqlmodel import select

from ecole_maritime.db.repositories.base import BaseRepository
from ecole_maritime.db.models.resources import Resource

class ResourceRepository(BaseRepository[Resource]):
    model = Resource

    def get_by_name(self, name: str) -> Optional[Resource]:
        return self.session.exec(
            select(self.model).where(self.model.name == name)
        ).first()

    def list_ordered(self) -> Sequence[Resource]:
        return self.session.exec(select(self.model).order_by(self.model.name.asc())).all()
