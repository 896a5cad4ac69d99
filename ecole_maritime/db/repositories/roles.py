from typing import Optional, Sequence
from sqlmodel import select

from ecole_maritime.db.repositories.base import BaseRepository
from ecole_maritime.db.models.roles import Role

class RoleRepository(BaseRepository[Role]):
    model = Role

    def get_by_name(self, name: str) -> Optional[Role]:
        return self.session.exec(
            select(self.model).where(self.model.name == name)
        ).first()

    def list_ordered(self) -> Sequence[Role]:
        """Tous les rôles, triés par nom."""
        return self.session.exec(select(self.model).order_by(self.model.name.asc())).all()
