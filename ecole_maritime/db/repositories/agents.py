from typing import Optional, Sequence
from sqlmodel import select, or_

from ecole_maritime.db.repositories.base import BaseRepository
from ecole_maritime.db.models.agents import Agent

class AgentRepository(BaseRepository[Agent]):
    model = Agent

    def get_by_matricule(self, matricule: str) -> Optional[Agent]:
        return self.session.exec(
            select(self.model).where(self.model.matricule == matricule)
        ).first()

    def list_newest(
        self,
        *,
        offset: int = 0,
        limit: int = 100,
        categorie: Optional[str] = None,
        q: Optional[str] = None,
    ) -> Sequence[Agent]:
        """
        Liste paginée, plus récents d'abord.
        - categorie : filtre exact
        - q         : recherche insensible à la casse sur nom/matricule
        """
        stmt = select(self.model)
        if categorie:
            stmt = stmt.where(self.model.categorie == categorie)
        if q:
            like = f"%{q}%"
            stmt = stmt.where(
                or_(self.model.nom_prenom.ilike(like), self.model.matricule.ilike(like))
            )
        stmt = stmt.order_by(self.model.created_at.desc(), self.model.id.desc())
        return self.session.exec(stmt.offset(offset).limit(limit)).all()
