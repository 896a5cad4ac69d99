"""
➡️ But : Encapsuler toutes les opérations de base de données sur les comptes.

UserRepository : CRUD sur la table User + requêtes par email / rôle.

Ne contient aucune logique métier, juste de la persistance.
"""

from __future__ import annotations

from typing import Optional, Sequence
from sqlalchemy import update
from sqlmodel import select, func

from ecole_maritime.db.repositories.base import BaseRepository
from ecole_maritime.db.models.users import User

class UserRepository(BaseRepository[User]):
    """
    Repository pour la table User.
    Hérite du CRUD générique de BaseRepository.
    """
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        """Retourne un utilisateur par son email."""
        return self.session.exec(
            select(self.model).where(self.model.email == email)
        ).first()

    def list_newest(self, offset: int = 0, limit: int = 100) -> Sequence[User]:
        return self.session.exec(
            select(self.model).order_by(self.model.created_at.desc()).offset(offset).limit(limit)
        ).all()

    def list_by_role(self, role: str) -> Sequence[User]:
        return self.session.exec(
            select(self.model)
            .where(self.model.role == role)
            .order_by(self.model.created_at.desc())
        ).all()

    def count_by_role(self, role: str) -> int:
        return self.session.exec(
            select(func.count(self.model.id)).where(self.model.role == role)
        ).one()

    def reassign_role(self, old_role: str, new_role: str, *, commit: bool = True) -> int:
        """Bascule en masse les utilisateurs d'un rôle vers un autre. Retourne le nombre de lignes touchées."""
        result = self.session.execute(
            update(self.model)
            .where(self.model.role == old_role)
            .values(role=new_role)
        )
        if commit:
            self.session.commit()
        else:
            self.session.flush()
        return result.rowcount or 0
