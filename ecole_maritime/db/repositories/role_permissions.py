from typing import Optional, Sequence, Tuple
from sqlmodel import select

from ecole_maritime.db.repositories.base import BaseRepository
from ecole_maritime.db.models.role_permissions import RolePermission
from ecole_maritime.db.models.roles import Role
from ecole_maritime.db.models.resources import Resource

class RolePermissionRepository(BaseRepository[RolePermission]):
    """Matrice (rôle, ressource) -> actions."""
    model = RolePermission

    def list_with_relations(self) -> Sequence[Tuple[RolePermission, Role, Resource]]:
        """
        Toutes les permissions avec leur rôle et leur ressource.
        Ordre stable (id croissant) : le pliage en matrice en dépend.
        """
        stmt = (
            select(RolePermission, Role, Resource)
            .join(Role, Role.id == RolePermission.role_id)
            .join(Resource, Resource.id == RolePermission.resource_id)
            .order_by(RolePermission.id.asc())
        )
        return self.session.exec(stmt).all()

    def list_for_role(self, role_id: int) -> Sequence[Tuple[RolePermission, Resource]]:
        stmt = (
            select(RolePermission, Resource)
            .join(Resource, Resource.id == RolePermission.resource_id)
            .where(RolePermission.role_id == role_id)
            .order_by(Resource.name.asc())
        )
        return self.session.exec(stmt).all()

    def list_for_resource(self, resource_id: int) -> Sequence[RolePermission]:
        return self.session.exec(
            select(self.model).where(self.model.resource_id == resource_id)
        ).all()

    def get_for_pair(self, role_id: int, resource_id: int) -> Optional[RolePermission]:
        return self.session.exec(
            select(self.model)
            .where(self.model.role_id == role_id)
            .where(self.model.resource_id == resource_id)
        ).first()
