"""
➡️ But : Registre des rôles.

Suppression d'un rôle :
- rôle système -> refus (403)
- rôle par défaut -> refus (409), il reçoit les utilisateurs des rôles supprimés
- sinon : utilisateurs basculés vers le rôle par défaut, permissions du rôle
  supprimées, puis le rôle, dans une seule transaction.
"""

import logging
from typing import List, Sequence

from ecole_maritime.core.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from ecole_maritime.db.models.roles import Role
from ecole_maritime.db.models.users import User
from ecole_maritime.db.repositories.roles import RoleRepository
from ecole_maritime.db.repositories.users import UserRepository
from ecole_maritime.db.repositories.role_permissions import RolePermissionRepository
from ecole_maritime.db.repositories.ui_components import UIComponentPermissionRepository
from ecole_maritime.features.roles.schemas import (
    RoleCreateIn,
    RoleDeleteOut,
    RoleUpdateIn,
    RoleWithStatsOut,
)
from ecole_maritime.utils.timezone import utc_now

logger = logging.getLogger(__name__)


class RoleService:
    def __init__(
        self,
        *,
        repo: RoleRepository,
        user_repo: UserRepository,
        permission_repo: RolePermissionRepository,
        ui_permission_repo: UIComponentPermissionRepository,
        default_role: str,
    ):
        self.repo = repo
        self.user_repo = user_repo
        self.permission_repo = permission_repo
        self.ui_permission_repo = ui_permission_repo
        self.default_role = default_role

    # ---------- READ ----------

    def list(self) -> List[RoleWithStatsOut]:
        out: List[RoleWithStatsOut] = []
        for role in self.repo.list_ordered():
            readable = [
                f"{resource.display_name}: {action}"
                for perm, resource in self.permission_repo.list_for_role(role.id)
                for action in perm.actions
            ]
            out.append(
                RoleWithStatsOut(
                    **role.model_dump(),
                    user_count=self.user_repo.count_by_role(role.name),
                    permissions=readable,
                )
            )
        return out

    def get(self, role_id: int) -> Role:
        role = self.repo.get(role_id)
        if not role:
            raise NotFoundError("Rôle non trouvé")
        return role

    def users_of(self, role_name: str) -> Sequence[User]:
        if not self.repo.get_by_name(role_name):
            raise NotFoundError("Rôle non trouvé")
        return self.user_repo.list_by_role(role_name)

    # ---------- WRITE ----------

    def create(self, payload: RoleCreateIn) -> Role:
        name = payload.name.strip()
        display_name = payload.display_name.strip()
        if not name or not display_name:
            raise ValidationError("Le nom et le nom d'affichage sont requis")
        if self.repo.get_by_name(name):
            raise ConflictError("Un rôle avec ce nom existe déjà")
        role = self.repo.create(
            name=name,
            display_name=display_name,
            description=payload.description or "",
            color=payload.color or "gray",
        )
        logger.info("Rôle %s créé", name)
        return role

    def update(self, role_id: int, payload: RoleUpdateIn) -> Role:
        role = self.get(role_id)
        changes = {}
        if payload.display_name is not None:
            if not payload.display_name.strip():
                raise ValidationError("Le nom d'affichage ne peut pas être vide")
            changes["display_name"] = payload.display_name.strip()
        if payload.description is not None:
            changes["description"] = payload.description
        if payload.color is not None:
            changes["color"] = payload.color or "gray"
        return self.repo.update(role, updated_at=utc_now(), **changes)

    def delete(self, role_id: int) -> RoleDeleteOut:
        role = self.get(role_id)
        role_name = role.name
        if role.is_system:
            raise ForbiddenError("Impossible de supprimer un rôle système")
        if role_name == self.default_role:
            raise ConflictError("Impossible de supprimer le rôle par défaut")

        try:
            reassigned = self.user_repo.reassign_role(role_name, self.default_role, commit=False)
            self.permission_repo.delete_where(role_id=role.id, commit=False)
            self.ui_permission_repo.delete_where(role_id=role.id, commit=False)
            self.repo.delete(role)
        except Exception:
            self.repo.rollback()
            raise

        logger.info(
            "Rôle %s supprimé, %d utilisateur(s) basculé(s) vers %s",
            role_name, reassigned, self.default_role,
        )
        return RoleDeleteOut(deleted=role_name, reassigned_users=reassigned, reassigned_to=self.default_role)
