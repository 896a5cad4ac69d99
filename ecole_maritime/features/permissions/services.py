import logging
from typing import List, Tuple

from ecole_maritime.core.errors import NotFoundError, ValidationError
from ecole_maritime.db.models.resources import Resource
from ecole_maritime.db.models.role_permissions import RolePermission
from ecole_maritime.db.models.roles import Role
from ecole_maritime.db.repositories.resources import ResourceRepository
from ecole_maritime.db.repositories.role_permissions import RolePermissionRepository
from ecole_maritime.db.repositories.roles import RoleRepository
from ecole_maritime.features.permissions.schemas import (
    RolePermissionOut,
    RolePermissionUpdateIn,
    RolePermissionUpdateOut,
)
from ecole_maritime.utils.timezone import utc_now

logger = logging.getLogger(__name__)


def _to_out(perm: RolePermission, role: Role, resource: Resource) -> RolePermissionOut:
    return RolePermissionOut(
        id=perm.id,
        role_id=role.id,
        role_name=role.name,
        resource_id=resource.id,
        resource_name=resource.name,
        resource_display_name=resource.display_name,
        actions=list(perm.actions),
    )


class RolePermissionService:
    def __init__(
        self,
        *,
        repo: RolePermissionRepository,
        role_repo: RoleRepository,
        resource_repo: ResourceRepository,
    ):
        self.repo = repo
        self.role_repo = role_repo
        self.resource_repo = resource_repo

    def list(self) -> List[RolePermissionOut]:
        return [_to_out(perm, role, resource) for perm, role, resource in self.repo.list_with_relations()]

    # ---------- Résolution des deux modes ----------

    def _toggle_mode(self, payload: RolePermissionUpdateIn) -> Tuple[Role, Resource, List[str]]:
        role = self.role_repo.get_by_name(payload.role_name)
        if not role:
            raise NotFoundError("Rôle non trouvé")
        resource = self.resource_repo.get_by_name(payload.resource_name)
        if not resource:
            raise NotFoundError("Ressource non trouvée")
        if payload.action not in resource.actions:
            raise ValidationError(f"Action invalide: {payload.action}")

        existing = self.repo.get_for_pair(role.id, resource.id)
        current = list(existing.actions) if existing else []
        if payload.action in current:
            actions = [a for a in current if a != payload.action]
        else:
            actions = current + [payload.action]
        return role, resource, actions

    def _set_mode(self, payload: RolePermissionUpdateIn) -> Tuple[Role, Resource, List[str]]:
        role = self.role_repo.get(payload.role_id)
        if not role:
            raise NotFoundError("Rôle non trouvé")
        resource = self.resource_repo.get(payload.resource_id)
        if not resource:
            raise NotFoundError("Ressource non trouvée")
        invalid = [a for a in payload.actions if a not in resource.actions]
        if invalid:
            raise ValidationError(f"Actions invalides: {', '.join(invalid)}")
        # ordre du vocabulaire, sans doublons
        actions = [a for a in resource.actions if a in payload.actions]
        return role, resource, actions

    # ---------- Écriture ----------

    def update(self, payload: RolePermissionUpdateIn) -> RolePermissionUpdateOut:
        if payload.role_name and payload.resource_name and payload.action:
            role, resource, actions = self._toggle_mode(payload)
        elif payload.role_id and payload.resource_id and payload.actions is not None:
            role, resource, actions = self._set_mode(payload)
        else:
            raise ValidationError(
                "Paramètres requis: (role_name, resource_name, action) ou (role_id, resource_id, actions)"
            )

        existing = self.repo.get_for_pair(role.id, resource.id)
        if not actions:
            if existing:
                self.repo.delete(existing)
            logger.info("Permissions %s/%s retirées", role.name, resource.name)
            return RolePermissionUpdateOut(deleted=True)

        if existing:
            # nouvelle liste : la colonne JSON n'est pas suivie en mutation
            perm = self.repo.update(existing, actions=list(actions), updated_at=utc_now())
        else:
            perm = self.repo.create(role_id=role.id, resource_id=resource.id, actions=list(actions))
        logger.info("Permissions %s/%s = %s", role.name, resource.name, actions)
        return RolePermissionUpdateOut(permission=_to_out(perm, role, resource))
