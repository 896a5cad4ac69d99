import logging
from typing import Dict, List

from ecole_maritime.core.errors import ConflictError, NotFoundError, ValidationError
from ecole_maritime.db.models.ui_components import UIComponent
from ecole_maritime.db.repositories.roles import RoleRepository
from ecole_maritime.db.repositories.ui_components import (
    UIComponentPermissionRepository,
    UIComponentRepository,
)
from ecole_maritime.features.ui_components.schemas import (
    RoleBriefOut,
    UIComponentCreateIn,
    UIComponentPermissionIn,
    UIComponentPermissionOut,
    UIComponentsGroupedOut,
    UIComponentUpdateIn,
    UIComponentWithRolesOut,
)
from ecole_maritime.utils.timezone import utc_now

logger = logging.getLogger(__name__)


class UIComponentService:
    def __init__(
        self,
        *,
        repo: UIComponentRepository,
        permission_repo: UIComponentPermissionRepository,
        role_repo: RoleRepository,
    ):
        self.repo = repo
        self.permission_repo = permission_repo
        self.role_repo = role_repo

    # ---------- Composants ----------

    def list_grouped(self) -> UIComponentsGroupedOut:
        """Composants par catégorie, chacun avec son état par rôle (absent = désactivé)."""
        roles = self.role_repo.list_ordered()
        enabled: Dict[int, Dict[str, bool]] = {}
        for perm, role, component in self.permission_repo.list_with_relations():
            enabled.setdefault(component.id, {})[role.name] = perm.enabled

        grouped: Dict[str, List[UIComponentWithRolesOut]] = {}
        for component in self.repo.list_ordered():
            states = enabled.get(component.id, {})
            grouped.setdefault(component.category, []).append(
                UIComponentWithRolesOut(
                    **component.model_dump(),
                    permissions={role.name: states.get(role.name, False) for role in roles},
                )
            )
        return UIComponentsGroupedOut(
            components=grouped,
            roles=[RoleBriefOut(**role.model_dump()) for role in roles],
        )

    def get(self, component_id: int) -> UIComponent:
        component = self.repo.get(component_id)
        if not component:
            raise NotFoundError("Composant non trouvé")
        return component

    def create(self, payload: UIComponentCreateIn) -> UIComponent:
        name = payload.name.strip()
        if not name or not payload.display_name.strip() or not payload.category.strip():
            raise ValidationError("Les champs name, display_name et category sont requis")
        if self.repo.get_by_name(name):
            raise ConflictError("Un composant avec ce nom existe déjà")
        return self.repo.create(
            name=name,
            display_name=payload.display_name.strip(),
            category=payload.category.strip(),
            description=payload.description or "",
            icon=payload.icon or "Square",
        )

    def update(self, component_id: int, payload: UIComponentUpdateIn) -> UIComponent:
        component = self.get(component_id)
        changes = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
        for key in ("display_name", "category"):
            if key in changes:
                changes[key] = changes[key].strip()
                if not changes[key]:
                    raise ValidationError(f"Le champ {key} ne peut pas être vide")
        return self.repo.update(component, updated_at=utc_now(), **changes)

    def delete(self, component_id: int) -> None:
        component = self.get(component_id)
        name = component.name
        self.permission_repo.delete_where(component_id=component.id, commit=False)
        self.repo.delete(component)
        logger.info("Composant UI %s supprimé", name)

    # ---------- Permissions ----------

    def permissions_for_role(self, role_id: int) -> List[UIComponentPermissionOut]:
        if not self.role_repo.get(role_id):
            raise NotFoundError("Rôle non trouvé")
        return [
            UIComponentPermissionOut(
                id=perm.id,
                role_id=perm.role_id,
                component_id=component.id,
                component_name=component.name,
                enabled=perm.enabled,
            )
            for perm, component in self.permission_repo.list_for_role(role_id)
        ]

    def set_permission(self, payload: UIComponentPermissionIn) -> UIComponentPermissionOut:
        role = self.role_repo.get(payload.role_id)
        if not role:
            raise NotFoundError("Rôle non trouvé")
        component = self.get(payload.component_id)

        existing = self.permission_repo.get_for_pair(role.id, component.id)
        if existing:
            perm = self.permission_repo.update(existing, enabled=payload.enabled, updated_at=utc_now())
        else:
            perm = self.permission_repo.create(role_id=role.id, component_id=component.id, enabled=payload.enabled)
        logger.info("Composant UI %s pour %s : %s", component.name, role.name, payload.enabled)
        return UIComponentPermissionOut(
            id=perm.id,
            role_id=role.id,
            component_id=component.id,
            component_name=component.name,
            enabled=perm.enabled,
        )
