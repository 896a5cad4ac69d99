import logging
from typing import List, Sequence

from ecole_maritime.core.errors import ConflictError, NotFoundError, ValidationError
from ecole_maritime.db.models.resources import Resource
from ecole_maritime.db.repositories.resources import ResourceRepository
from ecole_maritime.db.repositories.role_permissions import RolePermissionRepository
from ecole_maritime.features.resources.schemas import ResourceCreateIn, ResourceUpdateIn
from ecole_maritime.utils.timezone import utc_now

logger = logging.getLogger(__name__)


def _dedupe(actions: List[str]) -> List[str]:
    """Ordre conservé, doublons et vides retirés."""
    seen: List[str] = []
    for action in actions:
        action = action.strip()
        if action and action not in seen:
            seen.append(action)
    return seen


class ResourceService:
    def __init__(self, repo: ResourceRepository, permission_repo: RolePermissionRepository):
        self.repo = repo
        self.permission_repo = permission_repo

    def list(self) -> Sequence[Resource]:
        return self.repo.list_ordered()

    def get(self, resource_id: int) -> Resource:
        resource = self.repo.get(resource_id)
        if not resource:
            raise NotFoundError("Ressource non trouvée")
        return resource

    def create(self, payload: ResourceCreateIn) -> Resource:
        name = payload.name.strip()
        display_name = payload.display_name.strip()
        if not name or not display_name:
            raise ValidationError("Le nom et le nom d'affichage sont requis")
        if self.repo.get_by_name(name):
            raise ConflictError("Une ressource avec ce nom existe déjà")

        actions = _dedupe(payload.actions)
        resource = self.repo.create(
            name=name,
            display_name=display_name,
            description=payload.description or "",
            actions=actions,
            action_labels={a: label for a, label in payload.action_labels.items() if a in actions},
        )
        logger.info("Ressource %s créée", name)
        return resource

    def update(self, resource_id: int, payload: ResourceUpdateIn) -> Resource:
        resource = self.get(resource_id)
        changes = {}
        if payload.display_name is not None:
            if not payload.display_name.strip():
                raise ValidationError("Le nom d'affichage ne peut pas être vide")
            changes["display_name"] = payload.display_name.strip()
        if payload.description is not None:
            changes["description"] = payload.description

        actions = list(resource.actions)
        if payload.actions is not None:
            actions = _dedupe(payload.actions)
            changes["actions"] = actions
        if payload.action_labels is not None or payload.actions is not None:
            labels = payload.action_labels if payload.action_labels is not None else resource.action_labels
            # nouveau dict : la colonne JSON n'est pas suivie en mutation
            changes["action_labels"] = {a: label for a, label in labels.items() if a in actions}

        if payload.actions is not None:
            self._prune_stale_actions(resource.id, actions)

        return self.repo.update(resource, updated_at=utc_now(), **changes)

    def _prune_stale_actions(self, resource_id: int, actions: List[str]) -> None:
        """Retire des permissions de rôle les actions qui ne font plus partie du vocabulaire."""
        for perm in self.permission_repo.list_for_resource(resource_id):
            kept = [a for a in perm.actions if a in actions]
            if kept == list(perm.actions):
                continue
            if kept:
                self.permission_repo.update(perm, actions=kept, updated_at=utc_now(), commit=False)
            else:
                self.permission_repo.delete(perm, commit=False)
            logger.info("Permission %s : actions obsolètes retirées", perm.id)

    def delete(self, resource_id: int) -> None:
        resource = self.get(resource_id)
        name = resource.name
        self.permission_repo.delete_where(resource_id=resource.id, commit=False)
        self.repo.delete(resource)
        logger.info("Ressource %s supprimée", name)
