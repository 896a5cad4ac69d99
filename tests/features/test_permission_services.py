# tests/features/test_permission_services.py
import pytest
from unittest.mock import MagicMock

from ecole_maritime.core.errors import ConflictError, NotFoundError, ValidationError
from ecole_maritime.db.models.resources import Resource
from ecole_maritime.db.models.role_permissions import RolePermission
from ecole_maritime.db.models.roles import Role
from ecole_maritime.db.repositories.resources import ResourceRepository
from ecole_maritime.db.repositories.role_permissions import RolePermissionRepository
from ecole_maritime.db.repositories.roles import RoleRepository
from ecole_maritime.features.permissions.schemas import RolePermissionUpdateIn
from ecole_maritime.features.permissions.services import RolePermissionService
from ecole_maritime.features.resources.schemas import ResourceCreateIn, ResourceUpdateIn
from ecole_maritime.features.resources.services import ResourceService

CRUD = ["create", "edit", "delete", "view"]


@pytest.fixture
def permission_repo() -> MagicMock:
    return MagicMock(spec=RolePermissionRepository)


@pytest.fixture
def role_repo() -> MagicMock:
    return MagicMock(spec=RoleRepository)


@pytest.fixture
def resource_repo() -> MagicMock:
    return MagicMock(spec=ResourceRepository)


@pytest.fixture
def coordinateur() -> Role:
    return Role(id=3, name="coordinateur", display_name="Service Programmation")


@pytest.fixture
def formation() -> Resource:
    return Resource(id=2, name="formation", display_name="Formations", actions=list(CRUD))


# ===================================================================
#  Matrice rôle/ressource
# ===================================================================

class TestRolePermissionService:
    @pytest.fixture
    def service(self, permission_repo, role_repo, resource_repo) -> RolePermissionService:
        return RolePermissionService(repo=permission_repo, role_repo=role_repo, resource_repo=resource_repo)

    def test_toggle_adds_missing_action(self, service, permission_repo, role_repo, resource_repo, coordinateur, formation):
        # === Arrange ===
        role_repo.get_by_name.return_value = coordinateur
        resource_repo.get_by_name.return_value = formation
        existing = RolePermission(id=10, role_id=3, resource_id=2, actions=["view"])
        permission_repo.get_for_pair.return_value = existing
        permission_repo.update.side_effect = lambda perm, **changes: RolePermission(
            id=perm.id, role_id=perm.role_id, resource_id=perm.resource_id, actions=changes["actions"]
        )

        # === Act ===
        out = service.update(RolePermissionUpdateIn(role_name="coordinateur", resource_name="formation", action="edit"))

        # === Assert ===
        assert out.deleted is False
        assert out.permission.actions == ["view", "edit"]
        # nouvelle liste, l'ancienne n'est pas modifiée sur place
        assert existing.actions == ["view"]

    def test_toggle_removing_last_action_deletes_row(self, service, permission_repo, role_repo, resource_repo, coordinateur, formation):
        role_repo.get_by_name.return_value = coordinateur
        resource_repo.get_by_name.return_value = formation
        existing = RolePermission(id=10, role_id=3, resource_id=2, actions=["view"])
        permission_repo.get_for_pair.return_value = existing

        out = service.update(RolePermissionUpdateIn(role_name="coordinateur", resource_name="formation", action="view"))

        assert out.deleted is True
        permission_repo.delete.assert_called_once_with(existing)

    def test_toggle_rejects_action_outside_vocabulary(self, service, permission_repo, role_repo, resource_repo, coordinateur, formation):
        role_repo.get_by_name.return_value = coordinateur
        resource_repo.get_by_name.return_value = formation

        with pytest.raises(ValidationError):
            service.update(RolePermissionUpdateIn(role_name="coordinateur", resource_name="formation", action="fly"))
        permission_repo.create.assert_not_called()

    def test_set_mode_orders_by_vocabulary(self, service, permission_repo, role_repo, resource_repo, coordinateur, formation):
        role_repo.get.return_value = coordinateur
        resource_repo.get.return_value = formation
        permission_repo.get_for_pair.return_value = None
        permission_repo.create.side_effect = lambda **fields: RolePermission(id=11, **fields)

        out = service.update(RolePermissionUpdateIn(role_id=3, resource_id=2, actions=["view", "create", "view"]))

        assert out.permission.actions == ["create", "view"]
        permission_repo.create.assert_called_once_with(role_id=3, resource_id=2, actions=["create", "view"])

    def test_unknown_role_is_404(self, service, role_repo):
        role_repo.get_by_name.return_value = None

        with pytest.raises(NotFoundError):
            service.update(RolePermissionUpdateIn(role_name="x", resource_name="formation", action="view"))

    def test_incomplete_payload_is_400(self, service):
        with pytest.raises(ValidationError):
            service.update(RolePermissionUpdateIn(role_name="coordinateur"))


# ===================================================================
#  Ressources
# ===================================================================

class TestResourceService:
    @pytest.fixture
    def service(self, resource_repo, permission_repo) -> ResourceService:
        return ResourceService(resource_repo, permission_repo)

    def test_duplicate_name_is_conflict(self, service, resource_repo, formation):
        resource_repo.get_by_name.return_value = formation

        with pytest.raises(ConflictError):
            service.create(ResourceCreateIn(name="formation", display_name="Formations"))
        resource_repo.create.assert_not_called()

    def test_create_dedupes_actions_and_drops_orphan_labels(self, service, resource_repo):
        resource_repo.get_by_name.return_value = None

        service.create(ResourceCreateIn(
            name="rapport",
            display_name="Rapports",
            actions=["view", " export ", "view", ""],
            action_labels={"view": "Consulter", "print": "Imprimer"},
        ))

        kwargs = resource_repo.create.call_args.kwargs
        assert kwargs["actions"] == ["view", "export"]
        assert kwargs["action_labels"] == {"view": "Consulter"}

    def test_narrowing_vocabulary_prunes_permissions(self, service, resource_repo, permission_repo, formation):
        resource_repo.get.return_value = formation
        partial = RolePermission(id=1, role_id=3, resource_id=2, actions=["edit", "view"])
        emptied = RolePermission(id=2, role_id=4, resource_id=2, actions=["edit"])
        untouched = RolePermission(id=3, role_id=5, resource_id=2, actions=["view"])
        permission_repo.list_for_resource.return_value = [partial, emptied, untouched]

        service.update(2, ResourceUpdateIn(actions=["create", "view"]))

        permission_repo.update.assert_called_once()
        assert permission_repo.update.call_args.args[0] is partial
        assert permission_repo.update.call_args.kwargs["actions"] == ["view"]
        permission_repo.delete.assert_called_once_with(emptied, commit=False)

    def test_delete_removes_permission_rows(self, service, resource_repo, permission_repo, formation):
        resource_repo.get.return_value = formation

        service.delete(2)

        permission_repo.delete_where.assert_called_once_with(resource_id=2, commit=False)
        resource_repo.delete.assert_called_once_with(formation)
