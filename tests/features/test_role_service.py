# tests/features/test_role_service.py
import pytest
from unittest.mock import MagicMock

from ecole_maritime.core.errors import ConflictError, ForbiddenError, NotFoundError
from ecole_maritime.db.models.roles import Role
from ecole_maritime.db.repositories.roles import RoleRepository
from ecole_maritime.db.repositories.users import UserRepository
from ecole_maritime.db.repositories.role_permissions import RolePermissionRepository
from ecole_maritime.db.repositories.ui_components import UIComponentPermissionRepository
from ecole_maritime.features.roles.schemas import RoleCreateIn
from ecole_maritime.features.roles.services import RoleService

# ===================================================================
#  Fixtures
# ===================================================================

@pytest.fixture
def role_repo() -> MagicMock:
    return MagicMock(spec=RoleRepository)


@pytest.fixture
def user_repo() -> MagicMock:
    return MagicMock(spec=UserRepository)


@pytest.fixture
def permission_repo() -> MagicMock:
    return MagicMock(spec=RolePermissionRepository)


@pytest.fixture
def ui_permission_repo() -> MagicMock:
    return MagicMock(spec=UIComponentPermissionRepository)


@pytest.fixture
def service(role_repo, user_repo, permission_repo, ui_permission_repo) -> RoleService:
    return RoleService(
        repo=role_repo,
        user_repo=user_repo,
        permission_repo=permission_repo,
        ui_permission_repo=ui_permission_repo,
        default_role="agent",
    )


# ===================================================================
#  Suppression
# ===================================================================

class TestDelete:
    def test_reassigns_users_then_deletes(self, service, role_repo, user_repo, permission_repo, ui_permission_repo):
        # === Arrange ===
        role = Role(id=7, name="stagiaire", display_name="Stagiaire")
        role_repo.get.return_value = role
        user_repo.reassign_role.return_value = 3

        # === Act ===
        out = service.delete(7)

        # === Assert ===
        assert out.deleted == "stagiaire"
        assert out.reassigned_users == 3
        assert out.reassigned_to == "agent"
        user_repo.reassign_role.assert_called_once_with("stagiaire", "agent", commit=False)
        permission_repo.delete_where.assert_called_once_with(role_id=7, commit=False)
        ui_permission_repo.delete_where.assert_called_once_with(role_id=7, commit=False)
        role_repo.delete.assert_called_once_with(role)

    def test_system_role_is_forbidden(self, service, role_repo, user_repo):
        role_repo.get.return_value = Role(id=1, name="administrateur", display_name="Admin", is_system=True)

        with pytest.raises(ForbiddenError):
            service.delete(1)
        user_repo.reassign_role.assert_not_called()
        role_repo.delete.assert_not_called()

    def test_default_role_is_conflict(self, service, role_repo, user_repo):
        role_repo.get.return_value = Role(id=5, name="agent", display_name="Agent")

        with pytest.raises(ConflictError):
            service.delete(5)
        user_repo.reassign_role.assert_not_called()

    def test_failure_rolls_back(self, service, role_repo, permission_repo):
        role_repo.get.return_value = Role(id=7, name="stagiaire", display_name="Stagiaire")
        permission_repo.delete_where.side_effect = RuntimeError("db down")

        with pytest.raises(RuntimeError):
            service.delete(7)
        role_repo.rollback.assert_called_once()
        role_repo.delete.assert_not_called()

    def test_unknown_role_is_404(self, service, role_repo):
        role_repo.get.return_value = None

        with pytest.raises(NotFoundError):
            service.delete(99)


class TestCreate:
    def test_duplicate_name_is_conflict(self, service, role_repo):
        role_repo.get_by_name.return_value = Role(id=2, name="direction", display_name="Direction")

        with pytest.raises(ConflictError):
            service.create(RoleCreateIn(name="direction", display_name="Direction"))
        role_repo.create.assert_not_called()
