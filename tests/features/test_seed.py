# tests/features/test_seed.py
from ecole_maritime.db.repositories.resources import ResourceRepository
from ecole_maritime.db.repositories.roles import RoleRepository
from ecole_maritime.db.repositories.ui_components import UIComponentPermissionRepository, UIComponentRepository
from ecole_maritime.db.repositories.users import UserRepository
from ecole_maritime.db.seed import load_seed_yaml, seed_all
from ecole_maritime.security.permissions import can, load_permissions, load_ui_permissions


def test_seed_is_idempotent(session):
    seed_all(session)
    seed_all(session)

    roles = RoleRepository(session).list_ordered()
    assert sorted(r.name for r in roles) == ["administrateur", "agent", "coordinateur", "direction", "formateur"]
    assert len(ResourceRepository(session).list_ordered()) == len(load_seed_yaml()["resources"])


def test_administrateur_gets_every_declared_action(seeded):
    matrix = load_permissions(seeded)

    for resource in ResourceRepository(seeded).list_ordered():
        for action in resource.actions:
            assert can("administrateur", resource.name, action, matrix)


def test_seeded_ui_matrix(seeded):
    ui = load_ui_permissions(seeded)

    assert ui["administrateur"]["agent_import_data"] is True
    assert "agent_import_data" not in ui.get("agent", {})


def test_admin_account_created_once(session):
    admin = {"email": "root@ecole.tn", "name": "Root", "password": "secret-123"}

    seed_all(session, admin=admin)
    seed_all(session, admin=admin)

    user = UserRepository(session).get_by_email("root@ecole.tn")
    assert user.role == "administrateur"
    assert UserRepository(session).count() == 1


def test_reseed_keeps_disabled_ui_toggle(seeded):
    role = RoleRepository(seeded).get_by_name("coordinateur")
    component = UIComponentRepository(seeded).get_by_name("agent_export_excel")
    perm_repo = UIComponentPermissionRepository(seeded)
    perm_repo.update(perm_repo.get_for_pair(role.id, component.id), enabled=False)

    seed_all(seeded)

    assert perm_repo.get_for_pair(role.id, component.id).enabled is False
    assert load_ui_permissions(seeded)["coordinateur"]["agent_export_excel"] is False
