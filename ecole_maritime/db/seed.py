"""
➡️ But : Charger les données initiales depuis seed_data.yaml.

Chaque seed_* est rejouable : création si absent, mise à jour sinon
(clé = name). Les colonnes JSON reçoivent toujours de nouveaux objets.
Exception : seed_ui_permissions ne crée que les lignes absentes, les bascules
faites depuis /ui-components/permissions sont conservées.
"""

from pathlib import Path
from typing import Any, Dict, List

import yaml
from sqlmodel import Session

from ecole_maritime.db.repositories.roles import RoleRepository
from ecole_maritime.db.repositories.resources import ResourceRepository
from ecole_maritime.db.repositories.role_permissions import RolePermissionRepository
from ecole_maritime.db.repositories.ui_components import (
    UIComponentPermissionRepository,
    UIComponentRepository,
)
from ecole_maritime.db.repositories.users import UserRepository
from ecole_maritime.security.password import hash_password
from ecole_maritime.utils.timezone import utc_now

SEED_PATH = Path(__file__).with_name("seed_data.yaml")
ALL = "*"


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path = SEED_PATH) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Seed Roles
# -----------------------------
def seed_roles(session: Session, data: Dict[str, Any]) -> None:
    repo = RoleRepository(session)
    roles: List[Dict[str, Any]] = data.get("roles", [])
    if not roles:
        print("⚠️ Aucun rôle dans le YAML (clé 'roles').")
        return

    for r in roles:
        fields = {
            "display_name": r["display_name"],
            "description": r.get("description", ""),
            "color": r.get("color", "gray"),
            "is_system": bool(r.get("is_system", False)),
        }
        existing = repo.get_by_name(r["name"])
        if existing:
            repo.update(existing, updated_at=utc_now(), commit=False, **fields)
        else:
            repo.create(name=r["name"], commit=False, **fields)
    session.commit()
    print(f"✅ {len(roles)} rôles créés ou mis à jour.")


# -----------------------------
# Seed Resources
# -----------------------------
def seed_resources(session: Session, data: Dict[str, Any]) -> None:
    repo = ResourceRepository(session)
    resources: List[Dict[str, Any]] = data.get("resources", [])
    for r in resources:
        fields = {
            "display_name": r["display_name"],
            "description": r.get("description", ""),
            "actions": list(r.get("actions", [])),
            "action_labels": dict(r.get("action_labels", {})),
        }
        existing = repo.get_by_name(r["name"])
        if existing:
            repo.update(existing, updated_at=utc_now(), commit=False, **fields)
        else:
            repo.create(name=r["name"], commit=False, **fields)
    session.commit()
    print(f"✅ {len(resources)} ressources créées ou mises à jour.")


# -----------------------------
# Seed Role permissions
# -----------------------------
def seed_role_permissions(session: Session, data: Dict[str, Any]) -> None:
    role_repo = RoleRepository(session)
    resource_repo = ResourceRepository(session)
    perm_repo = RolePermissionRepository(session)
    resources = {r.name: r for r in resource_repo.list_ordered()}

    count = 0
    for role_name, grants in (data.get("role_permissions") or {}).items():
        role = role_repo.get_by_name(role_name)
        if not role:
            print(f"⚠️ Rôle inconnu (ignoré): {role_name}")
            continue

        if grants.get(ALL) == ALL:
            grants = {name: ALL for name in resources}

        for resource_name, actions in grants.items():
            resource = resources.get(resource_name)
            if not resource:
                print(f"⚠️ Ressource inconnue (ignorée): {resource_name}")
                continue
            allowed = list(resource.actions) if actions == ALL else [a for a in actions if a in resource.actions]
            existing = perm_repo.get_for_pair(role.id, resource.id)
            if existing:
                perm_repo.update(existing, actions=allowed, updated_at=utc_now(), commit=False)
            else:
                perm_repo.create(role_id=role.id, resource_id=resource.id, actions=allowed, commit=False)
            count += 1
    session.commit()
    print(f"✅ {count} permissions de rôle créées ou mises à jour.")


# -----------------------------
# Seed UI components (+ permissions)
# -----------------------------
def seed_ui_components(session: Session, data: Dict[str, Any]) -> None:
    repo = UIComponentRepository(session)
    components: List[Dict[str, Any]] = data.get("ui_components", [])
    for c in components:
        fields = {
            "display_name": c["display_name"],
            "category": c["category"],
            "description": c.get("description", ""),
            "icon": c.get("icon", "Square"),
        }
        existing = repo.get_by_name(c["name"])
        if existing:
            repo.update(existing, updated_at=utc_now(), commit=False, **fields)
        else:
            repo.create(name=c["name"], commit=False, **fields)
    session.commit()
    print(f"✅ {len(components)} composants UI créés ou mis à jour.")


def seed_ui_permissions(session: Session, data: Dict[str, Any]) -> None:
    role_repo = RoleRepository(session)
    perm_repo = UIComponentPermissionRepository(session)
    components = {c.name: c for c in UIComponentRepository(session).list_ordered()}

    count = 0
    for role_name, names in (data.get("ui_permissions") or {}).items():
        role = role_repo.get_by_name(role_name)
        if not role:
            print(f"⚠️ Rôle inconnu (ignoré): {role_name}")
            continue
        for name in (list(components) if names == ALL else names):
            component = components.get(name)
            if not component:
                print(f"⚠️ Composant inconnu (ignoré): {name}")
                continue
            # une ligne existante reflète un choix d'admin : on n'y touche pas
            if perm_repo.get_for_pair(role.id, component.id):
                continue
            perm_repo.create(role_id=role.id, component_id=component.id, enabled=True, commit=False)
            count += 1
    session.commit()
    print(f"✅ {count} permissions UI créées.")


# -----------------------------
# Seed Admin
# -----------------------------
def seed_admin(session: Session, *, email: str, name: str, password: str, role: str = "administrateur") -> None:
    repo = UserRepository(session)
    if repo.get_by_email(email):
        print(f"ℹ️ Le compte {email} existe déjà, aucune insertion effectuée.")
        return
    repo.create(
        email=email,
        name=name,
        role=role,
        hashed_password=hash_password(password),
        email_verified=True,
    )
    print(f"✅ Compte administrateur {email} créé.")


def seed_all(session: Session, *, seed_path: str | Path = SEED_PATH, admin: Dict[str, str] | None = None) -> None:
    data = load_seed_yaml(seed_path)
    seed_roles(session, data)
    seed_resources(session, data)
    seed_role_permissions(session, data)
    seed_ui_components(session, data)
    seed_ui_permissions(session, data)
    if admin:
        seed_admin(session, **admin)
