"""
➡️ But : Évaluer les droits d'un rôle (API et composants d'interface).

Deux matrices :
- PermissionsMap   : {role: {resource: [actions]}}  -> can()
- UIPermissionsMap : {role: {component: enabled}}   -> can_access_ui_component()

Les évaluateurs sont purs et ne lèvent jamais : toute absence (rôle vide,
matrice manquante, rôle/ressource/action inconnus) vaut refus.
Les loaders lisent la base en une requête ; la mémoïsation se fait sur le
contexte de requête (api/v1/dependencies.py), jamais au niveau module.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from sqlmodel import Session

from ecole_maritime.db.models.roles import Role
from ecole_maritime.db.repositories.role_permissions import RolePermissionRepository
from ecole_maritime.db.repositories.ui_components import UIComponentPermissionRepository

PermissionsMap = Dict[str, Dict[str, List[str]]]
UIPermissionsMap = Dict[str, Dict[str, bool]]


# ==========================================================
# 🔐 Permissions API
# ==========================================================

def can(
    role: Optional[str],
    resource: str,
    action: str,
    matrix: Optional[Mapping[str, Mapping[str, Sequence[str]]]],
) -> bool:
    """True ssi `action` figure dans matrix[role][resource]."""
    if not role or matrix is None:
        return False
    resources = matrix.get(role)
    if not resources:
        return False
    actions = resources.get(resource)
    if not actions:
        return False
    return action in actions


def fold_role_permissions(rows: Iterable[tuple]) -> PermissionsMap:
    """
    Plie des triplets (role_name, resource_name, actions) en matrice.
    Si une même paire apparaît deux fois, la dernière ligne l'emporte.
    """
    matrix: PermissionsMap = {}
    for role_name, resource_name, actions in rows:
        matrix.setdefault(role_name, {})[resource_name] = list(actions or [])
    return matrix


def load_permissions(session: Session) -> PermissionsMap:
    rows = RolePermissionRepository(session).list_with_relations()
    return fold_role_permissions(
        (role.name, resource.name, perm.actions) for perm, role, resource in rows
    )


# ==========================================================
# 🧩 Permissions UI
# ==========================================================

def can_access_ui_component(
    role: Optional[str],
    component: str,
    ui_matrix: Optional[Mapping[str, Mapping[str, bool]]],
) -> bool:
    if not role or ui_matrix is None:
        return False
    components = ui_matrix.get(role)
    if not components:
        return False
    return components.get(component) is True


def can_access_ui_components(
    role: Optional[str],
    names: Iterable[str],
    ui_matrix: Optional[Mapping[str, Mapping[str, bool]]],
) -> Dict[str, bool]:
    return {name: can_access_ui_component(role, name, ui_matrix) for name in names}


def allowed_ui_components(
    role: Optional[str],
    ui_matrix: Optional[Mapping[str, Mapping[str, bool]]],
) -> List[str]:
    """Noms des composants explicitement activés pour le rôle, triés."""
    if not role or ui_matrix is None:
        return []
    return sorted(name for name, enabled in (ui_matrix.get(role) or {}).items() if enabled is True)


def fold_ui_permissions(rows: Iterable[tuple]) -> UIPermissionsMap:
    """(role_name, component_name, enabled) -> matrice ; dernière ligne gagnante."""
    matrix: UIPermissionsMap = {}
    for role_name, component_name, enabled in rows:
        matrix.setdefault(role_name, {})[component_name] = bool(enabled)
    return matrix


def load_ui_permissions(session: Session) -> UIPermissionsMap:
    rows = UIComponentPermissionRepository(session).list_with_relations()
    return fold_ui_permissions(
        (role.name, component.name, perm.enabled) for perm, role, component in rows
    )


# ==========================================================
# 🏷️ Registre des rôles
# ==========================================================

def role_display_name(name: str, roles: Iterable[Role]) -> str:
    for role in roles:
        if role.name == name:
            return role.display_name
    return name


def role_color(name: str, roles: Iterable[Role]) -> str:
    for role in roles:
        if role.name == name:
            return role.color or "gray"
    return "gray"
