from typing import List

from fastapi import APIRouter, Depends

from ecole_maritime.api.v1.dependencies import get_role_permission_service, require_permission
from ecole_maritime.features.permissions.schemas import (
    RolePermissionOut,
    RolePermissionUpdateIn,
    RolePermissionUpdateOut,
)
from ecole_maritime.features.permissions.services import RolePermissionService

router = APIRouter(
    prefix="/role-permissions",
    tags=["admin: permissions"],
)


@router.get(
    "",
    summary="Matrice des permissions (une ligne par couple rôle/ressource)",
    response_model=List[RolePermissionOut],
    dependencies=[Depends(require_permission("rolePermission", "view"))],
)
def list_role_permissions(svc: RolePermissionService = Depends(get_role_permission_service)):
    return svc.list()


@router.put(
    "",
    summary="Modifier une permission",
    description=(
        "Bascule d'une action : `role_name`, `resource_name`, `action`.\n\n"
        "Liste complète : `role_id`, `resource_id`, `actions`.\n\n"
        "Une liste vide supprime la ligne."
    ),
    response_model=RolePermissionUpdateOut,
    dependencies=[Depends(require_permission("rolePermission", "update"))],
)
def update_role_permission(
    payload: RolePermissionUpdateIn,
    svc: RolePermissionService = Depends(get_role_permission_service),
):
    return svc.update(payload)
