from typing import List

from fastapi import APIRouter, Depends, Path, Query, status

from ecole_maritime.api.v1.dependencies import get_role_service, require_permission
from ecole_maritime.features.roles.schemas import (
    RoleCreateIn,
    RoleDeleteOut,
    RoleOut,
    RoleUpdateIn,
    RoleWithStatsOut,
)
from ecole_maritime.features.roles.services import RoleService
from ecole_maritime.features.users.schemas import UserOut

router = APIRouter(
    prefix="/roles",
    tags=["admin: roles"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Lister les rôles (nombre d'utilisateurs et permissions lisibles)",
    response_model=List[RoleWithStatsOut],
    dependencies=[Depends(require_permission("role", "view"))],
)
def list_roles(svc: RoleService = Depends(get_role_service)):
    return svc.list()


@router.get(
    "/users",
    summary="Utilisateurs d'un rôle",
    response_model=List[UserOut],
    dependencies=[Depends(require_permission("role", "view"))],
)
def list_role_users(
    role: str = Query(..., min_length=1, description="Nom technique du rôle"),
    svc: RoleService = Depends(get_role_service),
):
    return svc.users_of(role)


@router.get(
    "/{role_id}",
    summary="Détail d'un rôle",
    response_model=RoleOut,
    dependencies=[Depends(require_permission("role", "view"))],
)
def get_role(role_id: int = Path(..., ge=1), svc: RoleService = Depends(get_role_service)):
    return svc.get(role_id)


@router.post(
    "",
    summary="Créer un rôle",
    status_code=status.HTTP_201_CREATED,
    response_model=RoleOut,
    responses={409: {"description": "Nom déjà utilisé"}},
    dependencies=[Depends(require_permission("role", "create"))],
)
def create_role(payload: RoleCreateIn, svc: RoleService = Depends(get_role_service)):
    return svc.create(payload)


@router.put(
    "/{role_id}",
    summary="Mettre à jour un rôle",
    response_model=RoleOut,
    dependencies=[Depends(require_permission("role", "edit"))],
)
def update_role(
    payload: RoleUpdateIn,
    role_id: int = Path(..., ge=1),
    svc: RoleService = Depends(get_role_service),
):
    return svc.update(role_id, payload)


@router.delete(
    "/{role_id}",
    summary="Supprimer un rôle",
    description="Les utilisateurs du rôle sont basculés vers le rôle par défaut avant suppression.",
    response_model=RoleDeleteOut,
    responses={
        403: {"description": "Rôle système"},
        409: {"description": "Rôle par défaut"},
    },
    dependencies=[Depends(require_permission("role", "delete"))],
)
def delete_role(role_id: int = Path(..., ge=1), svc: RoleService = Depends(get_role_service)):
    return svc.delete(role_id)
