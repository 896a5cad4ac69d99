from typing import List

from fastapi import APIRouter, Depends, Path, Query, status

from ecole_maritime.api.v1.dependencies import get_ui_component_service, require_permission
from ecole_maritime.features.ui_components.schemas import (
    UIComponentCreateIn,
    UIComponentOut,
    UIComponentPermissionIn,
    UIComponentPermissionOut,
    UIComponentsGroupedOut,
    UIComponentUpdateIn,
)
from ecole_maritime.features.ui_components.services import UIComponentService

router = APIRouter(
    prefix="/ui-components",
    tags=["admin: ui-components"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Composants par catégorie, avec leur état par rôle",
    response_model=UIComponentsGroupedOut,
    dependencies=[Depends(require_permission("uiComponent", "view"))],
)
def list_components(svc: UIComponentService = Depends(get_ui_component_service)):
    return svc.list_grouped()


# -----------------------------
# Permissions (déclarées avant /{component_id})
# -----------------------------
@router.get(
    "/permissions",
    summary="Permissions UI d'un rôle",
    response_model=List[UIComponentPermissionOut],
    dependencies=[Depends(require_permission("uiComponentPermission", "view"))],
)
def list_permissions(
    role_id: int = Query(..., ge=1),
    svc: UIComponentService = Depends(get_ui_component_service),
):
    return svc.permissions_for_role(role_id)


@router.put(
    "/permissions",
    summary="Activer/désactiver un composant pour un rôle",
    response_model=UIComponentPermissionOut,
    dependencies=[Depends(require_permission("uiComponentPermission", "update"))],
)
def set_permission(
    payload: UIComponentPermissionIn,
    svc: UIComponentService = Depends(get_ui_component_service),
):
    return svc.set_permission(payload)


# -----------------------------
# CRUD composants
# -----------------------------
@router.get(
    "/{component_id}",
    summary="Détail d'un composant",
    response_model=UIComponentOut,
    dependencies=[Depends(require_permission("uiComponent", "view"))],
)
def get_component(component_id: int = Path(..., ge=1), svc: UIComponentService = Depends(get_ui_component_service)):
    return svc.get(component_id)


@router.post(
    "",
    summary="Créer un composant",
    status_code=status.HTTP_201_CREATED,
    response_model=UIComponentOut,
    dependencies=[Depends(require_permission("uiComponent", "create"))],
)
def create_component(payload: UIComponentCreateIn, svc: UIComponentService = Depends(get_ui_component_service)):
    return svc.create(payload)


@router.put(
    "/{component_id}",
    summary="Mettre à jour un composant",
    response_model=UIComponentOut,
    dependencies=[Depends(require_permission("uiComponent", "edit"))],
)
def update_component(
    payload: UIComponentUpdateIn,
    component_id: int = Path(..., ge=1),
    svc: UIComponentService = Depends(get_ui_component_service),
):
    return svc.update(component_id, payload)


@router.delete(
    "/{component_id}",
    summary="Supprimer un composant et ses permissions",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("uiComponent", "delete"))],
)
def delete_component(component_id: int = Path(..., ge=1), svc: UIComponentService = Depends(get_ui_component_service)):
    svc.delete(component_id)
    return None
