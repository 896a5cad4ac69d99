from typing import List

from fastapi import APIRouter, Depends, Path, status

from ecole_maritime.api.v1.dependencies import get_resource_service, require_permission
from ecole_maritime.features.resources.schemas import ResourceCreateIn, ResourceOut, ResourceUpdateIn
from ecole_maritime.features.resources.services import ResourceService

router = APIRouter(
    prefix="/resources",
    tags=["admin: resources"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Lister les ressources soumises aux permissions",
    response_model=List[ResourceOut],
    dependencies=[Depends(require_permission("resource", "view"))],
)
def list_resources(svc: ResourceService = Depends(get_resource_service)):
    return svc.list()


@router.get(
    "/{resource_id}",
    summary="Détail d'une ressource",
    response_model=ResourceOut,
    dependencies=[Depends(require_permission("resource", "view"))],
)
def get_resource(resource_id: int = Path(..., ge=1), svc: ResourceService = Depends(get_resource_service)):
    return svc.get(resource_id)


@router.post(
    "",
    summary="Créer une ressource",
    status_code=status.HTTP_201_CREATED,
    response_model=ResourceOut,
    responses={409: {"description": "Nom déjà utilisé"}},
    dependencies=[Depends(require_permission("resource", "create"))],
)
def create_resource(payload: ResourceCreateIn, svc: ResourceService = Depends(get_resource_service)):
    return svc.create(payload)


@router.put(
    "/{resource_id}",
    summary="Mettre à jour une ressource",
    description="Les actions retirées du vocabulaire sont aussi retirées des permissions de rôle.",
    response_model=ResourceOut,
    dependencies=[Depends(require_permission("resource", "edit"))],
)
def update_resource(
    payload: ResourceUpdateIn,
    resource_id: int = Path(..., ge=1),
    svc: ResourceService = Depends(get_resource_service),
):
    return svc.update(resource_id, payload)


@router.delete(
    "/{resource_id}",
    summary="Supprimer une ressource et ses permissions",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("resource", "delete"))],
)
def delete_resource(resource_id: int = Path(..., ge=1), svc: ResourceService = Depends(get_resource_service)):
    svc.delete(resource_id)
    return None
