from typing import List

from fastapi import APIRouter, Depends, Path, Query, status

from ecole_maritime.api.v1.dependencies import get_formation_service, require_permission
from ecole_maritime.features.formations.schemas import FormationIn, FormationOut
from ecole_maritime.features.formations.services import FormationService

router = APIRouter(
    prefix="/formations",
    tags=["formations"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Lister les formations (par intitulé)",
    response_model=List[FormationOut],
    dependencies=[Depends(require_permission("formation", "view"))],
)
def list_formations(
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    svc: FormationService = Depends(get_formation_service),
):
    return svc.list(offset=offset, limit=limit)


@router.get(
    "/{formation_id}",
    summary="Détail d'une formation",
    response_model=FormationOut,
    dependencies=[Depends(require_permission("formation", "view"))],
)
def get_formation(formation_id: int = Path(..., ge=1), svc: FormationService = Depends(get_formation_service)):
    return svc.get(formation_id)


@router.post(
    "",
    summary="Créer une formation",
    status_code=status.HTTP_201_CREATED,
    response_model=FormationOut,
    dependencies=[Depends(require_permission("formation", "create"))],
)
def create_formation(payload: FormationIn, svc: FormationService = Depends(get_formation_service)):
    return svc.create(payload)


@router.put(
    "/{formation_id}",
    summary="Mettre à jour une formation",
    response_model=FormationOut,
    dependencies=[Depends(require_permission("formation", "edit"))],
)
def update_formation(
    payload: FormationIn,
    formation_id: int = Path(..., ge=1),
    svc: FormationService = Depends(get_formation_service),
):
    return svc.update(formation_id, payload)


@router.delete(
    "/{formation_id}",
    summary="Supprimer une formation (et ses sessions)",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("formation", "delete"))],
)
def delete_formation(formation_id: int = Path(..., ge=1), svc: FormationService = Depends(get_formation_service)):
    svc.delete(formation_id)
    return None
