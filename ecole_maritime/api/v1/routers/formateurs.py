from typing import List

from fastapi import APIRouter, Depends, Path, Query, status

from ecole_maritime.api.v1.dependencies import get_formateur_service, require_permission
from ecole_maritime.features.formateurs.schemas import FormateurIn, FormateurOut
from ecole_maritime.features.formateurs.services import FormateurService

router = APIRouter(
    prefix="/formateurs",
    tags=["formateurs"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Lister les formateurs",
    response_model=List[FormateurOut],
    dependencies=[Depends(require_permission("formateur", "view"))],
)
def list_formateurs(
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    svc: FormateurService = Depends(get_formateur_service),
):
    return svc.list(offset=offset, limit=limit)


@router.get(
    "/{formateur_id}",
    summary="Détail d'un formateur",
    response_model=FormateurOut,
    dependencies=[Depends(require_permission("formateur", "view"))],
)
def get_formateur(formateur_id: int = Path(..., ge=1), svc: FormateurService = Depends(get_formateur_service)):
    return svc.get(formateur_id)


@router.post(
    "",
    summary="Créer un formateur",
    status_code=status.HTTP_201_CREATED,
    response_model=FormateurOut,
    dependencies=[Depends(require_permission("formateur", "create"))],
)
def create_formateur(payload: FormateurIn, svc: FormateurService = Depends(get_formateur_service)):
    return svc.create(payload)


@router.put(
    "/{formateur_id}",
    summary="Mettre à jour un formateur",
    response_model=FormateurOut,
    dependencies=[Depends(require_permission("formateur", "edit"))],
)
def update_formateur(
    payload: FormateurIn,
    formateur_id: int = Path(..., ge=1),
    svc: FormateurService = Depends(get_formateur_service),
):
    return svc.update(formateur_id, payload)


@router.delete(
    "/{formateur_id}",
    summary="Supprimer un formateur",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("formateur", "delete"))],
)
def delete_formateur(formateur_id: int = Path(..., ge=1), svc: FormateurService = Depends(get_formateur_service)):
    svc.delete(formateur_id)
    return None
