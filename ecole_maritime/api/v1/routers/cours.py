from typing import List

from fastapi import APIRouter, Depends, Path, Query, status

from ecole_maritime.api.v1.dependencies import get_cours_service, require_permission
from ecole_maritime.features.cours.schemas import CoursIn, CoursOut
from ecole_maritime.features.cours.services import CoursService

router = APIRouter(
    prefix="/cours",
    tags=["cours"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Lister les cours",
    response_model=List[CoursOut],
    dependencies=[Depends(require_permission("cours", "view"))],
)
def list_cours(
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    svc: CoursService = Depends(get_cours_service),
):
    return svc.list(offset=offset, limit=limit)


@router.get(
    "/{cours_id}",
    summary="Détail d'un cours",
    response_model=CoursOut,
    dependencies=[Depends(require_permission("cours", "view"))],
)
def get_cours(cours_id: int = Path(..., ge=1), svc: CoursService = Depends(get_cours_service)):
    return svc.get(cours_id)


@router.post(
    "",
    summary="Créer un cours",
    status_code=status.HTTP_201_CREATED,
    response_model=CoursOut,
    dependencies=[Depends(require_permission("cours", "create"))],
)
def create_cours(payload: CoursIn, svc: CoursService = Depends(get_cours_service)):
    return svc.create(payload)


@router.put(
    "/{cours_id}",
    summary="Renommer un cours",
    response_model=CoursOut,
    dependencies=[Depends(require_permission("cours", "edit"))],
)
def update_cours(payload: CoursIn, cours_id: int = Path(..., ge=1), svc: CoursService = Depends(get_cours_service)):
    return svc.update(cours_id, payload)


@router.delete(
    "/{cours_id}",
    summary="Supprimer un cours",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("cours", "delete"))],
)
def delete_cours(cours_id: int = Path(..., ge=1), svc: CoursService = Depends(get_cours_service)):
    svc.delete(cours_id)
    return None
