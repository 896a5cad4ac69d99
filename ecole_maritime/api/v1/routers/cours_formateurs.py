from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status

from ecole_maritime.api.v1.dependencies import get_cours_formateur_service, require_permission
from ecole_maritime.features.cours_formateurs.schemas import (
    CoursFormateurCreateIn,
    CoursFormateurJoinOut,
    CoursFormateurUpdateIn,
)
from ecole_maritime.features.cours_formateurs.services import CoursFormateurService

router = APIRouter(
    prefix="/cours-formateurs",
    tags=["cours-formateurs"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Lister les affectations cours/formateur",
    response_model=List[CoursFormateurJoinOut],
    dependencies=[Depends(require_permission("coursFormateur", "view"))],
)
def list_cours_formateurs(
    formateur_id: Optional[int] = Query(None),
    cours_id: Optional[int] = Query(None),
    offset: int = Query(0, ge=0),
    limit: int = Query(500, ge=1, le=5000),
    svc: CoursFormateurService = Depends(get_cours_formateur_service),
):
    return svc.list(formateur_id=formateur_id, cours_id=cours_id, offset=offset, limit=limit)


@router.get(
    "/{assignment_id}",
    summary="Détail d'une affectation",
    response_model=CoursFormateurJoinOut,
    dependencies=[Depends(require_permission("coursFormateur", "view"))],
)
def get_cours_formateur(
    assignment_id: int = Path(..., ge=1),
    svc: CoursFormateurService = Depends(get_cours_formateur_service),
):
    return svc.get(assignment_id)


@router.post(
    "",
    summary="Affecter un cours à un formateur",
    status_code=status.HTTP_201_CREATED,
    response_model=CoursFormateurJoinOut,
    dependencies=[Depends(require_permission("coursFormateur", "create"))],
)
def create_cours_formateur(
    payload: CoursFormateurCreateIn,
    svc: CoursFormateurService = Depends(get_cours_formateur_service),
):
    return svc.create(payload)


@router.put(
    "/{assignment_id}",
    summary="Mettre à jour une affectation",
    response_model=CoursFormateurJoinOut,
    dependencies=[Depends(require_permission("coursFormateur", "edit"))],
)
def update_cours_formateur(
    payload: CoursFormateurUpdateIn,
    assignment_id: int = Path(..., ge=1),
    svc: CoursFormateurService = Depends(get_cours_formateur_service),
):
    return svc.update(assignment_id, payload)


@router.delete(
    "/{assignment_id}",
    summary="Supprimer une affectation",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("coursFormateur", "delete"))],
)
def delete_cours_formateur(
    assignment_id: int = Path(..., ge=1),
    svc: CoursFormateurService = Depends(get_cours_formateur_service),
):
    svc.delete(assignment_id)
    return None
