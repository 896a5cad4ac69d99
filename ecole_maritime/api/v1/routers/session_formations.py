from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status

from ecole_maritime.api.v1.dependencies import get_session_formation_service, require_permission
from ecole_maritime.features.sessions.schemas import (
    CalendarEventOut,
    SessionFormationCreateIn,
    SessionFormationDetailOut,
    SessionFormationOut,
    SessionFormationUpdateIn,
)
from ecole_maritime.features.sessions.services import SessionFormationService

router = APIRouter(
    prefix="/session-formations",
    tags=["sessions"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Lister les sessions (statut calculé)",
    response_model=List[SessionFormationOut],
    dependencies=[Depends(require_permission("sessionFormation", "view"))],
)
def list_sessions(
    formation_id: Optional[int] = Query(None),
    date_debut_gte: Optional[datetime] = Query(None, description="Sessions débutant à partir de cette date"),
    offset: int = Query(0, ge=0),
    limit: int = Query(500, ge=1, le=5000),
    svc: SessionFormationService = Depends(get_session_formation_service),
):
    return svc.list(formation_id=formation_id, date_debut_gte=date_debut_gte, offset=offset, limit=limit)


@router.get(
    "/events",
    summary="Sessions au format calendrier (heure locale)",
    response_model=List[CalendarEventOut],
    dependencies=[Depends(require_permission("sessionFormation", "view"))],
)
def list_events(
    formation_id: Optional[int] = Query(None),
    svc: SessionFormationService = Depends(get_session_formation_service),
):
    return svc.events(formation_id=formation_id)


@router.get(
    "/{session_id}",
    summary="Détail d'une session avec ses agents inscrits",
    response_model=SessionFormationDetailOut,
    dependencies=[Depends(require_permission("sessionFormation", "view"))],
)
def get_session_formation(
    session_id: int = Path(..., ge=1),
    svc: SessionFormationService = Depends(get_session_formation_service),
):
    return svc.get(session_id)


@router.post(
    "",
    summary="Programmer une session",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionFormationOut,
    dependencies=[Depends(require_permission("sessionFormation", "create"))],
)
def create_session_formation(
    payload: SessionFormationCreateIn,
    svc: SessionFormationService = Depends(get_session_formation_service),
):
    return svc.create(payload)


@router.put(
    "/{session_id}",
    summary="Mettre à jour une session",
    response_model=SessionFormationOut,
    dependencies=[Depends(require_permission("sessionFormation", "edit"))],
)
def update_session_formation(
    payload: SessionFormationUpdateIn,
    session_id: int = Path(..., ge=1),
    svc: SessionFormationService = Depends(get_session_formation_service),
):
    return svc.update(session_id, payload)


@router.delete(
    "/{session_id}",
    summary="Supprimer une session (les inscriptions sont détachées)",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("sessionFormation", "delete"))],
)
def delete_session_formation(
    session_id: int = Path(..., ge=1),
    svc: SessionFormationService = Depends(get_session_formation_service),
):
    svc.delete(session_id)
    return None
