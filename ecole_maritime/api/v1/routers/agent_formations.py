"""
Deux points d'entrée sur les inscriptions :
- /agent-formations : vue par agent (agentFormation:*)
- /session-agents   : vue par session (sessionAgent:*)
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status

from ecole_maritime.api.v1.dependencies import get_agent_formation_service, require_permission
from ecole_maritime.features.agent_formations.schemas import (
    AgentFormationCreateIn,
    AgentFormationJoinOut,
    AgentFormationUpdateIn,
    ResultatOptionOut,
)
from ecole_maritime.features.agent_formations.services import AgentFormationService
from ecole_maritime.utils.resultats import selectable_resultat_options

router = APIRouter(
    prefix="/agent-formations",
    tags=["agent-formations"],
    responses={404: {"description": "Not Found"}},
)

session_agents_router = APIRouter(
    prefix="/session-agents",
    tags=["session-agents"],
    responses={404: {"description": "Not Found"}},
)


# -----------------------------
# /agent-formations
# -----------------------------
@router.get(
    "",
    summary="Lister les inscriptions",
    response_model=List[AgentFormationJoinOut],
    dependencies=[Depends(require_permission("agentFormation", "view"))],
)
def list_agent_formations(
    agent_id: Optional[int] = Query(None),
    offset: int = Query(0, ge=0),
    limit: int = Query(500, ge=1, le=5000),
    svc: AgentFormationService = Depends(get_agent_formation_service),
):
    return svc.list(agent_id=agent_id, offset=offset, limit=limit)


@router.get(
    "/resultats",
    summary="Résultats sélectionnables",
    response_model=List[ResultatOptionOut],
    dependencies=[Depends(require_permission("agentFormation", "view"))],
)
def list_resultats():
    return selectable_resultat_options()


@router.get(
    "/{enrolment_id}",
    summary="Détail d'une inscription",
    response_model=AgentFormationJoinOut,
    dependencies=[Depends(require_permission("agentFormation", "view"))],
)
def get_agent_formation(
    enrolment_id: int = Path(..., ge=1),
    svc: AgentFormationService = Depends(get_agent_formation_service),
):
    return svc.get(enrolment_id)


@router.post(
    "",
    summary="Inscrire un agent à une session",
    status_code=status.HTTP_201_CREATED,
    response_model=AgentFormationJoinOut,
    dependencies=[Depends(require_permission("agentFormation", "create"))],
)
def create_agent_formation(
    payload: AgentFormationCreateIn,
    svc: AgentFormationService = Depends(get_agent_formation_service),
):
    return svc.create(payload)


@router.put(
    "/{enrolment_id}",
    summary="Mettre à jour une inscription (résultat, moyenne...)",
    response_model=AgentFormationJoinOut,
    dependencies=[Depends(require_permission("agentFormation", "edit"))],
)
def update_agent_formation(
    payload: AgentFormationUpdateIn,
    enrolment_id: int = Path(..., ge=1),
    svc: AgentFormationService = Depends(get_agent_formation_service),
):
    return svc.update(enrolment_id, payload)


@router.delete(
    "/{enrolment_id}",
    summary="Supprimer une inscription",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("agentFormation", "delete"))],
)
def delete_agent_formation(
    enrolment_id: int = Path(..., ge=1),
    svc: AgentFormationService = Depends(get_agent_formation_service),
):
    svc.delete(enrolment_id)
    return None


# -----------------------------
# /session-agents
# -----------------------------
@session_agents_router.get(
    "",
    summary="Agents inscrits à une session",
    response_model=List[AgentFormationJoinOut],
    dependencies=[Depends(require_permission("sessionAgent", "view"))],
)
def list_session_agents(
    session_formation_id: Optional[int] = Query(None),
    svc: AgentFormationService = Depends(get_agent_formation_service),
):
    return svc.list(session_formation_id=session_formation_id)


@session_agents_router.get(
    "/{enrolment_id}",
    summary="Détail d'un agent inscrit",
    response_model=AgentFormationJoinOut,
    dependencies=[Depends(require_permission("sessionAgent", "view"))],
)
def get_session_agent(
    enrolment_id: int = Path(..., ge=1),
    svc: AgentFormationService = Depends(get_agent_formation_service),
):
    return svc.get(enrolment_id)


@session_agents_router.post(
    "",
    summary="Ajouter un agent à une session",
    status_code=status.HTTP_201_CREATED,
    response_model=AgentFormationJoinOut,
    dependencies=[Depends(require_permission("sessionAgent", "create"))],
)
def add_session_agent(
    payload: AgentFormationCreateIn,
    svc: AgentFormationService = Depends(get_agent_formation_service),
):
    return svc.create(payload)


@session_agents_router.put(
    "/{enrolment_id}",
    summary="Mettre à jour la formation d'un agent inscrit",
    response_model=AgentFormationJoinOut,
    dependencies=[Depends(require_permission("sessionAgent", "edit"))],
)
def update_session_agent(
    payload: AgentFormationUpdateIn,
    enrolment_id: int = Path(..., ge=1),
    svc: AgentFormationService = Depends(get_agent_formation_service),
):
    return svc.update(enrolment_id, payload)


@session_agents_router.delete(
    "/{enrolment_id}",
    summary="Retirer un agent d'une session",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("sessionAgent", "delete"))],
)
def remove_session_agent(
    enrolment_id: int = Path(..., ge=1),
    svc: AgentFormationService = Depends(get_agent_formation_service),
):
    svc.delete(enrolment_id)
    return None
