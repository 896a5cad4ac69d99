from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status

from ecole_maritime.api.v1.dependencies import get_agent_service, require_permission
from ecole_maritime.features.agents.schemas import AgentCreateIn, AgentOut, AgentUpdateIn
from ecole_maritime.features.agents.services import AgentService

router = APIRouter(
    prefix="/agents",
    tags=["agents"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Lister les agents",
    response_model=List[AgentOut],
    dependencies=[Depends(require_permission("agent", "view"))],
)
def list_agents(
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    categorie: Optional[str] = Query(None),
    q: Optional[str] = Query(None, description="Recherche sur nom/matricule"),
    svc: AgentService = Depends(get_agent_service),
):
    return svc.list(offset=offset, limit=limit, categorie=categorie, q=q)


@router.get(
    "/{agent_id}",
    summary="Détail d'un agent",
    response_model=AgentOut,
    dependencies=[Depends(require_permission("agent", "view"))],
)
def get_agent(
    agent_id: int = Path(..., ge=1),
    svc: AgentService = Depends(get_agent_service),
):
    return svc.get(agent_id)


@router.post(
    "",
    summary="Créer un agent",
    status_code=status.HTTP_201_CREATED,
    response_model=AgentOut,
    dependencies=[Depends(require_permission("agent", "create"))],
)
def create_agent(payload: AgentCreateIn, svc: AgentService = Depends(get_agent_service)):
    return svc.create(payload)


@router.put(
    "/{agent_id}",
    summary="Mettre à jour un agent",
    response_model=AgentOut,
    dependencies=[Depends(require_permission("agent", "edit"))],
)
def update_agent(
    payload: AgentUpdateIn,
    agent_id: int = Path(..., ge=1),
    svc: AgentService = Depends(get_agent_service),
):
    return svc.update(agent_id, payload)


@router.delete(
    "/{agent_id}",
    summary="Supprimer un agent",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("agent", "delete"))],
)
def delete_agent(
    agent_id: int = Path(..., ge=1),
    svc: AgentService = Depends(get_agent_service),
):
    svc.delete(agent_id)
    return None
