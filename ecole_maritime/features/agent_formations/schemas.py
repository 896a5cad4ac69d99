from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field as PydField


# ---------- IN / UPDATE ----------

class AgentFormationCreateIn(BaseModel):
    agent_id: int
    session_formation_id: int = PydField(..., description="La formation est déduite de la session")
    date_debut: Optional[str] = PydField(default=None, description="YYYY-MM-DD, défaut : début de la session")
    date_fin: Optional[str] = PydField(default=None, description="YYYY-MM-DD, défaut : fin de la session")
    reference: Optional[str] = None
    resultat: Optional[str] = None
    moyenne: Optional[float] = PydField(default=None, ge=0, le=20)


class AgentFormationUpdateIn(BaseModel):
    """Mise à jour partielle : seuls les champs fournis sont modifiés."""
    date_debut: Optional[str] = None
    date_fin: Optional[str] = None
    reference: Optional[str] = None
    resultat: Optional[str] = None
    moyenne: Optional[float] = PydField(default=None, ge=0, le=20)


# ---------- OUT ----------

class AgentFormationOut(BaseModel):
    id: int
    agent_id: int
    formation_id: int
    session_formation_id: Optional[int]
    date_debut: str
    date_fin: str
    reference: Optional[str]
    resultat: Optional[str]
    moyenne: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AgentFormationJoinOut(AgentFormationOut):
    agent_nom_prenom: str
    agent_grade: str
    agent_matricule: str
    formation_nom: str


class ResultatOptionOut(BaseModel):
    value: str
    label: str
    variant: str
