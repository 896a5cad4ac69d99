from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field as PydField

from ecole_maritime.features.agent_formations.schemas import AgentFormationJoinOut


# ---------- IN / UPDATE ----------

class SessionFormationCreateIn(BaseModel):
    formation_id: int
    date_debut: datetime = PydField(..., description="Jour de début (ramené à 09:00)")
    date_fin: datetime = PydField(..., description="Jour de fin (ramené à 18:00)")
    reference: Optional[str] = None
    nombre_participants: int = PydField(default=0, ge=0)
    color: Optional[str] = None


class SessionFormationUpdateIn(BaseModel):
    formation_id: Optional[int] = None
    date_debut: Optional[datetime] = None
    date_fin: Optional[datetime] = None
    reference: Optional[str] = None
    nombre_participants: Optional[int] = PydField(default=None, ge=0)
    color: Optional[str] = None


# ---------- OUT ----------

class SessionFormationOut(BaseModel):
    id: int
    formation_id: int
    formation_nom: str
    type_formation: str
    specialite: Optional[str] = None
    date_debut: datetime
    date_fin: datetime
    reference: Optional[str]
    statut: str
    nombre_participants: int
    color: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SessionFormationDetailOut(SessionFormationOut):
    agents: List[AgentFormationJoinOut] = []


class CalendarEventOut(BaseModel):
    """Session vue par le calendrier (dates en heure locale)."""
    id: int
    title: str
    description: str
    start: datetime
    end: datetime
    all_day: bool = False
    color: str
    location: Optional[str] = None
    formation_id: int
    nombre_participants: int
    reference: Optional[str] = None
