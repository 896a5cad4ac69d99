from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field as PydField


class FormationIn(BaseModel):
    formation: str = PydField(..., description="Intitulé")
    type_formation: str = PydField(..., description="تكوين إختصاص, تكوين تخصصي, تكوين مستمر...")
    specialite: Optional[str] = None
    duree: Optional[str] = None
    capacite_absorption: Optional[int] = PydField(default=None, ge=0)


class FormationOut(BaseModel):
    id: int
    formation: str
    type_formation: str
    specialite: Optional[str]
    duree: Optional[str]
    capacite_absorption: Optional[int]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
