from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field as PydField


class CoursFormateurCreateIn(BaseModel):
    formateur_id: int
    cours_id: int
    date_debut: str
    date_fin: str
    nombre_heures: float = PydField(..., gt=0, allow_inf_nan=False, description="Strictement positif")
    reference: Optional[str] = None


class CoursFormateurUpdateIn(BaseModel):
    formateur_id: Optional[int] = None
    cours_id: Optional[int] = None
    date_debut: Optional[str] = None
    date_fin: Optional[str] = None
    nombre_heures: Optional[float] = PydField(default=None, gt=0, allow_inf_nan=False)
    reference: Optional[str] = None


class CoursFormateurJoinOut(BaseModel):
    id: int
    formateur_id: int
    formateur_nom_prenom: str
    cours_id: int
    cours_titre: str
    date_debut: str
    date_fin: str
    nombre_heures: float
    reference: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
