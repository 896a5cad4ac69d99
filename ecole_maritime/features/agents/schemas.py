from typing import Optional, Union
from datetime import datetime
from pydantic import BaseModel, Field as PydField


# ---------- IN / UPDATE ----------

class AgentCreateIn(BaseModel):
    nom: str = PydField(..., min_length=1, description="Nom")
    prenom: str = PydField(..., min_length=1, description="Prénom")
    grade: str = PydField(..., min_length=1)
    matricule: str = PydField(..., min_length=1, description="Numéro d'inscription, unique")
    responsabilite: Optional[str] = None
    # accepte "98 123 456" ou 98123456
    telephone: Optional[Union[int, str]] = None


class AgentUpdateIn(BaseModel):
    nom_prenom: str = PydField(..., min_length=1)
    grade: str = PydField(..., min_length=1)
    matricule: str = PydField(..., min_length=1)
    responsabilite: Optional[str] = None
    telephone: Optional[Union[int, str]] = None


# ---------- OUT ----------

class AgentOut(BaseModel):
    id: int
    nom_prenom: str
    grade: str
    matricule: str
    responsabilite: str
    telephone: int
    categorie: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
