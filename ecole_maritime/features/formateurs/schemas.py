from typing import Optional, Union
from datetime import datetime
from pydantic import BaseModel, Field as PydField


class FormateurIn(BaseModel):
    """Création et mise à jour (remplacement complet)."""
    nom_prenom: str = PydField(..., description="الإسم و اللقب")
    grade: Optional[str] = None
    unite: Optional[str] = None
    responsabilite: Optional[str] = None
    telephone: Optional[Union[int, str]] = None
    rib: Optional[str] = PydField(default=None, description="RIB sur 20 caractères")


class FormateurOut(BaseModel):
    id: int
    nom_prenom: str
    grade: str
    unite: str
    responsabilite: str
    telephone: int
    rib: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
