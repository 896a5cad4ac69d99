from typing import Optional

from sqlmodel import Field

from .base import BaseModelDB


class Formation(BaseModelDB, table=True):
    """Définition d'un programme de formation."""

    formation: str = Field(index=True, description="Intitulé")
    type_formation: str
    specialite: Optional[str] = Field(default=None)
    duree: Optional[str] = Field(default=None)
    capacite_absorption: Optional[int] = Field(default=None)
