from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from .base import BaseModelDB


class SessionFormation(BaseModelDB, table=True):
    """Occurrence planifiée d'une formation."""

    formation_id: int = Field(index=True, foreign_key="formation.id")
    date_debut: datetime = Field(index=True, sa_type=DateTime(timezone=True))
    date_fin: datetime = Field(sa_type=DateTime(timezone=True))
    reference: Optional[str] = Field(default=None)
    statut: str = Field(default="")
    nombre_participants: int = Field(default=0)
    color: Optional[str] = Field(default=None)
