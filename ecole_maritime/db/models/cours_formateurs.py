from typing import Optional

from sqlmodel import Field

from .base import BaseModelDB


class CoursFormateur(BaseModelDB, table=True):
    """Affectation d'un cours à un formateur sur une période."""

    formateur_id: int = Field(index=True, foreign_key="formateur.id")
    cours_id: int = Field(index=True, foreign_key="cours.id")
    date_debut: str
    date_fin: str
    nombre_heures: float
    reference: Optional[str] = Field(default=None)
