from sqlalchemy import BigInteger
from sqlmodel import Field

from .base import BaseModelDB


class Agent(BaseModelDB, table=True):
    """Stagiaire de l'école."""

    nom_prenom: str = Field(index=True)
    grade: str
    matricule: str = Field(index=True, unique=True)
    responsabilite: str = Field(default="")
    telephone: int = Field(default=0, sa_type=BigInteger)
    categorie: str = Field(default="", description="Déduite du grade")
