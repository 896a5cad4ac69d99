from typing import Optional

from sqlalchemy import BigInteger
from sqlmodel import Field

from .base import BaseModelDB


class Formateur(BaseModelDB, table=True):
    nom_prenom: str = Field(index=True)
    grade: str = Field(default="")
    unite: str = Field(default="")
    responsabilite: str = Field(default="")
    telephone: int = Field(default=0, sa_type=BigInteger)
    rib: Optional[str] = Field(default=None, unique=True, description="RIB sur 20 chiffres")
