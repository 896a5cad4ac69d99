"""
➡️ But : Définir la structure des tables de la base (ORM).

Contient les classes héritant de SQLModel.

Représente les objets persistés. Ici on représente les propriétés communes de toutes les tables.

Chaque champ = une colonne SQL (avec type, index, clé primaire...).
Les horodatages sont en UTC avec fuseau (colonnes DateTime(timezone=True)).
"""

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from datetime import datetime
from typing import Optional

from ecole_maritime.utils.timezone import utc_now

class BaseModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
