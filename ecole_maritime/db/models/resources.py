from typing import Dict, List

from sqlalchemy import Column, JSON
from sqlmodel import Field

from .base import BaseModelDB


class Resource(BaseModelDB, table=True):
    """Catégorie métier soumise aux permissions (agent, formation, user...)."""

    name: str = Field(index=True, unique=True)
    display_name: str
    description: str = Field(default="")

    # Vocabulaire ordonné des actions autorisables et leurs libellés
    actions: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    action_labels: Dict[str, str] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
