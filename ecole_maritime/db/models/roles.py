from sqlmodel import Field

from .base import BaseModelDB


class Role(BaseModelDB, table=True):
    """Rôle applicatif (administrateur, direction, coordinateur, formateur, agent...)."""

    name: str = Field(index=True, unique=True, description="Nom technique, clé du rôle")
    display_name: str = Field(description="Nom affiché")
    description: str = Field(default="")
    color: str = Field(default="gray", description="Couleur du badge")
    is_system: bool = Field(default=False, description="Rôle protégé contre la suppression")
