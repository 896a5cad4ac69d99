from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from .base import BaseModelDB


class UIComponent(BaseModelDB, table=True):
    """Contrôle d'interface activable indépendamment par rôle (bouton export, vue calendrier...)."""

    name: str = Field(index=True, unique=True, description="Nom technique, ex: agent_export_excel")
    display_name: str
    category: str = Field(index=True, description="Page/section : Agents, Formations, Sessions...")
    description: str = Field(default="")
    icon: str = Field(default="Square")


class UIComponentPermission(BaseModelDB, table=True):
    """(Role, UIComponent) -> enabled. Absence de ligne = désactivé."""

    __table_args__ = (UniqueConstraint("role_id", "component_id", name="uq_role_component"),)

    role_id: int = Field(index=True, foreign_key="role.id")
    component_id: int = Field(index=True, foreign_key="uicomponent.id")
    enabled: bool = Field(default=False)
