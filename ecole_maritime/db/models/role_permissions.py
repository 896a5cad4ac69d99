from typing import List

from sqlalchemy import Column, JSON, UniqueConstraint
from sqlmodel import Field

from .base import BaseModelDB


class RolePermission(BaseModelDB, table=True):
    """(Role, Resource) -> actions permises. Absence de ligne = aucune permission."""

    __table_args__ = (UniqueConstraint("role_id", "resource_id", name="uq_role_resource"),)

    role_id: int = Field(index=True, foreign_key="role.id")
    resource_id: int = Field(index=True, foreign_key="resource.id")
    actions: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
