from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field as PydField


class RoleCreateIn(BaseModel):
    name: str = PydField(..., min_length=1, description="Nom technique, unique")
    display_name: str = PydField(..., min_length=1)
    description: Optional[str] = None
    color: Optional[str] = None


class RoleUpdateIn(BaseModel):
    display_name: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None


class RoleOut(BaseModel):
    id: int
    name: str
    display_name: str
    description: str
    color: str
    is_system: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RoleWithStatsOut(RoleOut):
    user_count: int
    # "Agents: view", "Formations: edit"...
    permissions: List[str]


class RoleDeleteOut(BaseModel):
    deleted: str
    reassigned_users: int
    reassigned_to: str
