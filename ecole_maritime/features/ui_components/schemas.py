from typing import Dict, List, Optional
from pydantic import BaseModel, Field as PydField


class UIComponentCreateIn(BaseModel):
    name: str = PydField(..., min_length=1, description="Nom technique, ex: agent_export_excel")
    display_name: str = PydField(..., min_length=1)
    category: str = PydField(..., min_length=1)
    description: Optional[str] = None
    icon: Optional[str] = None


class UIComponentUpdateIn(BaseModel):
    display_name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None


class UIComponentOut(BaseModel):
    id: int
    name: str
    display_name: str
    category: str
    description: str
    icon: str


class UIComponentWithRolesOut(UIComponentOut):
    # role_name -> enabled
    permissions: Dict[str, bool]


class RoleBriefOut(BaseModel):
    id: int
    name: str
    display_name: str
    color: str


class UIComponentsGroupedOut(BaseModel):
    components: Dict[str, List[UIComponentWithRolesOut]]
    roles: List[RoleBriefOut]


class UIComponentPermissionIn(BaseModel):
    role_id: int
    component_id: int
    enabled: bool


class UIComponentPermissionOut(BaseModel):
    id: int
    role_id: int
    component_id: int
    component_name: str
    enabled: bool
