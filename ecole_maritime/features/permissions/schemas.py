from typing import List, Optional
from pydantic import BaseModel


class RolePermissionUpdateIn(BaseModel):
    """
    Deux modes :
    - bascule d'une action par noms : role_name + resource_name + action
    - liste complète par ids        : role_id + resource_id + actions
    """
    role_name: Optional[str] = None
    resource_name: Optional[str] = None
    action: Optional[str] = None

    role_id: Optional[int] = None
    resource_id: Optional[int] = None
    actions: Optional[List[str]] = None


class RolePermissionOut(BaseModel):
    id: int
    role_id: int
    role_name: str
    resource_id: int
    resource_name: str
    resource_display_name: str
    actions: List[str]


class RolePermissionUpdateOut(BaseModel):
    deleted: bool = False
    permission: Optional[RolePermissionOut] = None
