from typing import Dict, List, Optional
from datetime import datetime
from pydantic import BaseModel, Field as PydField


class ResourceCreateIn(BaseModel):
    name: str = PydField(..., min_length=1, description="Nom technique, ex: sessionFormation")
    display_name: str = PydField(..., min_length=1)
    description: Optional[str] = None
    actions: List[str] = PydField(default_factory=list, description="Vocabulaire ordonné des actions")
    action_labels: Dict[str, str] = PydField(default_factory=dict)


class ResourceUpdateIn(BaseModel):
    display_name: Optional[str] = None
    description: Optional[str] = None
    actions: Optional[List[str]] = None
    action_labels: Optional[Dict[str, str]] = None


class ResourceOut(BaseModel):
    id: int
    name: str
    display_name: str
    description: str
    actions: List[str]
    action_labels: Dict[str, str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
