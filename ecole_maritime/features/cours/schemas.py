from typing import Optional
from datetime import datetime
from pydantic import BaseModel


class CoursIn(BaseModel):
    titre: str


class CoursOut(BaseModel):
    id: int
    titre: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
