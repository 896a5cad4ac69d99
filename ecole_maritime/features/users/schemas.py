"""
➡️ But : Formats d'entrée/sortie de l'API pour les comptes utilisateurs.

Le hash du mot de passe n'est jamais exposé (UserOut).
"""

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field as PydField


class UserCreateIn(BaseModel):
    email: str = PydField(..., min_length=3, max_length=255)
    name: str = PydField(..., min_length=1)
    password: str = PydField(..., min_length=8, max_length=128)
    role: Optional[str] = PydField(default=None, description="Rôle par défaut si absent")


class UserUpdateIn(BaseModel):
    email: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = PydField(default=None, min_length=8, max_length=128)
    email_verified: Optional[bool] = None
    # exige en plus user:set-role
    role: Optional[str] = None


class BanIn(BaseModel):
    reason: Optional[str] = None


class KillSessionIn(BaseModel):
    user_id: int


class KillSessionOut(BaseModel):
    revoked: int


class UserOut(BaseModel):
    id: int
    email: str
    name: str
    role: str
    email_verified: bool
    banned: bool
    ban_reason: Optional[str] = None
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserListOut(BaseModel):
    items: List[UserOut]
    total: int
