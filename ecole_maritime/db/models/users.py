"""
➡️ But : Tables liées aux utilisateurs : comptes et sessions de connexion.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from .base import BaseModelDB


class User(BaseModelDB, table=True):
    email: str = Field(index=True, unique=True)
    name: str
    role: str = Field(default="agent", index=True, foreign_key="role.name")
    hashed_password: str

    email_verified: bool = Field(default=False)
    banned: bool = Field(default=False)
    ban_reason: Optional[str] = Field(default=None)
    last_login: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))


class UserSession(BaseModelDB, table=True):
    """Session de connexion révocable (le JTI du token posé en cookie)."""

    jti: str = Field(index=True, unique=True)
    user_id: int = Field(index=True, foreign_key="user.id")
    expires_at: datetime = Field(sa_type=DateTime(timezone=True))
    revoked_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    ip: Optional[str] = Field(default=None)
    user_agent: Optional[str] = Field(default=None)
