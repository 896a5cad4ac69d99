from dataclasses import dataclass
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

# ---------- Inputs ----------

class SignInIn(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=128)


# ---------- Session résolue ----------

@dataclass(frozen=True)
class SessionData:
    """
    Résultat de la vérification d'une session.
    is_auth=False : pas de session valide (cookie absent, token illisible,
    expiré, révoqué, utilisateur inconnu ou banni).
    """
    is_auth: bool
    user_id: Optional[int] = None
    email: Optional[str] = None
    role: Optional[str] = None

    @classmethod
    def anonymous(cls) -> "SessionData":
        return cls(is_auth=False)


# ---------- Outputs ----------

class SignInOut(BaseModel):
    session_token: str
    expires_in: int  # secondes
    user_id: int
    email: str
    role: str


class MeOut(BaseModel):
    id: int
    email: str
    name: str
    role: str
    role_display_name: str
    role_color: str


class MyPermissionsOut(BaseModel):
    role: str
    permissions: Dict[str, List[str]]
    ui_components: List[str]
