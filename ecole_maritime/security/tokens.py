import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TypedDict

from jose import jwt, JWTError

# ==========================================================
# 🔧 Configuration : paramètres de génération/validation JWT
# ==========================================================

@dataclass(frozen=True)
class JWTSettings:
    """
    Configuration des tokens de session JWT.

    - `secret` : clé secrète pour signer/valider les tokens
    - `issuer` : émetteur (utilisé dans le payload)
    - `algorithm` : algo de signature (HS256 recommandé)
    - `session_ttl` : durée de vie fixe d'une session (cookie inclus)
    """
    secret: str
    issuer: str = "ecole-maritime"
    algorithm: str = "HS256"
    session_ttl: timedelta = timedelta(days=7)


# ==========================================================
# 🧱 Types
# ==========================================================

class DecodedToken(TypedDict, total=False):
    iss: str
    sub: str            # identifiant utilisateur
    email: str
    typ: str            # "session"
    jti: str
    iat: int
    exp: int


SESSION_TOKEN_TYPE = "session"


# ==========================================================
# 🧩 Fonctions utilitaires
# ==========================================================

def _now() -> datetime:
    """Renvoie l'heure UTC actuelle."""
    return datetime.now(timezone.utc)

def new_jti() -> str:
    """Crée un identifiant unique pour un token."""
    return str(uuid.uuid4())


# ==========================================================
# 🎟️ Génération
# ==========================================================

def create_session_token(*, user_id: int, email: str, jti: str, settings: JWTSettings) -> str:
    """
    Crée le token de session posé en cookie httpOnly.
    Le JTI est fourni pour être stocké côté serveur (révocation).
    """
    now = _now()
    payload: DecodedToken = {
        "iss": settings.issuer,
        "sub": str(user_id),
        "email": email,
        "typ": SESSION_TOKEN_TYPE,
        "jti": jti,
        "iat": int(now.timestamp()),
        "exp": int((now + settings.session_ttl).timestamp()),
    }
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


# ==========================================================
# 🔍 Décodage / Validation
# ==========================================================

def decode_token(token: str, settings: JWTSettings) -> DecodedToken:
    """
    Décode et valide un token JWT (signature + expiration + émetteur).
    Lève JWTError en cas de signature invalide ou expirée.
    """
    decoded = jwt.decode(
        token,
        settings.secret,
        algorithms=[settings.algorithm],
        issuer=settings.issuer,
        options={"verify_aud": False},
    )
    return decoded  # type: ignore[return-value]


__all__ = [
    "JWTSettings",
    "DecodedToken",
    "JWTError",
    "SESSION_TOKEN_TYPE",
    "new_jti",
    "create_session_token",
    "decode_token",
]
