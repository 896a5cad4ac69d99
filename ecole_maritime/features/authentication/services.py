import logging
from datetime import datetime
from typing import Callable, Optional

from ecole_maritime.core.errors import NotFoundError, UnauthenticatedError
from ecole_maritime.db.models.users import User
from ecole_maritime.db.repositories.users import UserRepository
from ecole_maritime.db.repositories.user_sessions import UserSessionRepository
from ecole_maritime.security.password import verify_password
from ecole_maritime.security.tokens import (
    JWTError,
    JWTSettings,
    SESSION_TOKEN_TYPE,
    create_session_token,
    decode_token,
    new_jti,
)
from ecole_maritime.features.authentication.schemas import SessionData, SignInIn, SignInOut
from ecole_maritime.utils.timezone import as_utc, utc_now

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service d'authentification : orchestre les repositories + tokens de session.
    Ne contient pas d'accès SQL direct et lève des erreurs métier propres.
    """

    def __init__(
        self,
        *,
        user_repo: UserRepository,
        session_repo: UserSessionRepository,
        jwt_settings: JWTSettings,
        now_fn: Callable[[], datetime] = utc_now,
    ):
        self.user_repo = user_repo
        self.session_repo = session_repo
        self.jwt = jwt_settings
        self.now_fn = now_fn

    # ---------- Sign in ----------
    def sign_in(self, payload: SignInIn, *, ip: Optional[str] = None, user_agent: Optional[str] = None) -> SignInOut:
        email = payload.email.strip().lower()
        user = self.user_repo.get_by_email(email)
        if not user or not verify_password(payload.password, user.hashed_password):
            # Ne pas révéler si l'utilisateur existe
            logger.info("Échec de connexion pour %s", email)
            raise UnauthenticatedError("Identifiants invalides")
        if user.banned:
            logger.info("Connexion refusée (compte banni) pour %s", email)
            raise UnauthenticatedError("Compte suspendu")

        now = self.now_fn()
        jti = new_jti()
        token = create_session_token(user_id=user.id, email=user.email, jti=jti, settings=self.jwt)

        # Persist session (révocable)
        self.session_repo.create(
            jti=jti,
            user_id=user.id,
            expires_at=now + self.jwt.session_ttl,
            user_agent=user_agent,
            ip=ip,
            commit=False,
        )
        self.user_repo.update(user, last_login=now, updated_at=now)
        logger.info("Connexion de l'utilisateur %s", user.id)

        return SignInOut(
            session_token=token,
            expires_in=int(self.jwt.session_ttl.total_seconds()),
            user_id=user.id,
            email=user.email,
            role=user.role,
        )

    # ---------- Sign out ----------
    def sign_out(self, token: Optional[str]) -> None:
        if not token:
            return
        try:
            decoded = decode_token(token, self.jwt)
        except JWTError:
            # Déconnexion idempotente : silencieux si token illisible
            return
        jti = decoded.get("jti")
        if jti:
            self.session_repo.revoke(jti)

    # ---------- Vérification ----------
    def _resolve(self, token: Optional[str]) -> Optional[User]:
        if not token:
            return None
        try:
            decoded = decode_token(token, self.jwt)
        except JWTError:
            return None
        if decoded.get("typ") != SESSION_TOKEN_TYPE:
            return None
        jti = decoded.get("jti")
        sub = decoded.get("sub")
        if not jti or not sub or not str(sub).isdigit():
            return None

        rec = self.session_repo.get_by_jti(jti)
        if not rec or rec.revoked_at is not None or as_utc(rec.expires_at) <= self.now_fn():
            return None

        user = self.user_repo.get(int(sub))
        if not user or user.banned or user.id != rec.user_id:
            return None
        return user

    def verify_session(self, token: Optional[str]) -> SessionData:
        """Ne lève jamais : une session invalide donne is_auth=False."""
        user = self._resolve(token)
        if not user:
            return SessionData.anonymous()
        return SessionData(is_auth=True, user_id=user.id, email=user.email, role=user.role)

    def get_current_user(self, token: Optional[str]) -> User:
        user = self._resolve(token)
        if not user:
            raise UnauthenticatedError()
        return user

    # ---------- Révocation ----------
    def kill_sessions(self, user_id: int) -> int:
        """Révoque toutes les sessions actives d'un utilisateur ; retourne leur nombre."""
        if not self.user_repo.get(user_id):
            raise NotFoundError("Utilisateur introuvable")
        count = self.session_repo.revoke_all_for_user(user_id)
        logger.info("%d session(s) révoquée(s) pour l'utilisateur %s", count, user_id)
        return count


def read_session_token(cookie_value: Optional[str], authorization: Optional[str]) -> Optional[str]:
    """Cookie de session en priorité, sinon en-tête `Authorization: Bearer`."""
    if cookie_value:
        return cookie_value
    if authorization:
        scheme, _, value = authorization.partition(" ")
        if scheme.lower() == "bearer" and value.strip():
            return value.strip()
    return None
