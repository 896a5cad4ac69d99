"""
➡️ But : Gestion des comptes (administration).

UserService : vérifie l'existence du rôle, l'unicité de l'email, et
protège le changement de rôle derrière une permission dédiée.
"""

import logging
from typing import Optional

from ecole_maritime.core.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from ecole_maritime.db.models.users import User
from ecole_maritime.db.repositories.roles import RoleRepository
from ecole_maritime.db.repositories.user_sessions import UserSessionRepository
from ecole_maritime.db.repositories.users import UserRepository
from ecole_maritime.features.users.schemas import UserCreateIn, UserUpdateIn
from ecole_maritime.security.password import hash_password
from ecole_maritime.utils.timezone import utc_now

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    email = email.strip().lower()
    if "@" not in email:
        raise ValidationError("Adresse email invalide")
    return email


class UserService:
    def __init__(
        self,
        *,
        repo: UserRepository,
        role_repo: RoleRepository,
        session_repo: UserSessionRepository,
        default_role: str,
    ):
        self.repo = repo
        self.role_repo = role_repo
        self.session_repo = session_repo
        self.default_role = default_role

    def list(self, offset: int, limit: int):
        items = self.repo.list_newest(offset, limit)
        total = self.repo.count()
        return {"items": items, "total": total}

    def get(self, user_id: int) -> User:
        user = self.repo.get(user_id)
        if not user:
            raise NotFoundError("Utilisateur introuvable")
        return user

    def _require_role(self, role: str) -> str:
        if not self.role_repo.get_by_name(role):
            raise ValidationError(f"Rôle inconnu: {role}")
        return role

    def create(self, payload: UserCreateIn) -> User:
        email = _normalize_email(payload.email)
        name = payload.name.strip()
        if not name:
            raise ValidationError("Le nom est requis")
        if self.repo.get_by_email(email):
            raise ConflictError("Un utilisateur avec cet email existe déjà")
        role = self._require_role(payload.role or self.default_role)

        user = self.repo.create(
            email=email,
            name=name,
            role=role,
            hashed_password=hash_password(payload.password),
        )
        logger.info("Utilisateur %s créé avec le rôle %s", user.id, role)
        return user

    def update(self, user_id: int, payload: UserUpdateIn, *, can_set_role: bool = False) -> User:
        user = self.get(user_id)
        changes = {}
        if payload.email is not None:
            email = _normalize_email(payload.email)
            existing = self.repo.get_by_email(email)
            if existing and existing.id != user.id:
                raise ConflictError("Un utilisateur avec cet email existe déjà")
            changes["email"] = email
        if payload.name is not None:
            if not payload.name.strip():
                raise ValidationError("Le nom ne peut pas être vide")
            changes["name"] = payload.name.strip()
        if payload.password is not None:
            changes["hashed_password"] = hash_password(payload.password)
        if payload.email_verified is not None:
            changes["email_verified"] = payload.email_verified
        if payload.role is not None and payload.role != user.role:
            if not can_set_role:
                raise ForbiddenError("Permission requise : user:set-role")
            changes["role"] = self._require_role(payload.role)
            logger.info("Rôle de l'utilisateur %s : %s -> %s", user.id, user.role, payload.role)

        changes["updated_at"] = utc_now()
        return self.repo.update(user, **changes)

    def delete(self, user_id: int) -> None:
        user = self.get(user_id)
        self.session_repo.delete_where(user_id=user.id, commit=False)
        self.repo.delete(user)
        logger.info("Utilisateur %s supprimé", user_id)

    # ---------- Bannissement ----------

    def ban(self, user_id: int, reason: Optional[str] = None) -> User:
        user = self.get(user_id)
        user = self.repo.update(user, banned=True, ban_reason=reason, updated_at=utc_now())
        revoked = self.session_repo.revoke_all_for_user(user.id)
        logger.info("Utilisateur %s banni (%d session(s) révoquée(s))", user.id, revoked)
        return user

    def unban(self, user_id: int) -> User:
        user = self.get(user_id)
        return self.repo.update(user, banned=False, ban_reason=None, updated_at=utc_now())
