"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_request_context() : session DB + session utilisateur résolue + matrices de droits (lazy).

require_permission("agent", "create") : garde d'une route (401 si non connecté, 403 si refusé).

get_agent_service() : crée un AgentService à partir d'une session DB.

pagination() : paramètres communs page et size.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).
"""

from typing import Callable, Optional
from dataclasses import dataclass, field

from fastapi import Cookie, Depends, Header, Query
from sqlmodel import Session

from ecole_maritime.core.config import settings, jwt_settings
from ecole_maritime.core.errors import ForbiddenError, UnauthenticatedError
from ecole_maritime.db.session import get_session

from ecole_maritime.db.repositories.users import UserRepository
from ecole_maritime.db.repositories.user_sessions import UserSessionRepository
from ecole_maritime.db.repositories.roles import RoleRepository
from ecole_maritime.db.repositories.resources import ResourceRepository
from ecole_maritime.db.repositories.role_permissions import RolePermissionRepository
from ecole_maritime.db.repositories.ui_components import (
    UIComponentPermissionRepository,
    UIComponentRepository,
)
from ecole_maritime.db.repositories.agents import AgentRepository
from ecole_maritime.db.repositories.formateurs import FormateurRepository
from ecole_maritime.db.repositories.cours import CoursRepository
from ecole_maritime.db.repositories.formations import FormationRepository
from ecole_maritime.db.repositories.sessions_formation import SessionFormationRepository
from ecole_maritime.db.repositories.agent_formations import AgentFormationRepository
from ecole_maritime.db.repositories.cours_formateurs import CoursFormateurRepository

from ecole_maritime.features.authentication.schemas import SessionData
from ecole_maritime.features.authentication.services import AuthService, read_session_token
from ecole_maritime.features.users.services import UserService
from ecole_maritime.features.roles.services import RoleService
from ecole_maritime.features.resources.services import ResourceService
from ecole_maritime.features.permissions.services import RolePermissionService
from ecole_maritime.features.ui_components.services import UIComponentService
from ecole_maritime.features.agents.services import AgentService
from ecole_maritime.features.formateurs.services import FormateurService
from ecole_maritime.features.cours.services import CoursService
from ecole_maritime.features.formations.services import FormationService
from ecole_maritime.features.sessions.services import SessionFormationService
from ecole_maritime.features.agent_formations.services import AgentFormationService
from ecole_maritime.features.cours_formateurs.services import CoursFormateurService

from ecole_maritime.security.permissions import (
    PermissionsMap,
    UIPermissionsMap,
    can,
    can_access_ui_component,
    load_permissions,
    load_ui_permissions,
)


def pagination(
    page: int = Query(1, ge=1, description="Numéro de page", examples=[1]),
    size: int = Query(20, ge=1, le=100, description="Taille de page", examples=[20]),
):
    offset = (page - 1) * size
    return {"offset": offset, "limit": size}


# -----------------------------
# Auth
# -----------------------------
def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(
        user_repo=UserRepository(session),
        session_repo=UserSessionRepository(session),
        jwt_settings=jwt_settings,
    )


def get_session_token(
    cookie_token: Optional[str] = Cookie(default=None, alias=settings.AUTH_SESSION_COOKIE_NAME),
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> Optional[str]:
    """Cookie httpOnly en priorité, sinon `Authorization: Bearer` (clients non-navigateur)."""
    return read_session_token(cookie_token, authorization)


# -----------------------------
# Contexte de requête
# -----------------------------
@dataclass
class RequestContext:
    """
    Créé une fois par requête (cache de dépendances FastAPI).
    Les matrices de droits sont chargées au premier accès puis réutilisées
    jusqu'à la fin de la requête.
    """
    session: Session
    auth: SessionData
    _permissions: Optional[PermissionsMap] = field(default=None, repr=False)
    _ui_permissions: Optional[UIPermissionsMap] = field(default=None, repr=False)

    @property
    def role(self) -> Optional[str]:
        return self.auth.role if self.auth.is_auth else None

    @property
    def permissions(self) -> PermissionsMap:
        if self._permissions is None:
            self._permissions = load_permissions(self.session)
        return self._permissions

    @property
    def ui_permissions(self) -> UIPermissionsMap:
        if self._ui_permissions is None:
            self._ui_permissions = load_ui_permissions(self.session)
        return self._ui_permissions

    def can(self, resource: str, action: str) -> bool:
        if not self.auth.is_auth:
            return False
        return can(self.role, resource, action, self.permissions)

    def can_access_ui_component(self, component: str) -> bool:
        if not self.auth.is_auth:
            return False
        return can_access_ui_component(self.role, component, self.ui_permissions)


def get_request_context(
    session: Session = Depends(get_session),
    token: Optional[str] = Depends(get_session_token),
    auth_svc: AuthService = Depends(get_auth_service),
) -> RequestContext:
    return RequestContext(session=session, auth=auth_svc.verify_session(token))


def require_authenticated(ctx: RequestContext = Depends(get_request_context)) -> RequestContext:
    if not ctx.auth.is_auth:
        raise UnauthenticatedError()
    return ctx


def require_permission(resource: str, action: str) -> Callable[..., RequestContext]:
    """
    Garde de route : Depends(require_permission("agent", "create")).
    401 sans session valide, 403 si la matrice ne l'autorise pas.
    """
    def _guard(ctx: RequestContext = Depends(get_request_context)) -> RequestContext:
        if not ctx.auth.is_auth:
            raise UnauthenticatedError()
        if not ctx.can(resource, action):
            raise ForbiddenError(f"Accès refusé : {resource}:{action}")
        return ctx

    _guard.__name__ = f"require_{resource}_{action}".replace("-", "_")
    return _guard


# -----------------------------
# Administration
# -----------------------------
def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(
        repo=UserRepository(session),
        role_repo=RoleRepository(session),
        session_repo=UserSessionRepository(session),
        default_role=settings.DEFAULT_ROLE,
    )


def get_role_service(session: Session = Depends(get_session)) -> RoleService:
    return RoleService(
        repo=RoleRepository(session),
        user_repo=UserRepository(session),
        permission_repo=RolePermissionRepository(session),
        ui_permission_repo=UIComponentPermissionRepository(session),
        default_role=settings.DEFAULT_ROLE,
    )


def get_resource_service(session: Session = Depends(get_session)) -> ResourceService:
    return ResourceService(ResourceRepository(session), RolePermissionRepository(session))


def get_role_permission_service(session: Session = Depends(get_session)) -> RolePermissionService:
    return RolePermissionService(
        repo=RolePermissionRepository(session),
        role_repo=RoleRepository(session),
        resource_repo=ResourceRepository(session),
    )


def get_ui_component_service(session: Session = Depends(get_session)) -> UIComponentService:
    return UIComponentService(
        repo=UIComponentRepository(session),
        permission_repo=UIComponentPermissionRepository(session),
        role_repo=RoleRepository(session),
    )


# -----------------------------
# Métier
# -----------------------------
def get_agent_service(session: Session = Depends(get_session)) -> AgentService:
    return AgentService(AgentRepository(session), AgentFormationRepository(session))


def get_formateur_service(session: Session = Depends(get_session)) -> FormateurService:
    return FormateurService(FormateurRepository(session), CoursFormateurRepository(session))


def get_cours_service(session: Session = Depends(get_session)) -> CoursService:
    return CoursService(CoursRepository(session), CoursFormateurRepository(session))


def get_formation_service(session: Session = Depends(get_session)) -> FormationService:
    return FormationService(
        FormationRepository(session),
        SessionFormationRepository(session),
        AgentFormationRepository(session),
    )


def get_session_formation_service(session: Session = Depends(get_session)) -> SessionFormationService:
    return SessionFormationService(
        SessionFormationRepository(session),
        FormationRepository(session),
        AgentFormationRepository(session),
    )


def get_agent_formation_service(session: Session = Depends(get_session)) -> AgentFormationService:
    return AgentFormationService(
        AgentFormationRepository(session),
        AgentRepository(session),
        SessionFormationRepository(session),
    )


def get_cours_formateur_service(session: Session = Depends(get_session)) -> CoursFormateurService:
    return CoursFormateurService(
        CoursFormateurRepository(session),
        FormateurRepository(session),
        CoursRepository(session),
    )


# -----------------------------
# Client
# -----------------------------
@dataclass
class ClientContext:
    ip: Optional[str]
    user_agent: Optional[str]


def get_client_ip_and_ua(
    x_forwarded_for: Optional[str] = Header(default=None, alias="X-Forwarded-For"),
    x_real_ip: Optional[str] = Header(default=None, alias="X-Real-IP"),
    user_agent: Optional[str] = Header(default=None, alias="User-Agent"),
) -> ClientContext:
    """
    Récupère l'IP depuis X-Forwarded-For > X-Real-IP (si derrière un proxy),
    et le User-Agent (audit des sessions).
    """
    ip = None
    if x_forwarded_for:
        ip = x_forwarded_for.split(",")[0].strip()
    elif x_real_ip:
        ip = x_real_ip.strip()
    return ClientContext(ip=ip, user_agent=user_agent)
