from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from ecole_maritime.api.v1.dependencies import (
    RequestContext,
    get_auth_service,
    get_client_ip_and_ua,
    get_session_token,
    require_authenticated,
)
from ecole_maritime.core.config import settings
from ecole_maritime.db.session import get_session
from ecole_maritime.db.repositories.roles import RoleRepository
from ecole_maritime.features.authentication.schemas import MeOut, MyPermissionsOut, SignInIn, SignInOut
from ecole_maritime.features.authentication.services import AuthService
from ecole_maritime.security.permissions import allowed_ui_components, role_color, role_display_name

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={404: {"description": "Not Found"}},
)

me_router = APIRouter(prefix="/me", tags=["auth"])


# -----------------------------
# Sign-in
# -----------------------------
@router.post(
    "/sign-in",
    summary="Se connecter",
    description="Pose le cookie de session httpOnly ; le token est aussi renvoyé pour les clients non-navigateur.",
    response_model=SignInOut,
)
def sign_in(
    payload: SignInIn,
    response: Response,
    svc: AuthService = Depends(get_auth_service),
    client_ctx=Depends(get_client_ip_and_ua),
):
    out = svc.sign_in(payload, ip=client_ctx.ip, user_agent=client_ctx.user_agent)
    response.set_cookie(
        key=settings.AUTH_SESSION_COOKIE_NAME,
        value=out.session_token,
        httponly=True,
        samesite=settings.AUTH_COOKIE_SAMESITE,
        secure=settings.AUTH_COOKIE_SECURE,
        max_age=settings.AUTH_COOKIE_MAX_AGE,
        path=settings.AUTH_COOKIE_PATH,
    )
    return out


# -----------------------------
# Sign-out
# -----------------------------
@router.post(
    "/sign-out",
    summary="Se déconnecter (révocation de la session)",
    status_code=status.HTTP_204_NO_CONTENT,
)
def sign_out(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    svc: AuthService = Depends(get_auth_service),
):
    svc.sign_out(token)
    response.delete_cookie(key=settings.AUTH_SESSION_COOKIE_NAME, path=settings.AUTH_COOKIE_PATH)
    return None


# -----------------------------
# Me (profil courant)
# -----------------------------
@router.get(
    "/me",
    summary="Récupérer l'utilisateur courant",
    response_model=MeOut,
    responses={401: {"description": "Session absente, invalide ou expirée"}},
)
def me(
    token: Optional[str] = Depends(get_session_token),
    svc: AuthService = Depends(get_auth_service),
    session: Session = Depends(get_session),
):
    user = svc.get_current_user(token)
    roles = RoleRepository(session).list_ordered()
    return MeOut(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        role_display_name=role_display_name(user.role, roles),
        role_color=role_color(user.role, roles),
    )


@me_router.get(
    "/permissions",
    summary="Droits de l'utilisateur courant (API et composants UI)",
    response_model=MyPermissionsOut,
)
def my_permissions(ctx: RequestContext = Depends(require_authenticated)):
    role = ctx.role
    return MyPermissionsOut(
        role=role,
        permissions=ctx.permissions.get(role, {}),
        ui_components=allowed_ui_components(role, ctx.ui_permissions),
    )
