from fastapi import APIRouter, Depends, Path, status

from ecole_maritime.api.v1.dependencies import (
    RequestContext,
    get_auth_service,
    get_user_service,
    pagination,
    require_permission,
)
from ecole_maritime.features.authentication.services import AuthService
from ecole_maritime.features.users.schemas import (
    BanIn,
    KillSessionIn,
    KillSessionOut,
    UserCreateIn,
    UserListOut,
    UserOut,
    UserUpdateIn,
)
from ecole_maritime.features.users.services import UserService

router = APIRouter(
    prefix="/users",
    tags=["admin: users"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Lister les utilisateurs",
    response_model=UserListOut,
    dependencies=[Depends(require_permission("user", "list"))],
)
def list_users(
    page=Depends(pagination),
    svc: UserService = Depends(get_user_service),
):
    return svc.list(page["offset"], page["limit"])


@router.post(
    "/kill-session",
    summary="Révoquer toutes les sessions d'un utilisateur",
    response_model=KillSessionOut,
    dependencies=[Depends(require_permission("session", "revoke"))],
)
def kill_session(payload: KillSessionIn, auth_svc: AuthService = Depends(get_auth_service)):
    return KillSessionOut(revoked=auth_svc.kill_sessions(payload.user_id))


@router.get(
    "/{user_id}",
    summary="Détail d'un utilisateur",
    response_model=UserOut,
    dependencies=[Depends(require_permission("user", "list"))],
)
def get_user(user_id: int = Path(..., ge=1), svc: UserService = Depends(get_user_service)):
    return svc.get(user_id)


@router.post(
    "",
    summary="Créer un utilisateur",
    status_code=status.HTTP_201_CREATED,
    response_model=UserOut,
    dependencies=[Depends(require_permission("user", "create"))],
)
def create_user(payload: UserCreateIn, svc: UserService = Depends(get_user_service)):
    return svc.create(payload)


@router.put(
    "/{user_id}",
    summary="Mettre à jour un utilisateur",
    description="Changer le rôle exige en plus la permission user:set-role.",
    response_model=UserOut,
)
def update_user(
    payload: UserUpdateIn,
    user_id: int = Path(..., ge=1),
    ctx: RequestContext = Depends(require_permission("user", "update")),
    svc: UserService = Depends(get_user_service),
):
    return svc.update(user_id, payload, can_set_role=ctx.can("user", "set-role"))


@router.delete(
    "/{user_id}",
    summary="Supprimer un utilisateur",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission("user", "delete"))],
)
def delete_user(user_id: int = Path(..., ge=1), svc: UserService = Depends(get_user_service)):
    svc.delete(user_id)
    return None


@router.post(
    "/{user_id}/ban",
    summary="Bannir un utilisateur (sessions révoquées)",
    response_model=UserOut,
    dependencies=[Depends(require_permission("user", "update"))],
)
def ban_user(
    payload: BanIn,
    user_id: int = Path(..., ge=1),
    svc: UserService = Depends(get_user_service),
):
    return svc.ban(user_id, payload.reason)


@router.post(
    "/{user_id}/unban",
    summary="Lever le bannissement",
    response_model=UserOut,
    dependencies=[Depends(require_permission("user", "update"))],
)
def unban_user(user_id: int = Path(..., ge=1), svc: UserService = Depends(get_user_service)):
    return svc.unban(user_id)
