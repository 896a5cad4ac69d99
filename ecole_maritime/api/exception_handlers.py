"""
➡️ But : Convertir toutes les erreurs en réponse JSON {"error": "..."}.

AppError (et sous-classes)  -> status_code de l'erreur
HTTPException               -> son status_code, detail en message
RequestValidationError      -> 400, champs fautifs nommés
IntegrityError              -> 409 si contrainte d'unicité, 400 sinon (NOT NULL, clé étrangère)
Exception                   -> 500 générique, trace dans les logs
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ecole_maritime.core.errors import AppError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _field_name(loc) -> str:
    # ("body", "nom") -> "nom" ; ("query", "role") -> "role"
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header", "cookie")]
    return ".".join(parts) or "body"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s : %s", request.method, request.url.path, exc.message)
    return _error(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = sorted({_field_name(err.get("loc", ())) for err in exc.errors()})
    return _error(status.HTTP_400_BAD_REQUEST, f"Champs invalides ou manquants: {', '.join(fields)}")


def is_unique_violation(exc: IntegrityError) -> bool:
    # Postgres : SQLSTATE 23505 ; SQLite / MySQL : seulement le message du driver
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code:
        return code == "23505"
    message = str(orig).lower()
    return "unique" in message or "duplicate" in message


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    if is_unique_violation(exc):
        logger.info("Conflit d'unicité sur %s %s", request.method, request.url.path)
        return _error(status.HTTP_409_CONFLICT, "Conflit avec une donnée existante")
    logger.warning("Contrainte d'intégrité violée sur %s %s : %s", request.method, request.url.path, exc.orig)
    return _error(status.HTTP_400_BAD_REQUEST, "Données invalides ou référence inexistante")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Erreur non gérée sur %s %s", request.method, request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Erreur serveur")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
