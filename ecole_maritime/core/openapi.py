"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) complète le schéma généré par FastAPI avec les
conventions de l'API (auth par cookie, format des erreurs, fuseau horaire).
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "Back-office de l'école maritime : agents, formateurs, cours, formations, "
            "sessions et matrice de permissions par rôle.\n\n"
            "### Conventions\n"
            "- Authentification : cookie httpOnly `session_token` posé par `/auth/sign-in`.\n"
            "- Erreurs : corps JSON `{\"error\": \"...\"}` (400, 401, 403, 404, 409, 500).\n"
            "- Les dates de session sont stockées en UTC \"heure murale\" (GMT+1 compensé).\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
