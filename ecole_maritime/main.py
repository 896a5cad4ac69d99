"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l'instance FastAPI (app).

Configure :

logs (niveau LOG_LEVEL)

CORS (autorisations de qui peut appeler ces API)

gestion des erreurs (corps {"error": "..."})

schéma OpenAPI personnalisé

Inclut les routers (ex : /api/v1/agents).

Initialise la base SQLite au démarrage (@app.on_event("startup")).

Point unique d'exécution : uvicorn ecole_maritime.main:app --reload.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ecole_maritime.core.config import settings
from ecole_maritime.core.logging import configure_logging
from ecole_maritime.core.openapi import custom_openapi
from ecole_maritime.db.session import init_db
from ecole_maritime.api.exception_handlers import register_exception_handlers

from ecole_maritime.api.v1.routers import (
    authentication,
    agents,
    formateurs,
    cours,
    formations,
    session_formations,
    agent_formations,
    cours_formateurs,
    resources,
    roles,
    role_permissions,
    ui_components,
    users,
)

import uvicorn

configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    openapi_tags=[
        {"name": "auth", "description": "Connexion, session courante et droits"},
        {"name": "agents", "description": "Stagiaires de l'école"},
        {"name": "formateurs", "description": "Formateurs"},
        {"name": "cours", "description": "Catalogue des cours"},
        {"name": "formations", "description": "Programmes de formation"},
        {"name": "sessions", "description": "Planning des sessions de formation"},
        {"name": "agent-formations", "description": "Inscriptions et résultats"},
        {"name": "session-agents", "description": "Agents inscrits par session"},
        {"name": "cours-formateurs", "description": "Affectations cours/formateur"},
        {"name": "admin: users", "description": "Comptes utilisateurs"},
        {"name": "admin: roles", "description": "Rôles"},
        {"name": "admin: resources", "description": "Ressources soumises aux permissions"},
        {"name": "admin: permissions", "description": "Matrice rôle/ressource/actions"},
        {"name": "admin: ui-components", "description": "Composants d'interface par rôle"},
    ],
)

# CORS : cookies de session => origines explicites en prod
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

register_exception_handlers(app)

# Routers
app.include_router(authentication.router, prefix="/api/v1")
app.include_router(authentication.me_router, prefix="/api/v1")
app.include_router(agents.router, prefix="/api/v1")
app.include_router(formateurs.router, prefix="/api/v1")
app.include_router(cours.router, prefix="/api/v1")
app.include_router(formations.router, prefix="/api/v1")
app.include_router(session_formations.router, prefix="/api/v1")
app.include_router(agent_formations.router, prefix="/api/v1")
app.include_router(agent_formations.session_agents_router, prefix="/api/v1")
app.include_router(cours_formateurs.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")
app.include_router(roles.router, prefix="/api/v1")
app.include_router(resources.router, prefix="/api/v1")
app.include_router(role_permissions.router, prefix="/api/v1")
app.include_router(ui_components.router, prefix="/api/v1")

# Génération du schéma OpenAPI custom
app.openapi = lambda: custom_openapi(app)

# Démarrage
@app.on_event("startup")
def on_startup():
    init_db()

if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8080, reload=(settings.ENV == "dev")) # http://localhost:8080
