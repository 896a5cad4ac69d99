"""
➡️ But : Configurer la base et gérer les sessions de base de données.

engine : connexion à la base (sqlite:///ecole.db par défaut).

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.
"""

from typing import Dict, Any
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine

# Import all models for creating all tables
from ecole_maritime.db.models.roles import Role
from ecole_maritime.db.models.resources import Resource
from ecole_maritime.db.models.role_permissions import RolePermission
from ecole_maritime.db.models.ui_components import UIComponent, UIComponentPermission
from ecole_maritime.db.models.users import User, UserSession
from ecole_maritime.db.models.agents import Agent
from ecole_maritime.db.models.formateurs import Formateur
from ecole_maritime.db.models.cours import Cours
from ecole_maritime.db.models.formations import Formation
from ecole_maritime.db.models.sessions_formation import SessionFormation
from ecole_maritime.db.models.agent_formations import AgentFormation
from ecole_maritime.db.models.cours_formateurs import CoursFormateur

from ecole_maritime.core.config import settings

def _build_engine() -> Engine:
    url = settings.DATABASE_URL
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")

    connect_args: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False

    # echo seulement en dev pour ne pas polluer les logs en prod
    engine = create_engine(
        url,
        echo=(settings.ENV == "dev"),
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
    )
    return engine

engine: Engine = _build_engine()

def init_db() -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    En prod, préfère des migrations.
    """
    SQLModel.metadata.create_all(engine)


def get_session():
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
