# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from ecole_maritime.main import app
from ecole_maritime.db.session import get_session
from ecole_maritime.db.seed import seed_all
from ecole_maritime.db.repositories.users import UserRepository
from ecole_maritime.security.password import hash_password

PASSWORD = "motdepasse-123"


@pytest.fixture
def password() -> str:
    return PASSWORD


# ===================================================================
#  Base SQLite en mémoire (une connexion partagée par test)
# ===================================================================

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def seeded(session):
    """Rôles, ressources, matrice de permissions et composants UI du YAML de seed."""
    seed_all(session)
    return session


@pytest.fixture
def client(engine):
    def _get_session_override():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = _get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()


# ===================================================================
#  Utilisateurs et connexion
# ===================================================================

@pytest.fixture
def make_user(seeded):
    def _make(email: str, role: str, *, banned: bool = False):
        return UserRepository(seeded).create(
            email=email,
            name=email.split("@")[0],
            role=role,
            hashed_password=hash_password(PASSWORD),
            banned=banned,
        )
    return _make


@pytest.fixture
def login(client):
    """Connecte un utilisateur et retourne les en-têtes Bearer correspondants."""
    def _login(email: str, password: str = PASSWORD) -> dict:
        res = client.post("/api/v1/auth/sign-in", json={"email": email, "password": password})
        assert res.status_code == 200, res.text
        # le cookie posé par sign-in serait prioritaire sur l'en-tête
        client.cookies.clear()
        return {"Authorization": f"Bearer {res.json()['session_token']}"}
    return _login


@pytest.fixture
def admin_headers(make_user, login):
    make_user("admin@ecole.tn", "administrateur")
    return login("admin@ecole.tn")
