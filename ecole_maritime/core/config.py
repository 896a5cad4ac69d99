"""
➡️ But : Centraliser tous les paramètres configurables (nom d'app, chemin DB, secrets, cookie de session...)

Utilise pydantic-settings pour charger automatiquement les variables d'environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from ecole_maritime.core.config import settings
print(settings.APP_NAME)
"""

from datetime import timedelta
from typing import List, Optional

from pydantic_settings import BaseSettings
from ecole_maritime.security.tokens import JWTSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Ecole-Maritime"
    ENV: str = "dev"  # dev | prod | test
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "ecole.db"  # fichier SQLite
    # Si tu veux forcer une URL différente (ex: Postgres), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None

    # -----------------------------
    # JWT / Session
    # -----------------------------
    JWT_SECRET_KEY: str = "CHANGE_ME"     # ⚠️ change en prod
    JWT_ISSUER: str = "ecole-maritime"
    JWT_ALGORITHM: str = "HS256"

    SESSION_TTL_DAYS: int = 7             # durée de vie fixe de la session

    # Cookie de session
    AUTH_SESSION_COOKIE_NAME: str = "session_token"
    AUTH_COOKIE_SAMESITE: str = "lax"     # "lax" | "strict" | "none"
    AUTH_COOKIE_PATH: str = "/"
    AUTH_COOKIE_SECURE: Optional[bool] = None   # auto selon ENV si None
    AUTH_COOKIE_MAX_AGE: Optional[int] = None   # auto depuis SESSION_TTL si None

    # -----------------------------
    # Métier
    # -----------------------------
    DEFAULT_ROLE: str = "agent"
    TIMEZONE_OFFSET_HOURS: int = 1        # GMT+1

    # -----------------------------
    # Seed (compte administrateur initial)
    # -----------------------------
    SEED_ADMIN_EMAIL: str = "admin@ecole-maritime.local"
    SEED_ADMIN_NAME: str = "Administrateur"
    SEED_ADMIN_PASSWORD: str = "ChangeMe123!"   # ⚠️ change en prod

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")

        # Cookie secure auto: true en prod si non spécifié
        if self.AUTH_COOKIE_SECURE is None:
            object.__setattr__(self, "AUTH_COOKIE_SECURE", self.ENV == "prod")

        # max_age auto depuis SESSION_TTL
        if self.AUTH_COOKIE_MAX_AGE is None:
            max_age = self.SESSION_TTL_DAYS * 24 * 60 * 60
            object.__setattr__(self, "AUTH_COOKIE_MAX_AGE", max_age)


# Instance globale importable partout
settings = Settings()

# Objet JWT prêt à l'emploi pour les services
jwt_settings = JWTSettings(
    secret=settings.JWT_SECRET_KEY,
    issuer=settings.JWT_ISSUER,
    algorithm=settings.JWT_ALGORITHM,
    session_ttl=timedelta(days=settings.SESSION_TTL_DAYS),
)
