# ecole_maritime/core/errors.py
"""
Erreurs métier levées par les services.

Les routes ne les attrapent pas : les handlers enregistrés dans main.py les
convertissent en réponse JSON {"error": "..."} avec le bon code HTTP.
"""

from fastapi import status


class AppError(Exception):
    """Erreur applicative générique (500 par défaut)."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Erreur serveur"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# --- Validation ---
class ValidationError(AppError):
    """Champ requis manquant ou mal formé"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Requête invalide"


# --- Auth ---
class UnauthenticatedError(AppError):
    """Session absente, invalide, expirée ou révoquée"""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Non authentifié"


class ForbiddenError(AppError):
    """Session valide mais permission insuffisante"""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Accès refusé"


# --- Not found / conflict ---
class NotFoundError(AppError):
    """Entité référencée introuvable"""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Ressource introuvable"


class ConflictError(AppError):
    """Violation d'unicité (doublon)"""
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflit avec une donnée existante"
