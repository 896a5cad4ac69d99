"""
Compensation du fuseau de l'école (GMT+1 par défaut).

Les dates de session sont saisies en "heure murale" locale et stockées en UTC
décalé pour que l'heure affichée reste celle saisie.

Tous les horodatages écrits en base sont en UTC avec fuseau (utc_now, as_utc).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from ecole_maritime.core.config import settings


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Date ramenée en UTC avec fuseau ; une date sans fuseau est lue comme UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _offset(hours: Optional[int]) -> timedelta:
    return timedelta(hours=settings.TIMEZONE_OFFSET_HOURS if hours is None else hours)


def to_utc_preserving_time(dt: datetime, *, offset_hours: Optional[int] = None) -> datetime:
    """Valeur à enregistrer : heure saisie + décalage."""
    return dt + _offset(offset_hours)


def convert_utc_to_local(dt: datetime, *, offset_hours: Optional[int] = None) -> datetime:
    """Valeur à afficher : heure stockée - décalage, en heure murale (sans fuseau)."""
    return (as_utc(dt) - _offset(offset_hours)).replace(tzinfo=None)


def normalize_session_bounds(date_debut: datetime, date_fin: datetime) -> tuple[datetime, datetime]:
    """Début de session à 09:00, fin à 18:00 (UTC), en gardant le jour saisi."""
    debut = date_debut.replace(hour=9, minute=0, second=0, microsecond=0, tzinfo=timezone.utc)
    fin = date_fin.replace(hour=18, minute=0, second=0, microsecond=0, tzinfo=timezone.utc)
    return debut, fin
