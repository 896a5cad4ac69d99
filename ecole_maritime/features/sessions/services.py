"""
➡️ But : Sessions de formation (planning).

- Création : dates ramenées à 09:00 / 18:00, début < fin, formation existante.
- Statut recalculé à chaque lecture et écriture (compute_session_status).
- Suppression : les inscriptions sont détachées, pas supprimées.
- Vue calendrier : dates stockées -> heure locale, couleur par type de formation.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from ecole_maritime.core.errors import NotFoundError, ValidationError
from ecole_maritime.db.models.formations import Formation
from ecole_maritime.db.models.sessions_formation import SessionFormation
from ecole_maritime.db.repositories.agent_formations import AgentFormationRepository
from ecole_maritime.db.repositories.formations import FormationRepository
from ecole_maritime.db.repositories.sessions_formation import SessionFormationRepository
from ecole_maritime.features.sessions.schemas import (
    CalendarEventOut,
    SessionFormationCreateIn,
    SessionFormationDetailOut,
    SessionFormationOut,
    SessionFormationUpdateIn,
)
from ecole_maritime.utils.session_status import compute_session_status
from ecole_maritime.utils.timezone import as_utc, convert_utc_to_local, normalize_session_bounds, utc_now

logger = logging.getLogger(__name__)

# type de formation -> couleur d'événement
FORMATION_TYPE_COLORS = {
    "تكوين إختصاص": "sky",
    "تكوين تخصصي": "violet",
    "تكوين مستمر": "emerald",
}
DEFAULT_EVENT_COLOR = "amber"


def event_color(session_formation: SessionFormation, formation: Formation) -> str:
    """Couleur choisie par l'utilisateur, sinon celle du type de formation."""
    if session_formation.color:
        return session_formation.color
    return FORMATION_TYPE_COLORS.get(formation.type_formation, DEFAULT_EVENT_COLOR)


def event_description(session_formation: SessionFormation, formation: Formation, statut: str) -> str:
    parts = []
    if formation.specialite:
        parts.append(f"التخصص: {formation.specialite}")
    parts.append(f"المشاركون: {session_formation.nombre_participants}")
    if session_formation.reference:
        parts.append(f"المرجع: {session_formation.reference}")
    parts.append(f"الوضعية: {statut}")
    return " • ".join(parts)


class SessionFormationService:
    def __init__(
        self,
        repo: SessionFormationRepository,
        formation_repo: FormationRepository,
        enrolment_repo: AgentFormationRepository,
    ):
        self.repo = repo
        self.formation_repo = formation_repo
        self.enrolment_repo = enrolment_repo

    # ---------- HELPERS ----------

    def _formations_by_id(self, ids) -> Dict[int, Formation]:
        out: Dict[int, Formation] = {}
        for formation_id in set(ids):
            formation = self.formation_repo.get(formation_id)
            if formation:
                out[formation_id] = formation
        return out

    @staticmethod
    def _to_out(session_formation: SessionFormation, formation: Optional[Formation]) -> SessionFormationOut:
        return SessionFormationOut(
            id=session_formation.id,
            formation_id=session_formation.formation_id,
            formation_nom=formation.formation if formation else "",
            type_formation=formation.type_formation if formation else "",
            specialite=formation.specialite if formation else None,
            date_debut=session_formation.date_debut,
            date_fin=session_formation.date_fin,
            reference=session_formation.reference,
            statut=compute_session_status(session_formation.date_debut, session_formation.date_fin),
            nombre_participants=session_formation.nombre_participants,
            color=session_formation.color,
            created_at=session_formation.created_at,
            updated_at=session_formation.updated_at,
        )

    def _get_entity(self, session_id: int) -> SessionFormation:
        session_formation = self.repo.get(session_id)
        if not session_formation:
            raise NotFoundError("Session non trouvée")
        return session_formation

    def _require_formation(self, formation_id: int) -> Formation:
        formation = self.formation_repo.get(formation_id)
        if not formation:
            raise NotFoundError("Formation non trouvée")
        return formation

    # ---------- READ ----------

    def list(
        self,
        *,
        formation_id: Optional[int] = None,
        date_debut_gte: Optional[datetime] = None,
        offset: int = 0,
        limit: int = 500,
    ) -> List[SessionFormationOut]:
        rows = self.repo.list_filtered(
            formation_id=formation_id,
            date_debut_gte=as_utc(date_debut_gte) if date_debut_gte else None,
            offset=offset,
            limit=limit,
        )
        formations = self._formations_by_id(r.formation_id for r in rows)
        return [self._to_out(r, formations.get(r.formation_id)) for r in rows]

    def get(self, session_id: int) -> SessionFormationDetailOut:
        session_formation = self._get_entity(session_id)
        formation = self.formation_repo.get(session_formation.formation_id)
        out = self._to_out(session_formation, formation)
        agents = self.enrolment_repo.list_filtered(session_formation_id=session_id)
        return SessionFormationDetailOut(**out.model_dump(), agents=agents)

    def events(self, *, formation_id: Optional[int] = None) -> List[CalendarEventOut]:
        rows = self.repo.list_filtered(formation_id=formation_id, limit=10_000)
        formations = self._formations_by_id(r.formation_id for r in rows)
        events: List[CalendarEventOut] = []
        for r in rows:
            formation = formations.get(r.formation_id)
            if not formation:
                continue
            statut = compute_session_status(r.date_debut, r.date_fin)
            events.append(
                CalendarEventOut(
                    id=r.id,
                    title=formation.formation,
                    description=event_description(r, formation, statut),
                    start=convert_utc_to_local(r.date_debut),
                    end=convert_utc_to_local(r.date_fin),
                    color=event_color(r, formation),
                    location=formation.type_formation or None,
                    formation_id=r.formation_id,
                    nombre_participants=r.nombre_participants,
                    reference=r.reference,
                )
            )
        return events

    # ---------- WRITE ----------

    def create(self, payload: SessionFormationCreateIn) -> SessionFormationOut:
        date_debut, date_fin = normalize_session_bounds(payload.date_debut, payload.date_fin)
        if date_debut >= date_fin:
            raise ValidationError("La date de début doit être antérieure à la date de fin")
        formation = self._require_formation(payload.formation_id)

        session_formation = self.repo.create(
            formation_id=formation.id,
            date_debut=date_debut,
            date_fin=date_fin,
            reference=payload.reference or None,
            statut=compute_session_status(date_debut, date_fin),
            nombre_participants=payload.nombre_participants,
            color=payload.color or None,
        )
        logger.info("Session %s créée pour la formation %s", session_formation.id, formation.id)
        return self._to_out(session_formation, formation)

    def update(self, session_id: int, payload: SessionFormationUpdateIn) -> SessionFormationOut:
        session_formation = self._get_entity(session_id)
        changes = payload.model_dump(exclude_unset=True)

        if changes.get("formation_id") is not None:
            self._require_formation(changes["formation_id"])
        else:
            changes.pop("formation_id", None)

        date_debut = as_utc(changes.get("date_debut") or session_formation.date_debut)
        date_fin = as_utc(changes.get("date_fin") or session_formation.date_fin)
        if date_debut >= date_fin:
            raise ValidationError("La date de début doit être antérieure à la date de fin")
        changes["date_debut"] = date_debut
        changes["date_fin"] = date_fin

        if "reference" in changes:
            changes["reference"] = changes["reference"] or None
        if "color" in changes:
            changes["color"] = changes["color"] or None
        if changes.get("nombre_participants") is None:
            changes.pop("nombre_participants", None)

        changes["statut"] = compute_session_status(date_debut, date_fin)
        self.repo.update(session_formation, updated_at=utc_now(), **changes)
        formation = self.formation_repo.get(session_formation.formation_id)
        return self._to_out(session_formation, formation)

    def delete(self, session_id: int) -> None:
        session_formation = self._get_entity(session_id)
        detached = self.enrolment_repo.detach_session(session_formation.id, commit=False)
        self.repo.delete(session_formation)
        logger.info("Session %s supprimée (%d inscription(s) détachée(s))", session_id, detached)
