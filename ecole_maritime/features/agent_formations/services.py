"""
➡️ But : Inscriptions des agents aux sessions de formation.

Règles :
- la session doit exister ; la formation est celle de la session
- un agent n'est inscrit qu'une fois à une même session (409 sinon)
- dates par défaut = dates de la session (YYYY-MM-DD)
- résultat : une valeur du vocabulaire RESULTAT_OPTIONS
"""

import logging
from typing import List, Optional

from ecole_maritime.core.errors import ConflictError, NotFoundError, ValidationError
from ecole_maritime.db.models.agent_formations import AgentFormation
from ecole_maritime.db.repositories.agent_formations import AgentFormationRepository
from ecole_maritime.db.repositories.agents import AgentRepository
from ecole_maritime.db.repositories.sessions_formation import SessionFormationRepository
from ecole_maritime.features.agent_formations.schemas import (
    AgentFormationCreateIn,
    AgentFormationJoinOut,
    AgentFormationUpdateIn,
)
from ecole_maritime.utils.resultats import is_known_resultat
from ecole_maritime.utils.timezone import utc_now

logger = logging.getLogger(__name__)


def _check_resultat(resultat: Optional[str]) -> Optional[str]:
    if resultat is None:
        return None
    if not is_known_resultat(resultat):
        raise ValidationError(f"Résultat inconnu: {resultat}")
    return resultat.strip()


class AgentFormationService:
    def __init__(
        self,
        repo: AgentFormationRepository,
        agent_repo: AgentRepository,
        session_repo: SessionFormationRepository,
    ):
        self.repo = repo
        self.agent_repo = agent_repo
        self.session_repo = session_repo

    # ---------- READ ----------

    def list(
        self,
        *,
        agent_id: Optional[int] = None,
        session_formation_id: Optional[int] = None,
        offset: int = 0,
        limit: int = 500,
    ) -> List[AgentFormationJoinOut]:
        return self.repo.list_filtered(
            agent_id=agent_id,
            session_formation_id=session_formation_id,
            offset=offset,
            limit=limit,
        )

    def get(self, enrolment_id: int) -> AgentFormationJoinOut:
        out = self.repo.get_join_out(enrolment_id)
        if not out:
            raise NotFoundError("Inscription introuvable")
        return out

    def _get_entity(self, enrolment_id: int) -> AgentFormation:
        entity = self.repo.get(enrolment_id)
        if not entity:
            raise NotFoundError("Inscription introuvable")
        return entity

    # ---------- WRITE ----------

    def create(self, payload: AgentFormationCreateIn) -> AgentFormationJoinOut:
        session_formation = self.session_repo.get(payload.session_formation_id)
        if not session_formation:
            raise NotFoundError("Session non trouvée")
        if not self.agent_repo.get(payload.agent_id):
            raise NotFoundError("Agent non trouvé")
        if self.repo.get_enrollment(payload.agent_id, session_formation.id):
            raise ConflictError("العون مسجل بالفعل في هذه الدورة")

        entity = self.repo.create(
            agent_id=payload.agent_id,
            formation_id=session_formation.formation_id,
            session_formation_id=session_formation.id,
            date_debut=payload.date_debut or session_formation.date_debut.strftime("%Y-%m-%d"),
            date_fin=payload.date_fin or session_formation.date_fin.strftime("%Y-%m-%d"),
            reference=payload.reference,
            resultat=_check_resultat(payload.resultat),
            moyenne=payload.moyenne or 0,
        )
        logger.info("Agent %s inscrit à la session %s", entity.agent_id, entity.session_formation_id)
        return self.get(entity.id)

    def update(self, enrolment_id: int, payload: AgentFormationUpdateIn) -> AgentFormationJoinOut:
        entity = self._get_entity(enrolment_id)
        changes = payload.model_dump(exclude_unset=True)
        if "resultat" in changes:
            changes["resultat"] = _check_resultat(changes["resultat"])
        if changes.get("moyenne") is None:
            changes.pop("moyenne", None)
        self.repo.update(entity, updated_at=utc_now(), **changes)
        return self.get(enrolment_id)

    def delete(self, enrolment_id: int) -> None:
        entity = self._get_entity(enrolment_id)
        self.repo.delete(entity)
