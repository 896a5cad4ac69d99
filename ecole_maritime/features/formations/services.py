import logging
from typing import Sequence

from ecole_maritime.core.errors import NotFoundError, ValidationError
from ecole_maritime.db.models.formations import Formation
from ecole_maritime.db.repositories.formations import FormationRepository
from ecole_maritime.db.repositories.sessions_formation import SessionFormationRepository
from ecole_maritime.db.repositories.agent_formations import AgentFormationRepository
from ecole_maritime.features.formations.schemas import FormationIn
from ecole_maritime.utils.timezone import utc_now

logger = logging.getLogger(__name__)


class FormationService:
    def __init__(
        self,
        repo: FormationRepository,
        session_repo: SessionFormationRepository,
        enrolment_repo: AgentFormationRepository,
    ):
        self.repo = repo
        self.session_repo = session_repo
        self.enrolment_repo = enrolment_repo

    def list(self, *, offset: int = 0, limit: int = 100) -> Sequence[Formation]:
        return self.repo.list_by_name(offset=offset, limit=limit)

    def get(self, formation_id: int) -> Formation:
        formation = self.repo.get(formation_id)
        if not formation:
            raise NotFoundError("Formation non trouvée")
        return formation

    @staticmethod
    def _clean(payload: FormationIn) -> dict:
        formation = (payload.formation or "").strip()
        type_formation = (payload.type_formation or "").strip()
        if not formation or not type_formation:
            raise ValidationError("Les champs formation et type_formation sont requis")
        return {
            "formation": formation,
            "type_formation": type_formation,
            "specialite": payload.specialite,
            "duree": payload.duree,
            "capacite_absorption": payload.capacite_absorption,
        }

    def create(self, payload: FormationIn) -> Formation:
        return self.repo.create(**self._clean(payload))

    def update(self, formation_id: int, payload: FormationIn) -> Formation:
        formation = self.get(formation_id)
        return self.repo.update(formation, updated_at=utc_now(), **self._clean(payload))

    def delete(self, formation_id: int) -> None:
        """Supprime la formation, ses sessions et les inscriptions qui s'y rattachent."""
        formation = self.get(formation_id)
        self.enrolment_repo.delete_where(formation_id=formation.id, commit=False)
        self.session_repo.delete_where(formation_id=formation.id, commit=False)
        self.repo.delete(formation)
        logger.info("Formation %s supprimée", formation_id)
