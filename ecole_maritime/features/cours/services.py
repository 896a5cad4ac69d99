import logging
from typing import Sequence

from ecole_maritime.core.errors import NotFoundError, ValidationError
from ecole_maritime.db.models.cours import Cours
from ecole_maritime.db.repositories.cours import CoursRepository
from ecole_maritime.db.repositories.cours_formateurs import CoursFormateurRepository
from ecole_maritime.features.cours.schemas import CoursIn
from ecole_maritime.utils.timezone import utc_now

logger = logging.getLogger(__name__)


class CoursService:
    def __init__(self, repo: CoursRepository, assignment_repo: CoursFormateurRepository):
        self.repo = repo
        self.assignment_repo = assignment_repo

    def list(self, *, offset: int = 0, limit: int = 100) -> Sequence[Cours]:
        return self.repo.list_newest(offset=offset, limit=limit)

    def get(self, cours_id: int) -> Cours:
        cours = self.repo.get(cours_id)
        if not cours:
            raise NotFoundError("Cours non trouvé")
        return cours

    @staticmethod
    def _titre(payload: CoursIn) -> str:
        titre = (payload.titre or "").strip()
        if not titre:
            raise ValidationError("Le champ titre est requis")
        return titre

    def create(self, payload: CoursIn) -> Cours:
        return self.repo.create(titre=self._titre(payload))

    def update(self, cours_id: int, payload: CoursIn) -> Cours:
        cours = self.get(cours_id)
        return self.repo.update(cours, titre=self._titre(payload), updated_at=utc_now())

    def delete(self, cours_id: int) -> None:
        cours = self.get(cours_id)
        self.assignment_repo.delete_where(cours_id=cours.id, commit=False)
        self.repo.delete(cours)
        logger.info("Cours %s supprimé", cours_id)
