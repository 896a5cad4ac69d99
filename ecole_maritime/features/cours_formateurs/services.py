import logging
import math
from typing import List, Optional

from ecole_maritime.core.errors import NotFoundError, ValidationError
from ecole_maritime.db.models.cours_formateurs import CoursFormateur
from ecole_maritime.db.repositories.cours_formateurs import CoursFormateurRepository
from ecole_maritime.db.repositories.formateurs import FormateurRepository
from ecole_maritime.db.repositories.cours import CoursRepository
from ecole_maritime.features.cours_formateurs.schemas import (
    CoursFormateurCreateIn,
    CoursFormateurJoinOut,
    CoursFormateurUpdateIn,
)
from ecole_maritime.utils.timezone import utc_now

logger = logging.getLogger(__name__)


class CoursFormateurService:
    def __init__(
        self,
        repo: CoursFormateurRepository,
        formateur_repo: FormateurRepository,
        cours_repo: CoursRepository,
    ):
        self.repo = repo
        self.formateur_repo = formateur_repo
        self.cours_repo = cours_repo

    def list(
        self,
        *,
        formateur_id: Optional[int] = None,
        cours_id: Optional[int] = None,
        offset: int = 0,
        limit: int = 500,
    ) -> List[CoursFormateurJoinOut]:
        return self.repo.list_filtered(formateur_id=formateur_id, cours_id=cours_id, offset=offset, limit=limit)

    def get(self, assignment_id: int) -> CoursFormateurJoinOut:
        out = self.repo.get_join_out(assignment_id)
        if not out:
            raise NotFoundError("Affectation introuvable")
        return out

    def _get_entity(self, assignment_id: int) -> CoursFormateur:
        entity = self.repo.get(assignment_id)
        if not entity:
            raise NotFoundError("Affectation introuvable")
        return entity

    def _check_refs(self, *, formateur_id: Optional[int], cours_id: Optional[int]) -> None:
        if formateur_id is not None and not self.formateur_repo.get(formateur_id):
            raise NotFoundError("Formateur non trouvé")
        if cours_id is not None and not self.cours_repo.get(cours_id):
            raise NotFoundError("Cours non trouvé")

    @staticmethod
    def _check_heures(nombre_heures: Optional[float]) -> None:
        if nombre_heures is not None and not (math.isfinite(nombre_heures) and nombre_heures > 0):
            raise ValidationError("Le nombre d'heures doit être supérieur à 0")

    def create(self, payload: CoursFormateurCreateIn) -> CoursFormateurJoinOut:
        if not payload.date_debut.strip() or not payload.date_fin.strip():
            raise ValidationError("Les champs date_debut et date_fin sont requis")
        self._check_heures(payload.nombre_heures)
        self._check_refs(formateur_id=payload.formateur_id, cours_id=payload.cours_id)
        entity = self.repo.create(**payload.model_dump())
        logger.info("Cours %s affecté au formateur %s", entity.cours_id, entity.formateur_id)
        return self.get(entity.id)

    def update(self, assignment_id: int, payload: CoursFormateurUpdateIn) -> CoursFormateurJoinOut:
        entity = self._get_entity(assignment_id)
        changes = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None or k == "reference"}
        self._check_heures(changes.get("nombre_heures"))
        self._check_refs(formateur_id=changes.get("formateur_id"), cours_id=changes.get("cours_id"))
        self.repo.update(entity, updated_at=utc_now(), **changes)
        return self.get(assignment_id)

    def delete(self, assignment_id: int) -> None:
        self.repo.delete(self._get_entity(assignment_id))
