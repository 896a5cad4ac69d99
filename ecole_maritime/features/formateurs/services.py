import logging
from typing import Optional, Sequence

from ecole_maritime.core.errors import ConflictError, NotFoundError, ValidationError
from ecole_maritime.db.models.formateurs import Formateur
from ecole_maritime.db.repositories.formateurs import FormateurRepository
from ecole_maritime.db.repositories.cours_formateurs import CoursFormateurRepository
from ecole_maritime.features.formateurs.schemas import FormateurIn
from ecole_maritime.utils.telephone import parse_telephone
from ecole_maritime.utils.timezone import utc_now

logger = logging.getLogger(__name__)

RIB_LENGTH = 20


class FormateurService:
    def __init__(self, repo: FormateurRepository, assignment_repo: CoursFormateurRepository):
        self.repo = repo
        self.assignment_repo = assignment_repo

    def list(self, *, offset: int = 0, limit: int = 100) -> Sequence[Formateur]:
        return self.repo.list_newest(offset=offset, limit=limit)

    def get(self, formateur_id: int) -> Formateur:
        formateur = self.repo.get(formateur_id)
        if not formateur:
            raise NotFoundError("Formateur non trouvé")
        return formateur

    def _clean(self, payload: FormateurIn, *, exclude_id: Optional[int] = None) -> dict:
        nom_prenom = (payload.nom_prenom or "").strip()
        if not nom_prenom:
            raise ValidationError("الإسم و اللقب مطلوب")

        rib = (payload.rib or "").strip() or None
        if rib is not None and len(rib) != RIB_LENGTH:
            raise ValidationError("يجب أن يكون RIB 20 رقمًا")
        if rib is not None:
            existing = self.repo.get_by_rib(rib)
            if existing and existing.id != exclude_id:
                raise ConflictError("RIB موجود بالفعل في قاعدة البيانات")

        try:
            telephone = parse_telephone(payload.telephone)
        except ValueError:
            raise ValidationError("رقم الهاتف غير صالح")

        return {
            "nom_prenom": nom_prenom,
            "grade": (payload.grade or "").strip(),
            "unite": (payload.unite or "").strip(),
            "responsabilite": (payload.responsabilite or "").strip(),
            "telephone": telephone,
            "rib": rib,
        }

    def create(self, payload: FormateurIn) -> Formateur:
        formateur = self.repo.create(**self._clean(payload))
        logger.info("Formateur %s créé", formateur.id)
        return formateur

    def update(self, formateur_id: int, payload: FormateurIn) -> Formateur:
        formateur = self.get(formateur_id)
        changes = self._clean(payload, exclude_id=formateur.id)
        return self.repo.update(formateur, updated_at=utc_now(), **changes)

    def delete(self, formateur_id: int) -> None:
        formateur = self.get(formateur_id)
        self.assignment_repo.delete_where(formateur_id=formateur.id, commit=False)
        self.repo.delete(formateur)
        logger.info("Formateur %s supprimé", formateur_id)
