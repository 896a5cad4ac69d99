import logging
from typing import Optional, Sequence

from ecole_maritime.core.errors import ConflictError, NotFoundError, ValidationError
from ecole_maritime.db.models.agents import Agent
from ecole_maritime.db.repositories.agents import AgentRepository
from ecole_maritime.db.repositories.agent_formations import AgentFormationRepository
from ecole_maritime.features.agents.schemas import AgentCreateIn, AgentUpdateIn
from ecole_maritime.utils.grades import categorie_from_grade
from ecole_maritime.utils.telephone import parse_telephone
from ecole_maritime.utils.timezone import utc_now

logger = logging.getLogger(__name__)


def _telephone_or_400(value) -> int:
    try:
        return parse_telephone(value)
    except ValueError:
        raise ValidationError("رقم الهاتف غير صالح")


class AgentService:
    def __init__(self, repo: AgentRepository, enrolment_repo: AgentFormationRepository):
        self.repo = repo
        self.enrolment_repo = enrolment_repo

    def list(self, *, offset: int = 0, limit: int = 100, categorie: Optional[str] = None, q: Optional[str] = None) -> Sequence[Agent]:
        return self.repo.list_newest(offset=offset, limit=limit, categorie=categorie, q=q)

    def get(self, agent_id: int) -> Agent:
        agent = self.repo.get(agent_id)
        if not agent:
            raise NotFoundError("Agent non trouvé")
        return agent

    def _ensure_matricule_free(self, matricule: str, *, exclude_id: Optional[int] = None) -> None:
        existing = self.repo.get_by_matricule(matricule)
        if existing and existing.id != exclude_id:
            raise ConflictError("هذا رقم التسجيل موجود بالفعل")

    def create(self, payload: AgentCreateIn) -> Agent:
        nom, prenom = payload.nom.strip(), payload.prenom.strip()
        grade, matricule = payload.grade.strip(), payload.matricule.strip()
        if not nom or not prenom or not grade or not matricule:
            raise ValidationError("Les champs nom, prenom, grade et matricule sont requis")

        self._ensure_matricule_free(matricule)
        agent = self.repo.create(
            nom_prenom=f"{nom} {prenom}".strip(),
            grade=grade,
            matricule=matricule,
            responsabilite=(payload.responsabilite or "").strip(),
            telephone=_telephone_or_400(payload.telephone),
            categorie=categorie_from_grade(grade),
        )
        logger.info("Agent %s créé (matricule %s)", agent.id, agent.matricule)
        return agent

    def update(self, agent_id: int, payload: AgentUpdateIn) -> Agent:
        agent = self.get(agent_id)
        nom_prenom, grade, matricule = payload.nom_prenom.strip(), payload.grade.strip(), payload.matricule.strip()
        if not nom_prenom or not grade or not matricule:
            raise ValidationError("Les champs nom_prenom, grade et matricule sont requis")

        self._ensure_matricule_free(matricule, exclude_id=agent.id)
        return self.repo.update(
            agent,
            nom_prenom=nom_prenom,
            grade=grade,
            matricule=matricule,
            responsabilite=(payload.responsabilite or "").strip(),
            telephone=_telephone_or_400(payload.telephone),
            categorie=categorie_from_grade(grade),
            updated_at=utc_now(),
        )

    def delete(self, agent_id: int) -> None:
        agent = self.get(agent_id)
        # les inscriptions de l'agent partent avec lui
        removed = self.enrolment_repo.delete_where(agent_id=agent.id, commit=False)
        self.repo.delete(agent)
        logger.info("Agent %s supprimé (%d inscription(s))", agent_id, removed)
