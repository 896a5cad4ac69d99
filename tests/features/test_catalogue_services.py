# tests/features/test_catalogue_services.py
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from ecole_maritime.core.errors import ConflictError, NotFoundError, ValidationError
from ecole_maritime.db.models.agents import Agent
from ecole_maritime.db.models.formateurs import Formateur
from ecole_maritime.db.models.formations import Formation
from ecole_maritime.db.models.sessions_formation import SessionFormation
from ecole_maritime.db.models.agent_formations import AgentFormation
from ecole_maritime.db.repositories.agents import AgentRepository
from ecole_maritime.db.repositories.agent_formations import AgentFormationRepository
from ecole_maritime.db.repositories.cours_formateurs import CoursFormateurRepository
from ecole_maritime.db.repositories.formateurs import FormateurRepository
from ecole_maritime.db.repositories.formations import FormationRepository
from ecole_maritime.db.repositories.sessions_formation import SessionFormationRepository
from ecole_maritime.features.agents.schemas import AgentCreateIn
from ecole_maritime.features.agents.services import AgentService
from ecole_maritime.features.agent_formations.schemas import AgentFormationCreateIn
from ecole_maritime.features.agent_formations.services import AgentFormationService
from ecole_maritime.features.formateurs.schemas import FormateurIn
from ecole_maritime.features.formateurs.services import FormateurService
from ecole_maritime.features.sessions.schemas import SessionFormationCreateIn
from ecole_maritime.features.sessions.services import SessionFormationService, event_color

JOUR = datetime(2025, 1, 1, tzinfo=timezone.utc)


# ===================================================================
#  Agents
# ===================================================================

class TestAgentService:
    @pytest.fixture
    def repo(self) -> MagicMock:
        return MagicMock(spec=AgentRepository)

    @pytest.fixture
    def enrolment_repo(self) -> MagicMock:
        return MagicMock(spec=AgentFormationRepository)

    @pytest.fixture
    def service(self, repo, enrolment_repo) -> AgentService:
        return AgentService(repo, enrolment_repo)

    def test_duplicate_matricule_is_conflict(self, service, repo):
        repo.get_by_matricule.return_value = Agent(id=1, nom_prenom="x", grade="حرس", matricule="M-1")

        with pytest.raises(ConflictError):
            service.create(AgentCreateIn(nom="a", prenom="b", grade="حرس", matricule="M-1"))
        repo.create.assert_not_called()

    def test_delete_removes_enrolments(self, service, repo, enrolment_repo):
        agent = Agent(id=1, nom_prenom="x", grade="حرس", matricule="M-1")
        repo.get.return_value = agent

        service.delete(1)

        enrolment_repo.delete_where.assert_called_once_with(agent_id=1, commit=False)
        repo.delete.assert_called_once_with(agent)


# ===================================================================
#  Formateurs
# ===================================================================

class TestFormateurService:
    @pytest.fixture
    def repo(self) -> MagicMock:
        return MagicMock(spec=FormateurRepository)

    @pytest.fixture
    def service(self, repo) -> FormateurService:
        return FormateurService(repo, MagicMock(spec=CoursFormateurRepository))

    def test_rib_must_have_20_chars(self, service, repo):
        with pytest.raises(ValidationError):
            service.create(FormateurIn(nom_prenom="x", rib="123"))
        repo.create.assert_not_called()

    def test_duplicate_rib_is_conflict(self, service, repo):
        repo.get_by_rib.return_value = Formateur(id=9, nom_prenom="y", rib="1" * 20)

        with pytest.raises(ConflictError):
            service.create(FormateurIn(nom_prenom="x", rib="1" * 20))

    def test_same_rib_on_update_is_allowed(self, service, repo):
        formateur = Formateur(id=9, nom_prenom="y", rib="1" * 20)
        repo.get.return_value = formateur
        repo.get_by_rib.return_value = formateur

        service.update(9, FormateurIn(nom_prenom="y bis", rib="1" * 20))

        assert repo.update.call_args.kwargs["nom_prenom"] == "y bis"


# ===================================================================
#  Sessions et inscriptions
# ===================================================================

class TestSessionFormationService:
    @pytest.fixture
    def repo(self) -> MagicMock:
        return MagicMock(spec=SessionFormationRepository)

    @pytest.fixture
    def formation_repo(self) -> MagicMock:
        return MagicMock(spec=FormationRepository)

    @pytest.fixture
    def service(self, repo, formation_repo) -> SessionFormationService:
        return SessionFormationService(repo, formation_repo, MagicMock(spec=AgentFormationRepository))

    def test_create_checks_dates_before_formation(self, service, formation_repo, repo):
        payload = SessionFormationCreateIn(
            formation_id=1, date_debut=datetime(2025, 3, 12, tzinfo=timezone.utc), date_fin=datetime(2025, 3, 10, tzinfo=timezone.utc)
        )

        with pytest.raises(ValidationError):
            service.create(payload)
        formation_repo.get.assert_not_called()
        repo.create.assert_not_called()

    def test_same_day_session_is_valid(self, service, formation_repo, repo):
        formation_repo.get.return_value = Formation(id=1, formation="f", type_formation="تكوين تخصصي")
        repo.create.side_effect = lambda **fields: SessionFormation(id=3, **fields)

        out = service.create(SessionFormationCreateIn(
            formation_id=1, date_debut=datetime(2025, 3, 10, 14, tzinfo=timezone.utc), date_fin=datetime(2025, 3, 10, 8, tzinfo=timezone.utc)
        ))

        assert out.date_debut == datetime(2025, 3, 10, 9, tzinfo=timezone.utc)
        assert out.date_fin == datetime(2025, 3, 10, 18, tzinfo=timezone.utc)

    def test_event_color_prefers_session_color(self):
        formation = Formation(id=1, formation="f", type_formation="تكوين إختصاص")

        assert event_color(SessionFormation(formation_id=1, date_debut=JOUR, date_fin=JOUR), formation) == "sky"
        assert event_color(
            SessionFormation(formation_id=1, date_debut=JOUR, date_fin=JOUR, color="rose"), formation
        ) == "rose"
        assert event_color(
            SessionFormation(formation_id=1, date_debut=JOUR, date_fin=JOUR),
            Formation(id=2, formation="g", type_formation="autre"),
        ) == "amber"


class TestAgentFormationService:
    @pytest.fixture
    def repo(self) -> MagicMock:
        return MagicMock(spec=AgentFormationRepository)

    @pytest.fixture
    def agent_repo(self) -> MagicMock:
        return MagicMock(spec=AgentRepository)

    @pytest.fixture
    def session_repo(self) -> MagicMock:
        return MagicMock(spec=SessionFormationRepository)

    @pytest.fixture
    def service(self, repo, agent_repo, session_repo) -> AgentFormationService:
        return AgentFormationService(repo, agent_repo, session_repo)

    def test_unknown_session_is_404(self, service, session_repo, repo):
        session_repo.get.return_value = None

        with pytest.raises(NotFoundError):
            service.create(AgentFormationCreateIn(agent_id=1, session_formation_id=5))
        repo.create.assert_not_called()

    def test_existing_enrolment_is_conflict(self, service, session_repo, agent_repo, repo):
        session_repo.get.return_value = SessionFormation(
            id=5, formation_id=2, date_debut=datetime(2025, 3, 10, 9, tzinfo=timezone.utc), date_fin=datetime(2025, 3, 12, 18, tzinfo=timezone.utc)
        )
        agent_repo.get.return_value = Agent(id=1, nom_prenom="x", grade="حرس", matricule="M-1")
        repo.get_enrollment.return_value = AgentFormation(id=8, agent_id=1, formation_id=2, session_formation_id=5)

        with pytest.raises(ConflictError):
            service.create(AgentFormationCreateIn(agent_id=1, session_formation_id=5))
        repo.create.assert_not_called()

    def test_formation_and_dates_come_from_session(self, service, session_repo, agent_repo, repo):
        session_repo.get.return_value = SessionFormation(
            id=5, formation_id=2, date_debut=datetime(2025, 3, 10, 9, tzinfo=timezone.utc), date_fin=datetime(2025, 3, 12, 18, tzinfo=timezone.utc)
        )
        agent_repo.get.return_value = Agent(id=1, nom_prenom="x", grade="حرس", matricule="M-1")
        repo.get_enrollment.return_value = None
        repo.create.return_value = AgentFormation(id=8, agent_id=1, formation_id=2, session_formation_id=5)

        service.create(AgentFormationCreateIn(agent_id=1, session_formation_id=5, resultat="ناجح"))

        kwargs = repo.create.call_args.kwargs
        assert kwargs["formation_id"] == 2
        assert kwargs["date_debut"] == "2025-03-10"
        assert kwargs["date_fin"] == "2025-03-12"
        assert kwargs["resultat"] == "ناجح"
        assert kwargs["moyenne"] == 0
