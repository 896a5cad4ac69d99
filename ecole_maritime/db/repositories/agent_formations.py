from typing import Optional, Sequence
from sqlmodel import select

from ecole_maritime.db.repositories.base import BaseRepository
from ecole_maritime.db.models.agent_formations import AgentFormation
from ecole_maritime.db.models.agents import Agent
from ecole_maritime.db.models.formations import Formation
from ecole_maritime.features.agent_formations.schemas import AgentFormationJoinOut

class AgentFormationRepository(BaseRepository[AgentFormation]):
    """CRUD inscriptions + projections jointes (agent, formation)."""
    model = AgentFormation

    # ---------- HELPERS ----------

    def _select_join_out(self):
        """Projection SQL standardisée pour construire AgentFormationJoinOut."""
        return (
            select(
                AgentFormation.id,
                AgentFormation.agent_id,
                Agent.nom_prenom.label("agent_nom_prenom"),
                Agent.grade.label("agent_grade"),
                Agent.matricule.label("agent_matricule"),
                AgentFormation.formation_id,
                Formation.formation.label("formation_nom"),
                AgentFormation.session_formation_id,
                AgentFormation.date_debut,
                AgentFormation.date_fin,
                AgentFormation.reference,
                AgentFormation.resultat,
                AgentFormation.moyenne,
                AgentFormation.created_at,
                AgentFormation.updated_at,
            )
            .select_from(AgentFormation)
            .join(Agent, Agent.id == AgentFormation.agent_id)
            .join(Formation, Formation.id == AgentFormation.formation_id)
        )

    def _rows_to_join_out(self, rows) -> list[AgentFormationJoinOut]:
        return [AgentFormationJoinOut(**dict(r._mapping)) for r in rows]

    # ---------- GETTERS SPÉCIFIQUES ----------

    def get_join_out(self, id_: int) -> Optional[AgentFormationJoinOut]:
        row = self.session.exec(self._select_join_out().where(AgentFormation.id == id_)).first()
        return AgentFormationJoinOut(**dict(row._mapping)) if row else None

    def get_enrollment(self, agent_id: int, session_formation_id: int) -> Optional[AgentFormation]:
        """Inscription existante d'un agent à une session, ou None."""
        return self.session.exec(
            select(self.model)
            .where(self.model.agent_id == agent_id)
            .where(self.model.session_formation_id == session_formation_id)
        ).first()

    # ---------- LISTES ----------

    def list_filtered(
        self,
        *,
        agent_id: Optional[int] = None,
        formation_id: Optional[int] = None,
        session_formation_id: Optional[int] = None,
        offset: int = 0,
        limit: int = 500,
    ) -> list[AgentFormationJoinOut]:
        stmt = self._select_join_out()
        if agent_id is not None:
            stmt = stmt.where(AgentFormation.agent_id == agent_id)
        if formation_id is not None:
            stmt = stmt.where(AgentFormation.formation_id == formation_id)
        if session_formation_id is not None:
            stmt = stmt.where(AgentFormation.session_formation_id == session_formation_id)
        stmt = stmt.order_by(AgentFormation.created_at.desc(), AgentFormation.id.desc())
        rows = self.session.exec(stmt.offset(offset).limit(limit)).all()
        return self._rows_to_join_out(rows)

    def list_for_session(self, session_formation_id: int) -> Sequence[AgentFormation]:
        return self.session.exec(
            select(self.model).where(self.model.session_formation_id == session_formation_id)
        ).all()

    # ---------- MAJ EN MASSE ----------

    def detach_session(self, session_formation_id: int, *, commit: bool = True) -> int:
        """Met session_formation_id à NULL pour toutes les inscriptions d'une session."""
        rows = self.list_for_session(session_formation_id)
        for row in rows:
            row.session_formation_id = None
            self.session.add(row)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
        return len(rows)
