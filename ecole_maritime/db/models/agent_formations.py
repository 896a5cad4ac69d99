from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from .base import BaseModelDB


class AgentFormation(BaseModelDB, table=True):
    """Inscription d'un agent à une formation (et à une session) avec son résultat."""

    # session_formation_id NULL (session supprimée) n'entre pas en conflit
    __table_args__ = (UniqueConstraint("agent_id", "session_formation_id", name="uq_agent_session"),)

    agent_id: int = Field(index=True, foreign_key="agent.id")
    formation_id: int = Field(index=True, foreign_key="formation.id")
    session_formation_id: Optional[int] = Field(default=None, index=True, foreign_key="sessionformation.id")

    # dates au format YYYY-MM-DD
    date_debut: str = Field(default="")
    date_fin: str = Field(default="")
    reference: Optional[str] = Field(default=None)
    resultat: Optional[str] = Field(default=None)
    moyenne: float = Field(default=0)
