from typing import Optional
from sqlmodel import select

from ecole_maritime.db.repositories.base import BaseRepository
from ecole_maritime.db.models.cours_formateurs import CoursFormateur
from ecole_maritime.db.models.formateurs import Formateur
from ecole_maritime.db.models.cours import Cours
from ecole_maritime.features.cours_formateurs.schemas import CoursFormateurJoinOut

class CoursFormateurRepository(BaseRepository[CoursFormateur]):
    model = CoursFormateur

    def _select_join_out(self):
        return (
            select(
                CoursFormateur.id,
                CoursFormateur.formateur_id,
                Formateur.nom_prenom.label("formateur_nom_prenom"),
                CoursFormateur.cours_id,
                Cours.titre.label("cours_titre"),
                CoursFormateur.date_debut,
                CoursFormateur.date_fin,
                CoursFormateur.nombre_heures,
                CoursFormateur.reference,
                CoursFormateur.created_at,
                CoursFormateur.updated_at,
            )
            .select_from(CoursFormateur)
            .join(Formateur, Formateur.id == CoursFormateur.formateur_id)
            .join(Cours, Cours.id == CoursFormateur.cours_id)
        )

    def get_join_out(self, id_: int) -> Optional[CoursFormateurJoinOut]:
        row = self.session.exec(self._select_join_out().where(CoursFormateur.id == id_)).first()
        return CoursFormateurJoinOut(**dict(row._mapping)) if row else None

    def list_filtered(
        self,
        *,
        formateur_id: Optional[int] = None,
        cours_id: Optional[int] = None,
        offset: int = 0,
        limit: int = 500,
    ) -> list[CoursFormateurJoinOut]:
        stmt = self._select_join_out()
        if formateur_id is not None:
            stmt = stmt.where(CoursFormateur.formateur_id == formateur_id)
        if cours_id is not None:
            stmt = stmt.where(CoursFormateur.cours_id == cours_id)
        stmt = stmt.order_by(CoursFormateur.created_at.desc(), CoursFormateur.id.desc())
        rows = self.session.exec(stmt.offset(offset).limit(limit)).all()
        return [CoursFormateurJoinOut(**dict(r._mapping)) for r in rows]
