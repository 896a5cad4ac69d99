from typing import Any, Generic, Optional, Type, TypeVar
from sqlmodel import SQLModel, Session, select, func

# Modèle de table géré par le repository (Agent, Role, UIComponent...)
ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Accès générique à une table.

    👉 Persistance seulement : les règles métier vivent dans features/<x>/services.py.
    👉 Chaque repository concret fixe `model = MaTable`.
    👉 Les écritures acceptent commit=False : le service regroupe alors plusieurs
       écritures et c'est le dernier appel (ou commit()) qui valide.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    def _where(self, **filters):
        """SELECT sur le modèle avec une égalité par filtre."""
        statement = select(self.model)
        for column, value in filters.items():
            statement = statement.where(getattr(self.model, column) == value)
        return statement

    def _persist(self, entity: Optional[ModelT], commit: bool) -> None:
        if commit:
            self.session.commit()
            if entity is not None:
                self.session.refresh(entity)
        else:
            # flush : les ids sont disponibles pour les écritures suivantes
            self.session.flush()

    # ---------- LECTURE ----------

    def count(self) -> int:
        return self.session.exec(select(func.count(self.model.id))).one()

    def get(self, id_: Any) -> Optional[ModelT]:
        return self.session.get(self.model, id_)

    # ---------- ÉCRITURE ----------

    def create(self, *, commit: bool = True, **fields) -> ModelT:
        entity = self.model(**fields)
        self.session.add(entity)
        self._persist(entity, commit)
        return entity

    def update(self, entity: ModelT, *, commit: bool = True, **changes) -> ModelT:
        """Affecte les champs donnés. Une colonne JSON doit recevoir un nouvel objet."""
        for column, value in changes.items():
            setattr(entity, column, value)
        self.session.add(entity)
        self._persist(entity, commit)
        return entity

    def delete(self, entity: ModelT, *, commit: bool = True) -> None:
        self.session.delete(entity)
        self._persist(None, commit)

    def delete_where(self, *, commit: bool = True, **filters) -> int:
        """Supprime les lignes correspondant aux filtres ; retourne leur nombre."""
        rows = self.session.exec(self._where(**filters)).all()
        for row in rows:
            self.session.delete(row)
        self._persist(None, commit)
        return len(rows)

    # ---------- TRANSACTION ----------

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
