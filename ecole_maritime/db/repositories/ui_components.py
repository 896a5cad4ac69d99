from typing import Optional, Sequence, Tuple
from sqlmodel import select

from ecole_maritime.db.repositories.base import BaseRepository
from ecole_maritime.db.models.ui_components import UIComponent, UIComponentPermission
from ecole_maritime.db.models.roles import Role

class UIComponentRepository(BaseRepository[UIComponent]):
    model = UIComponent

    def get_by_name(self, name: str) -> Optional[UIComponent]:
        return self.session.exec(
            select(self.model).where(self.model.name == name)
        ).first()

    def list_ordered(self) -> Sequence[UIComponent]:
        """Composants triés par catégorie puis nom affiché."""
        return self.session.exec(
            select(self.model).order_by(self.model.category.asc(), self.model.display_name.asc())
        ).all()


class UIComponentPermissionRepository(BaseRepository[UIComponentPermission]):
    model = UIComponentPermission

    def list_with_relations(self) -> Sequence[Tuple[UIComponentPermission, Role, UIComponent]]:
        stmt = (
            select(UIComponentPermission, Role, UIComponent)
            .join(Role, Role.id == UIComponentPermission.role_id)
            .join(UIComponent, UIComponent.id == UIComponentPermission.component_id)
            .order_by(UIComponentPermission.id.asc())
        )
        return self.session.exec(stmt).all()

    def list_for_role(self, role_id: int) -> Sequence[Tuple[UIComponentPermission, UIComponent]]:
        stmt = (
            select(UIComponentPermission, UIComponent)
            .join(UIComponent, UIComponent.id == UIComponentPermission.component_id)
            .where(UIComponentPermission.role_id == role_id)
            .order_by(UIComponent.category.asc(), UIComponent.name.asc())
        )
        return self.session.exec(stmt).all()

    def get_for_pair(self, role_id: int, component_id: int) -> Optional[UIComponentPermission]:
        return self.session.exec(
            select(self.model)
            .where(self.model.role_id == role_id)
            .where(self.model.component_id == component_id)
        ).first()
