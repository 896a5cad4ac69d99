from typing import Optional, Sequence
from sqlmodel import select

from ecole_maritime.db.repositories.base import BaseRepository
from ecole_maritime.db.models.users import UserSession
from ecole_maritime.utils.timezone import utc_now

class UserSessionRepository(BaseRepository[UserSession]):
    model = UserSession

    def get_by_jti(self, jti: str) -> Optional[UserSession]:
        return self.session.exec(
            select(self.model).where(self.model.jti == jti)
        ).first()

    def list_active_for_user(self, user_id: int) -> Sequence[UserSession]:
        now = utc_now()
        return self.session.exec(
            select(self.model)
            .where(self.model.user_id == user_id)
            .where(self.model.revoked_at.is_(None))
            .where(self.model.expires_at > now)
            .order_by(self.model.expires_at.desc())
        ).all()

    def revoke(self, jti: str) -> None:
        user_session = self.get_by_jti(jti)
        if not user_session or user_session.revoked_at:
            return
        user_session.revoked_at = utc_now()
        self.session.add(user_session)
        self.session.commit()

    def revoke_all_for_user(self, user_id: int) -> int:
        sessions = self.list_active_for_user(user_id)
        if not sessions:
            return 0
        now = utc_now()
        for user_session in sessions:
            user_session.revoked_at = now
            self.session.add(user_session)
        self.session.commit()
        return len(sessions)
