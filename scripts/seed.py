from ecole_maritime.core.config import settings
from ecole_maritime.db.session import engine, Session, init_db

from ecole_maritime.db.seed import seed_all


def run_seed():
    init_db()
    with Session(engine) as session:
        seed_all(
            session=session,
            admin={
                "email": settings.SEED_ADMIN_EMAIL,
                "name": settings.SEED_ADMIN_NAME,
                "password": settings.SEED_ADMIN_PASSWORD,
            },
        )


if __name__ == "__main__":
    run_seed()
