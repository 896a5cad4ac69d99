import bcrypt


def hash_password(password: str) -> str:
    """Hash bcrypt (sel inclus) encodé en str pour la colonne hashed_password."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # hash illisible (format inattendu en base)
        return False
