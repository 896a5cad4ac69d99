# tests/api/test_exception_handlers.py
import sqlite3

import pytest
from sqlalchemy.exc import IntegrityError

from ecole_maritime.api.exception_handlers import is_unique_violation


class _PgError(Exception):
    def __init__(self, pgcode: str):
        super().__init__("pg")
        self.pgcode = pgcode


def _integrity(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, orig)


@pytest.mark.parametrize(
    "orig, expected",
    [
        (sqlite3.IntegrityError("UNIQUE constraint failed: agent.matricule"), True),
        (sqlite3.IntegrityError("NOT NULL constraint failed: coursformateur.nombre_heures"), False),
        (sqlite3.IntegrityError("FOREIGN KEY constraint failed"), False),
        (_PgError("23505"), True),
        (_PgError("23503"), False),
    ],
)
def test_only_unique_violations_are_conflicts(orig, expected):
    assert is_unique_violation(_integrity(orig)) is expected
