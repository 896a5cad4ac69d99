# tests/utils/test_session_status.py
from datetime import date, datetime, timezone

import pytest

from ecole_maritime.utils.session_status import (
    STATUT_EN_COURS,
    STATUT_PROGRAMMEE,
    STATUT_TERMINEE,
    compute_session_status,
)

DEBUT = datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)
FIN = datetime(2025, 3, 12, 18, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2025, 3, 9), STATUT_PROGRAMMEE),
        (date(2025, 3, 10), STATUT_EN_COURS),
        (date(2025, 3, 11), STATUT_EN_COURS),
        (date(2025, 3, 12), STATUT_EN_COURS),
        (date(2025, 3, 13), STATUT_TERMINEE),
    ],
)
def test_status_compares_by_day(today, expected):
    assert compute_session_status(DEBUT, FIN, today=today) == expected


def test_accepts_plain_dates():
    assert compute_session_status(date(2025, 1, 1), date(2025, 1, 1), today=date(2025, 1, 1)) == STATUT_EN_COURS
