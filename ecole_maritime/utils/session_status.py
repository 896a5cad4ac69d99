from datetime import date, datetime
from typing import Optional, Union

from ecole_maritime.utils.timezone import utc_now

STATUT_PROGRAMMEE = "مبرمجة"
STATUT_EN_COURS = "قيد التنفيذ"
STATUT_TERMINEE = "انتهت"

def _as_day(value: Union[date, datetime]) -> date:
    return value.date() if isinstance(value, datetime) else value

def compute_session_status(
    date_debut: Union[date, datetime],
    date_fin: Union[date, datetime],
    today: Optional[date] = None,
) -> str:
    """
    Statut d'une session à partir de ses dates, comparées au jour près.
    - avant le début       -> "مبرمجة"
    - entre début et fin   -> "قيد التنفيذ" (bornes incluses)
    - après la fin         -> "انتهت"
    """
    today = today or utc_now().date()
    debut = _as_day(date_debut)
    fin = _as_day(date_fin)
    if today < debut:
        return STATUT_PROGRAMMEE
    if today <= fin:
        return STATUT_EN_COURS
    return STATUT_TERMINEE
