"""
Vocabulaire des résultats d'une inscription (source unique pour l'API).
"""

from typing import List, Literal, Optional, TypedDict

ResultatVariant = Literal["success", "inProgress", "interrupted", "abandoned", "notJoined", "pending"]


class ResultatOption(TypedDict):
    value: str
    label: str
    variant: ResultatVariant


RESULTAT_OPTIONS: List[ResultatOption] = [
    {"value": "قيد البرمجة", "label": "قيد البرمجة", "variant": "pending"},
    {"value": "ناجح", "label": "نــاجـح", "variant": "success"},
    {"value": "قيد التكوين", "label": "قيد التكوين", "variant": "inProgress"},
    {"value": "راسب", "label": "راســب", "variant": "interrupted"},
    {"value": "إنقطع", "label": "إنقطــع", "variant": "abandoned"},
    {"value": "لم يلتحق", "label": "لم يلتحق", "variant": "notJoined"},
]

RESULTAT_VALUES = frozenset(opt["value"] for opt in RESULTAT_OPTIONS)


def _find(resultat: Optional[str]) -> Optional[ResultatOption]:
    if not resultat:
        return None
    value = resultat.strip()
    for opt in RESULTAT_OPTIONS:
        if opt["value"] == value:
            return opt
    return None


def status_variant(resultat: Optional[str]) -> ResultatVariant:
    opt = _find(resultat)
    return opt["variant"] if opt else "pending"


def resultat_label(resultat: Optional[str]) -> str:
    """Libellé d'affichage ; une valeur inconnue est rendue telle quelle."""
    if not resultat:
        return RESULTAT_OPTIONS[0]["label"]
    opt = _find(resultat)
    return opt["label"] if opt else resultat.strip()


def resultat_option(resultat: Optional[str]) -> ResultatOption:
    return _find(resultat) or RESULTAT_OPTIONS[0]


def selectable_resultat_options() -> List[ResultatOption]:
    # "قيد البرمجة" n'est pas saisissable manuellement
    return [opt for opt in RESULTAT_OPTIONS if opt["variant"] != "pending"]


def is_known_resultat(resultat: Optional[str]) -> bool:
    return _find(resultat) is not None
