from typing import Optional, Union

# plus long numéro E.164
MAX_TELEPHONE_DIGITS = 15


def parse_telephone(value: Optional[Union[str, int]]) -> int:
    """
    Numéro saisi (espaces tolérés) -> entier ; 0 si vide.
    Lève ValueError si la valeur contient autre chose que des chiffres
    ou dépasse MAX_TELEPHONE_DIGITS chiffres.
    """
    if value is None:
        return 0
    digits = "".join(str(value).split())
    if not digits:
        return 0
    if not digits.isdigit() or len(digits) > MAX_TELEPHONE_DIGITS:
        raise ValueError(f"Numéro de téléphone invalide: {value!r}")
    return int(digits)
