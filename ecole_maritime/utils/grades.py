from typing import Optional

CATEGORIE_OFFICIER_SUPERIEUR = "ضابط سامي"
CATEGORIE_OFFICIER = "ضابط"
CATEGORIE_SOUS_OFFICIER = "ضابط صف"
CATEGORIE_SERGENTS = "هيئة الرقباء"

# grade -> catégorie (variantes d'écriture incluses)
GRADE_CATEGORIES = {
    "عميد": CATEGORIE_OFFICIER_SUPERIEUR,
    "عقيد": CATEGORIE_OFFICIER_SUPERIEUR,
    "مقدم": CATEGORIE_OFFICIER_SUPERIEUR,
    "رائد": CATEGORIE_OFFICIER_SUPERIEUR,
    "نقيب": CATEGORIE_OFFICIER,
    "ملازم أول": CATEGORIE_OFFICIER,
    "ملازم اول": CATEGORIE_OFFICIER,
    "ملازم 1": CATEGORIE_OFFICIER,
    "ملازم": CATEGORIE_OFFICIER,
    "وكيل أول": CATEGORIE_SOUS_OFFICIER,
    "وكيل اول": CATEGORIE_SOUS_OFFICIER,
    "وكيل 1": CATEGORIE_SOUS_OFFICIER,
    "وكيل": CATEGORIE_SOUS_OFFICIER,
    "عريف أول": CATEGORIE_SOUS_OFFICIER,
    "عريف اول": CATEGORIE_SOUS_OFFICIER,
    "عريف 1": CATEGORIE_SOUS_OFFICIER,
    "عريف": CATEGORIE_SOUS_OFFICIER,
    "حرس": CATEGORIE_SERGENTS,
    "رقيب أول": CATEGORIE_SERGENTS,
    "رقيب اول": CATEGORIE_SERGENTS,
    "رقيب 1": CATEGORIE_SERGENTS,
    "رقيب": CATEGORIE_SERGENTS,
}


def categorie_from_grade(grade: Optional[str]) -> str:
    """Catégorie d'un agent selon son grade ; "ضابط صف" si grade inconnu."""
    if not grade:
        return CATEGORIE_SOUS_OFFICIER
    return GRADE_CATEGORIES.get(grade.strip(), CATEGORIE_SOUS_OFFICIER)
