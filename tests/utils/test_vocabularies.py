# tests/utils/test_vocabularies.py
import pytest

from ecole_maritime.utils.grades import (
    CATEGORIE_OFFICIER,
    CATEGORIE_OFFICIER_SUPERIEUR,
    CATEGORIE_SERGENTS,
    CATEGORIE_SOUS_OFFICIER,
    categorie_from_grade,
)
from ecole_maritime.utils.resultats import (
    is_known_resultat,
    resultat_label,
    resultat_option,
    selectable_resultat_options,
    status_variant,
)
from ecole_maritime.utils.telephone import parse_telephone


# ===================================================================
#  Grades
# ===================================================================

@pytest.mark.parametrize(
    "grade, expected",
    [
        ("عقيد", CATEGORIE_OFFICIER_SUPERIEUR),
        ("ملازم أول", CATEGORIE_OFFICIER),
        (" نقيب ", CATEGORIE_OFFICIER),
        ("وكيل", CATEGORIE_SOUS_OFFICIER),
        ("رقيب اول", CATEGORIE_SERGENTS),
        ("غير معروف", CATEGORIE_SOUS_OFFICIER),
        (None, CATEGORIE_SOUS_OFFICIER),
    ],
)
def test_categorie_from_grade(grade, expected):
    assert categorie_from_grade(grade) == expected


# ===================================================================
#  Résultats
# ===================================================================

def test_known_resultat_maps_to_variant_and_label():
    assert status_variant("ناجح") == "success"
    assert resultat_label("ناجح") == "نــاجـح"
    assert is_known_resultat(" راسب ")


def test_unknown_resultat_falls_back():
    assert status_variant("ممتاز") == "pending"
    assert resultat_label("ممتاز") == "ممتاز"
    assert resultat_option(None)["variant"] == "pending"
    assert not is_known_resultat("ممتاز")


def test_pending_is_not_selectable():
    assert all(opt["variant"] != "pending" for opt in selectable_resultat_options())


# ===================================================================
#  Téléphone
# ===================================================================

@pytest.mark.parametrize(
    "value, expected",
    [("98 123 456", 98123456), (71000000, 71000000), ("", 0), ("   ", 0), (None, 0)],
)
def test_parse_telephone(value, expected):
    assert parse_telephone(value) == expected


def test_parse_telephone_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_telephone("98-123")


@pytest.mark.parametrize("value", ["1" * 16, 10**15, -98123456])
def test_parse_telephone_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        parse_telephone(value)


def test_parse_telephone_accepts_fifteen_digits():
    assert parse_telephone("1" * 15) == int("1" * 15)
