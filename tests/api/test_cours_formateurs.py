# tests/api/test_cours_formateurs.py
import json

import pytest
from sqlmodel import Session, select

from ecole_maritime.db.models.cours_formateurs import CoursFormateur


@pytest.fixture
def refs(client, admin_headers) -> dict:
    formateur = client.post("/api/v1/formateurs", json={"nom_prenom": "الهادي الزين"}, headers=admin_headers)
    cours = client.post("/api/v1/cours", json={"titre": "الإسعافات الأولية"}, headers=admin_headers)
    assert formateur.status_code == 201 and cours.status_code == 201
    return {
        "formateur_id": formateur.json()["id"],
        "cours_id": cours.json()["id"],
        "date_debut": "2025-04-01",
        "date_fin": "2025-04-03",
    }


def _assignment_count(engine) -> int:
    with Session(engine) as s:
        return len(s.exec(select(CoursFormateur)).all())


def _post_raw(client, headers, body: str):
    # corps écrit à la main : NaN / Infinity ne passent pas par json.dumps(allow_nan=False)
    return client.post(
        "/api/v1/cours-formateurs",
        content=body,
        headers={**headers, "Content-Type": "application/json"},
    )


def test_assignment_is_created(client, engine, admin_headers, refs):
    res = client.post("/api/v1/cours-formateurs", json={**refs, "nombre_heures": 6}, headers=admin_headers)

    assert res.status_code == 201
    body = res.json()
    assert body["nombre_heures"] == 6
    assert body["cours_titre"] == "الإسعافات الأولية"
    assert _assignment_count(engine) == 1


@pytest.mark.parametrize("heures", ["NaN", "Infinity", "0", "-2"])
def test_non_positive_or_non_finite_hours_are_400(client, engine, admin_headers, refs, heures):
    body = json.dumps(refs)[:-1] + f', "nombre_heures": {heures}}}'

    res = _post_raw(client, admin_headers, body)

    assert res.status_code == 400
    assert "nombre_heures" in res.json()["error"]
    assert _assignment_count(engine) == 0


def test_update_with_nan_hours_is_400(client, admin_headers, refs):
    created = client.post("/api/v1/cours-formateurs", json={**refs, "nombre_heures": 4}, headers=admin_headers)
    assignment_id = created.json()["id"]

    res = client.put(
        f"/api/v1/cours-formateurs/{assignment_id}",
        content='{"nombre_heures": NaN}',
        headers={**admin_headers, "Content-Type": "application/json"},
    )

    assert res.status_code == 400
    assert client.get(f"/api/v1/cours-formateurs/{assignment_id}", headers=admin_headers).json()["nombre_heures"] == 4
