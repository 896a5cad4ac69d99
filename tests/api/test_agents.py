# tests/api/test_agents.py
from sqlmodel import Session, select

from ecole_maritime.db.models.agents import Agent

AGENT = {
    "nom": "بن علي",
    "prenom": "محمد",
    "grade": "نقيب",
    "matricule": "M-1001",
    "telephone": "98 123 456",
}


def _agent_count(engine) -> int:
    with Session(engine) as s:
        return len(s.exec(select(Agent)).all())


class TestGuards:
    def test_unauthenticated_create_is_401_and_writes_nothing(self, client, engine, seeded):
        res = client.post("/api/v1/agents", json=AGENT)

        assert res.status_code == 401
        assert _agent_count(engine) == 0

    def test_role_without_create_is_403_and_writes_nothing(self, client, engine, make_user, login):
        make_user("lecteur@ecole.tn", "agent")
        headers = login("lecteur@ecole.tn")

        res = client.post("/api/v1/agents", json=AGENT, headers=headers)

        assert res.status_code == 403
        assert _agent_count(engine) == 0

    def test_read_only_role_can_list(self, client, make_user, login):
        make_user("lecteur@ecole.tn", "agent")
        headers = login("lecteur@ecole.tn")

        res = client.get("/api/v1/agents", headers=headers)

        assert res.status_code == 200
        assert res.json() == []


class TestAgentCrud:
    def test_create_derives_categorie_and_phone(self, client, admin_headers):
        res = client.post("/api/v1/agents", json=AGENT, headers=admin_headers)

        assert res.status_code == 201
        body = res.json()
        assert body["nom_prenom"] == "بن علي محمد"
        assert body["categorie"] == "ضابط"
        assert body["telephone"] == 98123456

    def test_duplicate_matricule_is_409(self, client, engine, admin_headers):
        client.post("/api/v1/agents", json=AGENT, headers=admin_headers)

        res = client.post("/api/v1/agents", json=AGENT, headers=admin_headers)

        assert res.status_code == 409
        assert _agent_count(engine) == 1

    def test_invalid_phone_is_400(self, client, admin_headers):
        res = client.post("/api/v1/agents", json={**AGENT, "telephone": "98-12"}, headers=admin_headers)

        assert res.status_code == 400

    def test_overlong_phone_is_400_and_writes_nothing(self, client, engine, admin_headers):
        res = client.post("/api/v1/agents", json={**AGENT, "telephone": "1" * 25}, headers=admin_headers)

        assert res.status_code == 400
        assert "error" in res.json()
        assert _agent_count(engine) == 0

    def test_missing_field_names_it(self, client, admin_headers):
        payload = {k: v for k, v in AGENT.items() if k != "nom"}

        res = client.post("/api/v1/agents", json=payload, headers=admin_headers)

        assert res.status_code == 400
        assert "nom" in res.json()["error"]

    def test_update_then_delete(self, client, admin_headers):
        agent_id = client.post("/api/v1/agents", json=AGENT, headers=admin_headers).json()["id"]

        res = client.put(
            f"/api/v1/agents/{agent_id}",
            json={"nom_prenom": "بن علي محمد", "grade": "رقيب", "matricule": "M-1001"},
            headers=admin_headers,
        )
        assert res.status_code == 200
        assert res.json()["categorie"] == "هيئة الرقباء"

        assert client.delete(f"/api/v1/agents/{agent_id}", headers=admin_headers).status_code == 204
        assert client.get(f"/api/v1/agents/{agent_id}", headers=admin_headers).status_code == 404
