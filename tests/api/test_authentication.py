# tests/api/test_authentication.py
from ecole_maritime.core.config import settings


class TestSignIn:
    def test_sign_in_sets_session_cookie(self, client, make_user, password):
        make_user("coord@ecole.tn", "coordinateur")

        res = client.post("/api/v1/auth/sign-in", json={"email": "Coord@Ecole.tn", "password": password})

        assert res.status_code == 200
        body = res.json()
        assert body["email"] == "coord@ecole.tn"
        assert body["role"] == "coordinateur"
        assert settings.AUTH_SESSION_COOKIE_NAME in res.cookies

        # le cookie suffit pour les appels suivants
        me = client.get("/api/v1/auth/me")
        assert me.status_code == 200
        assert me.json()["role_display_name"] == "Service Programmation"

    def test_wrong_password_is_401(self, client, make_user):
        make_user("coord@ecole.tn", "coordinateur")

        res = client.post("/api/v1/auth/sign-in", json={"email": "coord@ecole.tn", "password": "mauvais"})

        assert res.status_code == 401
        assert "error" in res.json()

    def test_banned_user_cannot_sign_in(self, client, make_user, password):
        make_user("banni@ecole.tn", "agent", banned=True)

        res = client.post("/api/v1/auth/sign-in", json={"email": "banni@ecole.tn", "password": password})

        assert res.status_code == 401

    def test_missing_field_is_400(self, client):
        res = client.post("/api/v1/auth/sign-in", json={"email": "x@ecole.tn"})

        assert res.status_code == 400
        assert "password" in res.json()["error"]


class TestSessionLifecycle:
    def test_sign_out_revokes_session(self, client, make_user, login):
        make_user("coord@ecole.tn", "coordinateur")
        headers = login("coord@ecole.tn")
        assert client.get("/api/v1/auth/me", headers=headers).status_code == 200

        res = client.post("/api/v1/auth/sign-out", headers=headers)

        assert res.status_code == 204
        assert client.get("/api/v1/auth/me", headers=headers).status_code == 401

    def test_sign_out_without_session_is_idempotent(self, client):
        assert client.post("/api/v1/auth/sign-out").status_code == 204

    def test_garbage_token_is_401(self, client, seeded):
        res = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer pas-un-jwt"})

        assert res.status_code == 401

    def test_kill_session_revokes_every_session(self, client, make_user, login, admin_headers):
        user = make_user("coord@ecole.tn", "coordinateur")
        first = login("coord@ecole.tn")
        second = login("coord@ecole.tn")

        res = client.post("/api/v1/users/kill-session", json={"user_id": user.id}, headers=admin_headers)

        assert res.status_code == 200
        assert res.json()["revoked"] == 2
        assert client.get("/api/v1/auth/me", headers=first).status_code == 401
        assert client.get("/api/v1/auth/me", headers=second).status_code == 401


class TestMyPermissions:
    def test_unauthenticated_is_401(self, client, seeded):
        assert client.get("/api/v1/me/permissions").status_code == 401

    def test_coordinateur_matrix_and_ui(self, client, make_user, login):
        make_user("coord@ecole.tn", "coordinateur")
        headers = login("coord@ecole.tn")

        res = client.get("/api/v1/me/permissions", headers=headers)

        assert res.status_code == 200
        body = res.json()
        assert body["role"] == "coordinateur"
        assert body["permissions"]["formation"] == ["edit", "view"]
        assert "user" not in body["permissions"]
        assert "agent_export_excel" in body["ui_components"]
        assert body["ui_components"] == sorted(body["ui_components"])

    def test_administrateur_gets_every_action(self, client, admin_headers):
        res = client.get("/api/v1/me/permissions", headers=admin_headers)

        perms = res.json()["permissions"]
        assert perms["agent"] == ["create", "edit", "delete", "view"]
        assert "set-role" in perms["user"]
