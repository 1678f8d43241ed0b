"""
Tests for register/login and bearer-token protection.
"""


class TestAuth:

    def test_register_returns_token(self, client):
        response = client.post("/api/auth/register", json={
            "name": "Sam",
            "email": "sam@example.com",
            "password": "supersecret",
        })

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "sam@example.com"
        assert body["access_token"]

    def test_duplicate_email(self, client, register_user):
        register_user(email="dup@example.com")
        response = client.post("/api/auth/register", json={
            "email": "dup@example.com",
            "password": "supersecret",
        })
        assert response.status_code == 400

    def test_short_password_rejected(self, client):
        response = client.post("/api/auth/register", json={
            "email": "short@example.com",
            "password": "123",
        })
        assert response.status_code == 422

    def test_login_and_current_user(self, client, register_user):
        register_user(email="login@example.com", password="supersecret")

        response = client.post("/api/auth/login", json={
            "email": "login@example.com",
            "password": "supersecret",
        })
        assert response.status_code == 200
        token = response.json()["access_token"]

        me = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["email"] == "login@example.com"

    def test_wrong_password(self, client, register_user):
        register_user(email="login@example.com", password="supersecret")

        response = client.post("/api/auth/login", json={
            "email": "login@example.com",
            "password": "not-the-password",
        })
        assert response.status_code == 401

    def test_protected_routes_need_a_token(self, client):
        assert client.get("/api/babies").status_code == 401
        bad = client.get("/api/babies", headers={"Authorization": "Bearer garbage"})
        assert bad.status_code == 401

    def test_root(self, client):
        assert client.get("/").status_code == 200
