"""
Tests for baby profile CRUD, age view and dashboard.
"""

from datetime import date, timedelta

from app.utils.age_calculator import age_view


class TestBabyCrud:

    def test_create_and_list(self, client, auth_headers, baby):
        assert baby["name"] == "Adam"
        assert baby["birth_date"] == "2024-01-15"

        response = client.get("/api/babies", headers=auth_headers)
        assert response.status_code == 200
        assert [b["id"] for b in response.json()] == [baby["id"]]

    def test_future_birth_date_rejected(self, client, auth_headers):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        response = client.post("/api/babies", headers=auth_headers, json={
            "name": "Later",
            "gender": "girl",
            "birth_date": tomorrow,
            "theme_color": "#f472b6",
        })
        assert response.status_code == 422

    def test_missing_theme_color_rejected(self, client, auth_headers):
        response = client.post("/api/babies", headers=auth_headers, json={
            "name": "Eve",
            "gender": "girl",
            "birth_date": "2024-02-01",
        })
        assert response.status_code == 422

    def test_update_keeps_unsent_fields(self, client, auth_headers, baby):
        response = client.put(f"/api/babies/{baby['id']}", headers=auth_headers, json={
            "theme_color": "#22c55e",
        })

        assert response.status_code == 200
        body = response.json()
        assert body["theme_color"] == "#22c55e"
        assert body["name"] == "Adam"

    def test_delete(self, client, auth_headers, baby):
        response = client.delete(f"/api/babies/{baby['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert client.get("/api/babies", headers=auth_headers).json() == []

    def test_other_users_baby_is_not_found(self, client, baby, register_user):
        stranger = register_user(email="stranger@example.com")

        assert client.put(f"/api/babies/{baby['id']}", headers=stranger, json={"name": "X"}).status_code == 404
        assert client.delete(f"/api/babies/{baby['id']}", headers=stranger).status_code == 404
        assert client.get(f"/api/babies/{baby['id']}/age", headers=stranger).status_code == 404


class TestAgeAndDashboard:

    def test_age_view(self, client, auth_headers, baby):
        response = client.get(f"/api/babies/{baby['id']}/age", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == age_view(date(2024, 1, 15))._asdict()

    def test_dashboard_without_data(self, client, auth_headers, baby):
        response = client.get(f"/api/babies/{baby['id']}/dashboard", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["baby"]["id"] == baby["id"]
        assert body["latest_growth"] is None
        assert body["previous_growth"] is None
        assert body["weight_increased"] is False
        assert body["next_milestone"]["id"] == 1
        assert body["all_milestones_achieved"] is False
        assert body["milestone_progress"] == 0

    def test_dashboard_with_growth_and_milestones(self, client, auth_headers, baby):
        for recorded_at, weight in (("2024-02-01", 4.1), ("2024-03-01", 5.3)):
            client.post("/api/growth", headers=auth_headers, json={
                "baby_id": baby["id"],
                "weight": weight,
                "height": 55,
                "recorded_at": recorded_at,
            })
        client.post(f"/api/babies/{baby['id']}/milestones", headers=auth_headers, json={
            "milestone_id": 1,
            "achieved_at": "2024-03-10",
        })

        body = client.get(f"/api/babies/{baby['id']}/dashboard", headers=auth_headers).json()

        assert body["latest_growth"]["recorded_at"] == "2024-03-01"
        assert body["previous_growth"]["recorded_at"] == "2024-02-01"
        assert body["weight_increased"] is True
        assert body["next_milestone"]["title"] == "Head Control"
        assert body["milestone_progress"] == 8
