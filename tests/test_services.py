"""
Tests for service and team member endpoints.
"""

import uuid


class TestServices:

    def test_create_and_list(self, client):
        client.post("/api/services", json={"title": "Editing", "description": "Copy editing"})
        client.post("/api/services", json={"title": "Design", "description": "Cover design"})

        data = client.get("/api/services").json()

        assert [s["title"] for s in data] == ["Design", "Editing"]

    def test_create_missing_description(self, client):
        response = client.post("/api/services", json={"title": "Editing"})

        assert response.status_code == 400
        assert "description" in response.json()["error"]

    def test_update(self, client):
        service_id = client.post(
            "/api/services", json={"title": "Editing", "description": "Copy editing"}
        ).json()["id"]

        response = client.put(f"/api/services/{service_id}", json={"description": "Line editing"})

        assert response.status_code == 200
        assert response.json()["description"] == "Line editing"
        assert response.json()["title"] == "Editing"

    def test_update_and_delete_error_paths(self, client):
        assert client.put("/api/services/abc", json={}).status_code == 400
        assert client.put(f"/api/services/{uuid.uuid4()}", json={}).status_code == 404
        assert client.delete("/api/services/abc").status_code == 400
        assert client.delete(f"/api/services/{uuid.uuid4()}").status_code == 404

    def test_delete(self, client):
        service_id = client.post(
            "/api/services", json={"title": "Editing", "description": "Copy editing"}
        ).json()["id"]

        response = client.delete(f"/api/services/{service_id}")

        assert response.status_code == 200
        assert response.json()["message"] == "Service deleted successfully"


class TestTeamMembers:

    def test_listed_in_display_order(self, client):
        client.post("/api/team", json={"name": "Ana", "role": "CEO", "bio": "Founder", "order": 2})
        client.post("/api/team", json={"name": "Ben", "role": "CTO", "bio": "Engineer", "order": 1})

        data = client.get("/api/team").json()

        assert [m["name"] for m in data] == ["Ben", "Ana"]

    def test_create_defaults(self, client):
        response = client.post("/api/team", json={"name": "Ana", "role": "CEO", "bio": "Founder"})

        assert response.status_code == 201
        assert response.json()["order"] == 0
        assert response.json()["image"] is None

    def test_missing_bio(self, client):
        response = client.post("/api/team", json={"name": "Ana", "role": "CEO"})
        assert response.status_code == 400

    def test_update_and_delete(self, client):
        member_id = client.post(
            "/api/team", json={"name": "Ana", "role": "CEO", "bio": "Founder"}
        ).json()["id"]

        response = client.put(f"/api/team/{member_id}", json={"image": "/uploads/ana.jpg"})
        assert response.json()["image"] == "/uploads/ana.jpg"

        assert client.delete(f"/api/team/{member_id}").status_code == 200
        assert client.delete(f"/api/team/{member_id}").status_code == 404
