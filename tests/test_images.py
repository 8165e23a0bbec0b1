"""
Tests for image endpoints.
"""

import os
import uuid


def _create(client, category="home", src="https://cdn.example.com/a.jpg", alt="A"):
    return client.post("/api/images", json={"category": category, "src": src, "alt": alt})


class TestImageCreation:

    def test_create_image(self, client):
        response = _create(client)

        assert response.status_code == 201
        data = response.json()
        assert data["category"] == "home"
        assert data["src"] == "https://cdn.example.com/a.jpg"
        assert data["alt"] == "A"

    def test_alt_defaults_to_empty(self, client):
        response = client.post("/api/images", json={"category": "about", "src": "/uploads/x.png"})

        assert response.status_code == 201
        assert response.json()["alt"] == ""

    def test_missing_src(self, client):
        response = client.post("/api/images", json={"category": "home"})

        assert response.status_code == 400
        assert "src" in response.json()["error"]

    def test_unknown_category_rejected(self, client):
        response = _create(client, category="banner")

        assert response.status_code == 400
        assert "category" in response.json()["error"]


class TestImageListing:

    def test_filter_by_query_and_path(self, client):
        _create(client, category="home", src="https://cdn.example.com/1.jpg")
        _create(client, category="career-globe", src="https://cdn.example.com/2.jpg")
        _create(client, category="career-globe", src="https://cdn.example.com/3.jpg")

        by_query = client.get("/api/images?category=career-globe").json()
        by_path = client.get("/api/images/career-globe").json()

        assert [i["src"] for i in by_query] == [
            "https://cdn.example.com/3.jpg",
            "https://cdn.example.com/2.jpg",
        ]
        assert by_path == by_query
        assert len(client.get("/api/images").json()) == 3

    def test_unknown_category_filter_is_empty(self, client):
        _create(client)

        assert client.get("/api/images/nothing-here").json() == []


class TestImageUpdateAndDelete:

    def test_update(self, client):
        image_id = _create(client).json()["id"]

        response = client.put(f"/api/images/{image_id}", json={"alt": "New alt", "category": "about"})

        assert response.status_code == 200
        assert response.json()["alt"] == "New alt"
        assert response.json()["category"] == "about"

    def test_update_invalid_category(self, client):
        image_id = _create(client).json()["id"]
        assert client.put(f"/api/images/{image_id}", json={"category": "nope"}).status_code == 400

    def test_id_errors(self, client):
        assert client.put("/api/images/xyz", json={"alt": "a"}).status_code == 400
        assert client.delete("/api/images/xyz").status_code == 400
        assert client.delete(f"/api/images/{uuid.uuid4()}").status_code == 404

    def test_delete_removes_local_file(self, client, test_settings):
        upload = client.post(
            "/upload",
            files={"file": ("photo.png", b"\x89PNG fake", "image/png")},
            data={"category": "home"},
        ).json()
        path = os.path.join(test_settings.UPLOAD_DIR, upload["filename"])
        assert os.path.exists(path)

        image_id = _create(client, src=upload["url"]).json()["id"]
        response = client.delete(f"/api/images/{image_id}")

        assert response.status_code == 200
        assert not os.path.exists(path)

    def test_delete_remote_image_leaves_files_alone(self, client, test_settings):
        keep = os.path.join(test_settings.UPLOAD_DIR, "keep.png")
        with open(keep, "wb") as f:
            f.write(b"data")

        image_id = _create(client, src="https://cdn.example.com/keep.png").json()["id"]

        assert client.delete(f"/api/images/{image_id}").status_code == 200
        assert os.path.exists(keep)
