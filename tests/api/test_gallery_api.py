"""Tests for the gallery endpoints."""


def add(client, label, descriptor):
    return client.post("/api/v1/gallery/labels", json={"label": label, "descriptor": descriptor})


class TestGalleryEndpoints:
    def test_empty_gallery(self, client):
        response = client.get("/api/v1/gallery")
        assert response.status_code == 200
        assert response.json() == {"dimension": 4, "entries": []}

    def test_add_labels(self, client):
        assert add(client, "alice", [0.3, 0, 0, 0]).status_code == 201
        response = add(client, "alice", [0, 0, 0, 0.2])
        assert response.status_code == 201
        assert response.json()["entries"] == [{"label": "alice", "exemplars": 2}]

    def test_blank_label_rejected(self, client, gallery):
        response = add(client, "  ", [0, 0, 0, 0])
        assert response.status_code == 400
        assert len(gallery) == 0

    def test_wrong_dimension_rejected(self, client, gallery):
        response = add(client, "alice", [0, 0])
        assert response.status_code == 400
        assert len(gallery) == 0

    def test_match_every_probe(self, client):
        add(client, "alice", [0.3, 0, 0, 0])
        add(client, "bob", [0, 0.2, 0, 0])
        add(client, "carol", [0, 0, 0.5, 0])

        response = client.post(
            "/api/v1/gallery/match",
            json={"probes": [[0, 0, 0, 0], [0, 0, 0, 5]], "threshold": 0.6},
        )
        assert response.status_code == 200
        matches = response.json()["matches"]
        assert matches[0]["label"] == "bob"
        assert matches[0]["display"] == "bob (0.2)"
        assert matches[1]["matched"] is False
        assert matches[1]["display"].startswith("unknown (")

    def test_match_on_empty_gallery(self, client):
        response = client.post("/api/v1/gallery/match", json={"probes": [[0, 0, 0, 0]]})
        assert response.status_code == 200
        assert response.json()["matches"] == [
            {"label": None, "distance": None, "matched": False, "display": "unknown"}
        ]

    def test_match_dimension_mismatch(self, client):
        add(client, "alice", [0.3, 0, 0, 0])
        response = client.post("/api/v1/gallery/match", json={"probes": [[0, 0]]})
        assert response.status_code == 400

    def test_match_on_empty_gallery_checks_dimension(self, client):
        response = client.post("/api/v1/gallery/match", json={"probes": [[0, 0, 0]]})
        assert response.status_code == 400
        assert "mismatch" in response.json()["detail"]
