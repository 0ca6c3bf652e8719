from fastapi.testclient import TestClient

from data_designer_prompt_humanizer.api import create_app

client = TestClient(create_app(seed=1))


class TestApi:
    def test_health(self):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0"}

    def test_analyze(self):
        response = client.post("/api/analyze", json={"prompt": "portrait of a man, 8k"})
        assert response.status_code == 200
        body = response.json()
        assert body["score"] == 65
        assert body["band"] == "high"
        assert [i["id"] for i in body["issues"]] == [
            "8k-4k", "portrait-generic", "missing-imperfection", "missing-camera",
        ]

    def test_transform(self):
        response = client.post(
            "/api/transform",
            json={"prompt": "a beautiful woman in a coffee shop, 8k", "style": "phone", "mood": "harsh"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["modifiers_added"][0] == "smartphone photo"
        assert body["improvement"] == body["original_score"] - body["new_score"]

    def test_transform_bad_config_falls_back(self):
        response = client.post("/api/transform", json={"prompt": "a dog", "style": "daguerreotype"})
        assert response.status_code == 200

    def test_missing_or_blank_prompt_is_400(self):
        for path in ("/api/transform", "/api/analyze", "/api/suggest"):
            assert client.post(path, json={}).status_code == 400
            response = client.post(path, json={"prompt": "  "})
            assert response.status_code == 400
            assert "error" in response.json()

    def test_suggest(self):
        response = client.post("/api/suggest", json={"prompt": "mountain lake at dawn"})
        assert response.status_code == 200
        additions = response.json()["recommended_additions"]
        assert set(additions) == {"camera", "lighting", "imperfections", "composition"}

    def test_modifiers(self):
        body = client.get("/api/modifiers").json()
        assert "film" in body["cameras"]
        assert isinstance(body["lenses"], list)
