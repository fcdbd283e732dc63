import pytest
from fastapi.testclient import TestClient
from worksheet_ai.main import app
from worksheet_ai.api.worksheets import get_worksheet_generator
from worksheet_ai.services.generator import MockGenerator, NoJSONFoundError, WorksheetGenerator

client = TestClient(app)

_BODY = {
    "topic": "Fractions",
    "subject": "Math",
    "grade_level": "3",
    "question_count": 5,
    "question_types": ["multiple_choice"],
}


class FailingGenerator(WorksheetGenerator):
    async def generate_worksheet(self, request):
        raise NoJSONFoundError("no JSON found in response")


@pytest.fixture
def use_generator():
    def _use(generator):
        app.dependency_overrides[get_worksheet_generator] = lambda: generator
    yield _use
    app.dependency_overrides.clear()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_root():
    assert client.get("/").json()["health"] == "/health"


def test_generate_demo_worksheet(use_generator):
    use_generator(MockGenerator())
    response = client.post("/api/worksheets/generate", json=_BODY)
    assert response.status_code == 200
    data = response.json()
    assert len(data["questions"]) == 5
    assert data["status"] == "draft"
    assert data["downloads"] == 0
    assert data["id"].startswith("ws_")
    assert data["questions"][0]["points"] == 2


def test_generation_error_maps_to_502(use_generator):
    use_generator(FailingGenerator())
    response = client.post("/api/worksheets/generate", json=_BODY)
    assert response.status_code == 502
    assert "no JSON found" in response.json()["detail"]


def test_invalid_question_count(use_generator):
    use_generator(MockGenerator())
    response = client.post("/api/worksheets/generate", json={**_BODY, "question_count": 0})
    assert response.status_code == 422


def test_missing_topic(use_generator):
    use_generator(MockGenerator())
    body = {k: v for k, v in _BODY.items() if k != "topic"}
    response = client.post("/api/worksheets/generate", json=body)
    assert response.status_code == 422
