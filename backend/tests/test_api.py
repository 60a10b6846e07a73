"""Tests for API routes."""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_pipeline
from app.exceptions import AggregationError, GenerationParseError, InputError
from app.main import app
from app.models import GenerationResult, Page, Role


@pytest.fixture
def pipeline():
    return MagicMock()


@pytest.fixture
def client(pipeline):
    app.dependency_overrides[get_pipeline] = lambda: pipeline
    yield TestClient(app)
    app.dependency_overrides.clear()


PAGE = {
    "meta": {"title": "123 Main St", "description": ""},
    "sections": [{"id": "hero", "title": "Hero", "html": "<h1>123 Main St</h1>"}],
    "html": "<main><h1>123 Main St</h1></main>",
}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_generate_success(client, pipeline):
    pipeline.run.return_value = GenerationResult(
        page=Page.model_validate(PAGE),
        q="123 Main St, Springfield",
        role=Role.AGENT,
        scraped="123 Main St Listing\n3bd/2ba, $450,000",
    )

    response = client.post("/api/generate", json={"q": "123 Main St, Springfield"})

    assert response.status_code == 200
    data = response.json()
    assert data["page"] == PAGE
    assert data["q"] == "123 Main St, Springfield"
    assert data["role"] == "agent"
    assert data["scraped"] == "123 Main St Listing\n3bd/2ba, $450,000"
    pipeline.run.assert_called_once_with("123 Main St, Springfield", Role.AGENT)


def test_generate_passes_role(client, pipeline):
    pipeline.run.return_value = GenerationResult(page=Page(), q="rates", role=Role.LOAN)

    response = client.post("/api/generate", json={"q": "rates", "role": "loan"})

    assert response.status_code == 200
    pipeline.run.assert_called_once_with("rates", Role.LOAN)


def test_generate_rejects_unknown_role(client, pipeline):
    response = client.post("/api/generate", json={"q": "x", "role": "broker"})

    assert response.status_code == 422
    pipeline.run.assert_not_called()


def test_generate_missing_query(client, pipeline):
    pipeline.run.side_effect = InputError("Missing input 'q'.")

    response = client.post("/api/generate", json={})

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing input 'q'."


@pytest.mark.parametrize(
    "error",
    [
        AggregationError("Firecrawl /search failed: 402 payment required", status=402, body="payment required"),
        GenerationParseError("LLM returned invalid JSON: Expecting value", raw="nope"),
    ],
)
def test_generate_upstream_failure(client, pipeline, error):
    pipeline.run.side_effect = error

    response = client.post("/api/generate", json={"q": "x"})

    assert response.status_code == 500
    assert response.json()["detail"] == str(error)


def test_export_markdown(client):
    response = client.post("/api/export/md", json={"page": PAGE})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/markdown")
    assert 'filename="page.md"' in response.headers["content-disposition"]
    assert response.text == "# 123 Main St\n\n## Hero\n\n123 Main St"


def test_export_html(client):
    response = client.post("/api/export/html", json={"page": PAGE})

    assert response.text == PAGE["html"]
    assert 'filename="page.html"' in response.headers["content-disposition"]


def test_export_json(client):
    response = client.post("/api/export/json", json={"page": PAGE})

    assert response.json() == PAGE
    assert 'filename="page.json"' in response.headers["content-disposition"]


def test_export_without_page(client):
    response = client.post("/api/export/md", json={})

    assert response.text == "# Generated Page\n\n_No content yet._"


def test_export_unknown_format(client):
    response = client.post("/api/export/pdf", json={"page": PAGE})

    assert response.status_code == 422


def test_preview(client):
    response = client.post("/api/preview", json={"page": PAGE})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<body><main><h1>123 Main St</h1></main></body>" in response.text


def test_preview_waiting(client):
    response = client.post("/api/preview", json={"page": {"html": ""}})

    assert "Waiting for output" in response.text


def test_preview_without_page(client):
    response = client.post("/api/preview", json={})

    assert "Waiting for output" in response.text


def test_generate_without_llm_key_returns_json_detail(monkeypatch):
    from app.config import Settings
    from app.services.aggregator import ContentAggregator
    from app.services.pipeline import PagePipeline

    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    settings = Settings(_env_file=None, openrouter_api_key=None, llm_provider="openrouter")
    firecrawl = MagicMock()
    firecrawl.search.return_value = {"results": [{"title": "Rates", "content": "30yr fixed"}]}
    pipeline = PagePipeline(settings, aggregator=ContentAggregator(settings, client=firecrawl))
    app.dependency_overrides[get_pipeline] = lambda: pipeline
    try:
        response = TestClient(app).post("/api/generate", json={"q": "rates"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json()["detail"].startswith("openrouter client error:")


def test_preview_is_served_sandboxed(client):
    response = client.post("/api/preview", json={"page": {"html": "<script>alert(1)</script>"}})

    assert response.headers["content-security-policy"] == "sandbox"


def test_preview_frame(client):
    response = client.post("/api/preview/frame", json={"page": PAGE})

    assert response.status_code == 200
    assert response.text.startswith("<iframe ")
    assert 'sandbox=""' in response.text
    assert "&lt;h1&gt;123 Main St&lt;/h1&gt;" in response.text
