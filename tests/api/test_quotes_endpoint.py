import uuid

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from quote_pdf.api.auth import StaticTokenVerifier, get_token_verifier
from quote_pdf.api.deps import get_quote_pdf_service
from quote_pdf.api.main import create_app
from quote_pdf.core.rendering.models import DegradedInput, PipelineFailure, PipelineSuccess

AUTH = {"Authorization": "Bearer test-token"}


@pytest.fixture
def mock_quote_pdf_service():
    return AsyncMock()


@pytest.fixture
def client(mock_quote_pdf_service):
    app = create_app()
    app.dependency_overrides[get_quote_pdf_service] = lambda: mock_quote_pdf_service
    app.dependency_overrides[get_token_verifier] = lambda: StaticTokenVerifier(["test-token"])
    return TestClient(app)


def _failure(kind: str) -> PipelineFailure:
    return PipelineFailure(error_kind=kind, message=f"{kind} happened", elapsed_ms=12.0)


def test_generate_quote_pdf_success(client, mock_quote_pdf_service):
    quote_id = uuid.uuid4()
    mock_quote_pdf_service.render_quote.return_value = PipelineSuccess(
        locator="https://files.test/quotes/quote-q-1-abc.pdf",
        filename="quote-q-1-abc.pdf",
        size_bytes=2048,
        elapsed_ms=321.5,
        degraded=[DegradedInput(resource="branding_profile", reason="lookup failed")],
    )

    response = client.post(
        "/api/v1/quotes/pdf",
        json={"quote_id": str(quote_id), "options": {"page_size": "Letter", "unknown_key": 1}},
        headers=AUTH,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["url"] == "https://files.test/quotes/quote-q-1-abc.pdf"
    assert data["filename"] == "quote-q-1-abc.pdf"
    assert data["elapsed_ms"] == 321.5
    assert data["degraded"] == [{"resource": "branding_profile", "reason": "lookup failed"}]

    request = mock_quote_pdf_service.render_quote.call_args.args[0]
    assert request.quote_id == quote_id
    assert request.options.page_size == "Letter"


@pytest.mark.parametrize(
    "kind,status_code",
    [
        ("ValidationError", 400),
        ("RecordNotFound", 404),
        ("DataSourceError", 502),
        ("EngineUnavailable", 503),
        ("PhaseTimeout", 504),
        ("RequestTimeout", 504),
        ("EmptyArtifact", 500),
        ("UploadFailed", 502),
        ("InternalError", 500),
    ],
)
def test_generate_quote_pdf_failure_status(client, mock_quote_pdf_service, kind, status_code):
    mock_quote_pdf_service.render_quote.return_value = _failure(kind)

    response = client.post("/api/v1/quotes/pdf", json={"quote_id": str(uuid.uuid4())}, headers=AUTH)

    assert response.status_code == status_code
    data = response.json()
    assert data["success"] is False
    assert data["error_kind"] == kind
    assert data["message"] == f"{kind} happened"


def test_missing_token_is_rejected(client, mock_quote_pdf_service):
    response = client.post("/api/v1/quotes/pdf", json={"quote_id": str(uuid.uuid4())})

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    mock_quote_pdf_service.render_quote.assert_not_called()


def test_unknown_token_is_rejected(client, mock_quote_pdf_service):
    response = client.post(
        "/api/v1/quotes/pdf",
        json={"quote_id": str(uuid.uuid4())},
        headers={"Authorization": "Bearer nope"},
    )

    assert response.status_code == 401
    mock_quote_pdf_service.render_quote.assert_not_called()


def test_missing_quote_id_is_unprocessable(client, mock_quote_pdf_service):
    response = client.post("/api/v1/quotes/pdf", json={"options": {}}, headers=AUTH)

    assert response.status_code == 422
    mock_quote_pdf_service.render_quote.assert_not_called()


def test_malformed_quote_id_is_unprocessable(client):
    response = client.post("/api/v1/quotes/pdf", json={"quote_id": "not-a-uuid"}, headers=AUTH)

    assert response.status_code == 422


def test_injected_settings_reach_the_service_cache(mock_quote_pdf_service):
    from quote_pdf.api.deps import get_service_cache
    from quote_pdf.configs import ApiSettings, Settings

    settings = Settings(api=ApiSettings(tokens=["injected-token"]))
    app = create_app(settings)
    app.dependency_overrides[get_quote_pdf_service] = lambda: mock_quote_pdf_service
    mock_quote_pdf_service.render_quote.return_value = _failure("RecordNotFound")
    client = TestClient(app)

    response = client.post(
        "/api/v1/quotes/pdf",
        json={"quote_id": str(uuid.uuid4())},
        headers={"Authorization": "Bearer injected-token"},
    )

    assert response.status_code == 404
    assert get_service_cache().settings is settings
