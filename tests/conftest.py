import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from completion_sdk.core.client import APIClient
from completion_sdk.core.config import APISettings

TEST_HOST = "http://testserver/v1"


def completion_payload(**overrides):
    payload = {
        "id": "cmpl-123",
        "object": "text_completion",
        "created": 1669599000,
        "model": "text-davinci-003",
        "choices": [
            {"text": "first", "index": 0, "logprobs": None, "finish_reason": "stop"},
            {"text": "second", "index": 1, "logprobs": None, "finish_reason": "length"},
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 7, "total_tokens": 12},
    }
    payload.update(overrides)
    return payload


def build_mock_api() -> FastAPI:
    """Completion endpoint that records requests and replays ``app.state.reply``."""
    app = FastAPI()
    app.state.received = []
    app.state.reply = (200, completion_payload())

    @app.post("/v1/completions")
    async def completions(request: Request) -> Response:
        app.state.received.append(
            {"headers": dict(request.headers), "body": await request.json()}
        )
        status_code, payload = app.state.reply
        if isinstance(payload, str):
            return Response(
                content=payload, status_code=status_code, media_type="application/json"
            )
        return JSONResponse(content=payload, status_code=status_code)

    return app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in (
        "OPENAPI_SECRET_KEY",
        "OPENAPI_ORGANIZATION_ID",
        "OPENAPI_REQUEST_TIMEOUT",
        "OPENAPI_HOST",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def mock_api():
    return build_mock_api()


@pytest.fixture
def settings():
    return APISettings.new("test-key").with_host(TEST_HOST)


@pytest.fixture
async def api_client(settings, mock_api):
    client = APIClient(settings, transport=httpx.ASGITransport(app=mock_api))
    yield client
    await client.aclose()
