"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - user: NiceGUI simulated browser (nicegui.testing user plugin)
    - client_config: ClientConfig pointing at a test host with no start delay
    - backend: Stub chat backend (FastAPI) recording every call it receives
    - api_client: ChatApiClient wired to the stub backend via ASGITransport
    - async_client: HTTPX client for the host application
"""

import asyncio
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field

import pytest
from fastapi import FastAPI, HTTPException, UploadFile
from httpx import ASGITransport, AsyncClient

from src.api import create_app
from src.client.api_client import ChatApiClient
from src.client.config import ClientConfig
from src.models.schemas import ChatRequest

pytest_plugins = ["nicegui.testing.user_plugin"]


@dataclass
class StubBackend:
    """In-process chat backend with switchable failure modes."""

    app: FastAPI
    calls: list[str] = field(default_factory=list)
    uploads: list[tuple[str, bytes]] = field(default_factory=list)
    fail: bool = False
    hold_chat: asyncio.Event | None = None


def build_backend() -> StubBackend:
    app = FastAPI()
    backend = StubBackend(app=app)

    def record(name: str) -> None:
        backend.calls.append(name)
        if backend.fail:
            raise HTTPException(status_code=500, detail="backend down")

    @app.post("/chat/start")
    async def chat_start() -> dict[str, str]:
        record("start")
        return {}

    @app.post("/chat")
    async def chat(request: ChatRequest) -> dict[str, str]:
        record("chat")
        if backend.hold_chat is not None:
            await backend.hold_chat.wait()
        return {"message": f"echo: {request.message}"}

    @app.post("/upload")
    async def upload(file: UploadFile) -> dict[str, str]:
        record("upload")
        content = await file.read()
        backend.uploads.append((file.filename or "", content))
        return {"message": f"received {file.filename}", "fileId": f"file-{len(backend.uploads)}"}

    return backend


@pytest.fixture
def client_config() -> ClientConfig:
    """Return configuration for an in-process backend.

    Returns:
        ClientConfig with a test base URL and no start delay.
    """
    return ClientConfig(api_base_url="http://backend.test", start_delay=0.0)


@pytest.fixture
def backend() -> StubBackend:
    """Return a fresh stub backend."""
    return build_backend()


@pytest.fixture
def api_client(client_config: ClientConfig, backend: StubBackend) -> ChatApiClient:
    """Return an API client routed to the stub backend."""
    return ChatApiClient(config=client_config, transport=ASGITransport(app=backend.app))


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the host application.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
