"""Async HTTP client for the chat backend.

Wraps the three collaborator endpoints (session start, chat completion,
file upload). Every failure mode - transport errors, HTTP error statuses,
timeouts and malformed bodies - surfaces as a single ChatApiError so callers
only need one failure branch.
"""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel

from src.client.config import ClientConfig, get_client_config
from src.models.schemas import ChatReply, ChatRequest, UploadReply

logger = logging.getLogger(__name__)

CHAT_START_PATH = "/chat/start"
CHAT_PATH = "/chat"
UPLOAD_PATH = "/upload"

ModelT = TypeVar("ModelT", bound=BaseModel)


class ChatApiError(Exception):
    """Raised when a call to the chat backend fails."""

    pass


class ChatApiClient:
    """Client for the chat backend endpoints.

    A fresh httpx.AsyncClient is opened per call, so one instance can be
    shared by concurrent actions on the same event loop.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used to point the client
                       at an in-process app or a mock.
        """
        self._config = config or get_client_config()
        self._transport = transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _open(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.api_base_url,
            timeout=httpx.Timeout(self._config.request_timeout),
            transport=self._transport,
        )

    async def _post(self, path: str, **kwargs) -> httpx.Response:
        async with self._open() as client:
            try:
                response = await client.post(path, **kwargs)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise ChatApiError(
                    f"POST {path} returned HTTP {e.response.status_code}"
                ) from e
            except httpx.HTTPError as e:
                raise ChatApiError(f"POST {path} failed: {e!r}") from e
            return response

    @staticmethod
    def _parse(response: httpx.Response, model: type[ModelT]) -> ModelT:
        # ValidationError and JSONDecodeError both derive from ValueError
        try:
            return model.model_validate(response.json())
        except ValueError as e:
            raise ChatApiError(f"Malformed response from {response.url.path}") from e

    async def start_session(self) -> None:
        """Signal the backend that a chat session begins.

        Raises:
            ChatApiError: If the request fails or returns a non-2xx status.
        """
        await self._post(CHAT_START_PATH)
        logger.info("Chat session started")

    async def complete(self, message: str) -> str:
        """Send a message to the chat-completion endpoint.

        Args:
            message: The raw user message.

        Returns:
            The reply text.

        Raises:
            ChatApiError: If the request fails or the reply is malformed.
        """
        payload = ChatRequest(message=message)
        response = await self._post(CHAT_PATH, json=payload.model_dump())
        reply = self._parse(response, ChatReply)
        return reply.message

    async def upload_file(self, filename: str, content: bytes) -> UploadReply:
        """Upload a file as a single multipart field.

        Args:
            filename: Original file name.
            content: Raw file bytes.

        Returns:
            UploadReply with acknowledgement text and server file id.

        Raises:
            ChatApiError: If the request fails or the reply is malformed.
        """
        response = await self._post(
            UPLOAD_PATH,
            files={"file": (filename, content, "text/plain")},
        )
        return self._parse(response, UploadReply)
