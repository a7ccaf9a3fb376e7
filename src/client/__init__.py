"""HTTP access to the chat backend.

Responsibilities:
    - Client configuration loaded from the environment
    - Session start, chat completion and file upload calls
    - Collapsing every request failure into ChatApiError

Knows nothing about the conversation log or the UI.
"""

from src.client.api_client import ChatApiClient, ChatApiError
from src.client.config import ClientConfig, get_client_config

__all__ = ["ChatApiClient", "ChatApiError", "ClientConfig", "get_client_config"]
