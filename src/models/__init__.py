"""Pydantic models for the conversation state and the backend wire format.

Provides type safety and validation at the HTTP boundary.

Models:
    - Message: Individual entry in the conversation log
    - ConversationSnapshot: Read-only view published to the UI
    - SessionState: Session gate states
    - ChatRequest / ChatReply: Chat-completion payloads
    - UploadReply: File upload acknowledgement
"""

from src.models.schemas import (
    ChatReply,
    ChatRequest,
    ConversationSnapshot,
    Message,
    SessionState,
    UploadReply,
)

__all__ = [
    "ChatReply",
    "ChatRequest",
    "ConversationSnapshot",
    "Message",
    "SessionState",
    "UploadReply",
]
