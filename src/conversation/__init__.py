"""Client-side conversation state machine.

Responsibilities:
    - Ordered message log with a single pending bot placeholder
    - Input buffer and its disabled flag
    - Chat submission and .txt upload with reconciliation of results

The UI reads snapshots and never mutates the log directly.
"""

from src.conversation.controller import (
    CHAT_ERROR_TEXT,
    UPLOAD_ERROR_TEXT,
    UPLOAD_REJECTED_TEXT,
    ConversationController,
    ConversationStateError,
    has_allowed_extension,
)

__all__ = [
    "CHAT_ERROR_TEXT",
    "UPLOAD_ERROR_TEXT",
    "UPLOAD_REJECTED_TEXT",
    "ConversationController",
    "ConversationStateError",
    "has_allowed_extension",
]
