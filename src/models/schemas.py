from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SessionState(str, Enum):
    """States of the session gate."""

    NOT_STARTED = "not_started"
    STARTING = "starting"
    ACTIVE = "active"


class Message(BaseModel):
    """A single entry in the conversation log.

    Attributes:
        text: Message text (empty while a bot reply is pending).
        is_user: Whether the user wrote this message.
        is_pending: True only for a bot placeholder awaiting its reply.
    """

    model_config = ConfigDict(frozen=True)

    text: str = ""
    is_user: bool
    is_pending: bool = False

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(text=text, is_user=True)

    @classmethod
    def bot(cls, text: str) -> "Message":
        return cls(text=text, is_user=False)

    @classmethod
    def placeholder(cls) -> "Message":
        return cls(is_user=False, is_pending=True)


class ConversationSnapshot(BaseModel):
    """Read-only view of the conversation handed to subscribers.

    Attributes:
        messages: The log in display order.
        input_text: Current contents of the input buffer.
        disabled: Whether input is locked by an in-flight chat request.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...] = ()
    input_text: str = ""
    disabled: bool = False


class ChatRequest(BaseModel):
    """Request payload for the chat-completion endpoint."""

    message: str


class ChatReply(BaseModel):
    """Response payload from the chat-completion endpoint."""

    message: str


class UploadReply(BaseModel):
    """Response after a file upload.

    Attributes:
        message: Acknowledgement text to show in the conversation.
        file_id: Opaque server-side identifier, only used for logging.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str
    file_id: Any = Field(default=None, alias="fileId")
