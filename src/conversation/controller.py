"""Conversation controller: message log, input buffer and request reconciliation.

Concurrency policy on the single event loop:

- Chat submits are mutually exclusive. While a reply is pending the input
  buffer is disabled and further submits are ignored, so at most one
  placeholder exists in the log.
- Uploads are serialized among themselves, so their acknowledgements are
  appended in the order the uploads were started.
- Uploads are not excluded against a chat submit. The placeholder is
  reconciled by its recorded position, so an upload acknowledgement that
  arrives while a reply is pending lands after the placeholder and leaves
  it untouched.
"""

import asyncio
import logging
from collections.abc import Callable

from src.client.api_client import ChatApiClient, ChatApiError
from src.models.schemas import ConversationSnapshot, Message

logger = logging.getLogger(__name__)

CHAT_ERROR_TEXT = "Error fetching the chat response"
UPLOAD_REJECTED_TEXT = "txt 확장자 파일만 받습니다."
UPLOAD_ERROR_TEXT = "Error uploading the file"
ALLOWED_UPLOAD_EXTENSION = "txt"
SUBMIT_KEY = "Enter"

Listener = Callable[[ConversationSnapshot], None]


class ConversationStateError(Exception):
    """Raised when a log position is settled that holds no pending message."""

    pass


def has_allowed_extension(filename: str) -> bool:
    """Check the text after the last dot, case-insensitively.

    Names without a stem (".txt") are rejected.
    """
    stem, dot, extension = filename.rpartition(".")
    if not dot or not stem:
        return False
    return extension.lower() == ALLOWED_UPLOAD_EXTENSION


class ConversationController:
    """Owns the conversation log and the input buffer.

    State only changes through the public operations below. Subscribers get
    a fresh ConversationSnapshot after every mutation.
    """

    def __init__(self, api: ChatApiClient) -> None:
        self._api = api
        self._messages: list[Message] = []
        self._input_text = ""
        self._disabled = False
        self._upload_lock = asyncio.Lock()
        self._listeners: list[Listener] = []

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def input_text(self) -> str:
        return self._input_text

    @property
    def disabled(self) -> bool:
        return self._disabled

    def snapshot(self) -> ConversationSnapshot:
        return ConversationSnapshot(
            messages=tuple(self._messages),
            input_text=self._input_text,
            disabled=self._disabled,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for snapshots.

        Args:
            listener: Called with a snapshot after every state change.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    def _append(self, message: Message) -> int:
        self._messages.append(message)
        return len(self._messages) - 1

    def _settle(self, index: int, text: str) -> None:
        if not self._messages[index].is_pending:
            raise ConversationStateError(f"Message at position {index} is already settled")
        self._messages[index] = Message.bot(text)

    def set_input(self, text: str) -> None:
        """Replace the input buffer. Ignored while a reply is pending."""
        if self._disabled or text == self._input_text:
            return
        self._input_text = text
        self._notify()

    async def handle_keypress(self, key: str, shift: bool = False) -> None:
        """Plain Enter submits the buffer.

        Shift+Enter is left to the input widget, which inserts the line break
        at the cursor and reports the new text through set_input.
        """
        if key != SUBMIT_KEY or shift:
            return
        await self.submit_input()

    async def submit_input(self) -> None:
        await self.submit(self._input_text)

    async def submit(self, raw_text: str) -> None:
        """Send a user message and reconcile the bot reply into the log.

        Whitespace-only text and calls made while a reply is pending are
        ignored. Request failures become an error message in the log.

        Args:
            raw_text: The message exactly as typed.
        """
        if not raw_text.strip():
            return
        if self._disabled:
            logger.warning("Ignoring submit while a chat request is in flight")
            return

        self._append(Message.user(raw_text))
        self._input_text = ""
        self._disabled = True
        placeholder = self._append(Message.placeholder())
        self._notify()

        try:
            reply = await self._api.complete(raw_text)
        except ChatApiError as e:
            logger.error(f"Error fetching the chat response: {e}")
            reply = CHAT_ERROR_TEXT

        self._settle(placeholder, reply)
        self._disabled = False
        self._notify()

    async def upload_file(self, filename: str | None, content: bytes) -> None:
        """Upload a .txt file and report the outcome in the log.

        Args:
            filename: Name of the selected file (None if nothing was picked).
            content: Raw file bytes.
        """
        if not filename:
            return

        if not has_allowed_extension(filename):
            logger.warning(f"Rejected upload with unsupported extension: {filename}")
            self._append(Message.bot(UPLOAD_REJECTED_TEXT))
            self._notify()
            return

        async with self._upload_lock:
            try:
                reply = await self._api.upload_file(filename, content)
            except ChatApiError as e:
                logger.error(f"Error uploading {filename}: {e}")
                text = UPLOAD_ERROR_TEXT
            else:
                logger.info(f"Uploaded {filename} as file id {reply.file_id!r}")
                text = reply.message

            self._append(Message.bot(text))
            self._notify()
