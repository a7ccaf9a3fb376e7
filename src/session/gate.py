"""Session gate shown before the conversation becomes usable."""

import asyncio
import logging

from src.client.api_client import ChatApiClient, ChatApiError
from src.models.schemas import SessionState

logger = logging.getLogger(__name__)

START_LABEL = "Start chat"
STARTING_LABEL = "Starting..."


class SessionGate:
    """Blocks the chat behind an overlay until the backend accepts a session.

    Retries are always user-initiated: a failed start drops back to
    NOT_STARTED and the start button becomes clickable again.
    """

    def __init__(self, api: ChatApiClient, start_delay: float | None = None) -> None:
        self._api = api
        self._start_delay = (
            api.config.start_delay if start_delay is None else start_delay
        )
        self.state = SessionState.NOT_STARTED

    @property
    def overlay_visible(self) -> bool:
        return self.state is not SessionState.ACTIVE

    @property
    def can_start(self) -> bool:
        return self.state is SessionState.NOT_STARTED

    @property
    def button_label(self) -> str:
        return STARTING_LABEL if self.state is SessionState.STARTING else START_LABEL

    async def start(self) -> None:
        """Start the session and hide the overlay once the backend agrees."""
        if not self.can_start:
            return

        self.state = SessionState.STARTING
        try:
            await self._api.start_session()
        except ChatApiError as e:
            logger.error(f"Failed to start chat session: {e}")
            self.state = SessionState.NOT_STARTED
            return

        await asyncio.sleep(self._start_delay)
        self.state = SessionState.ACTIVE
