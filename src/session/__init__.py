"""Session gate for the chat page.

Owns the overlay that covers the conversation until the backend
acknowledges a session start.
"""

from src.session.gate import START_LABEL, STARTING_LABEL, SessionGate

__all__ = ["START_LABEL", "STARTING_LABEL", "SessionGate"]
