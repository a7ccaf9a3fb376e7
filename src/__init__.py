"""Chat Gate - browser chat interface gated behind a session start.

Combines NiceGUI for the page, FastAPI as the host application,
httpx for the collaborator endpoints, and Pydantic for data validation.

Components:
    - client: configuration and HTTP access to the chat backend
    - session: the start-session gate shown before the chat
    - conversation: message log, input buffer and request reconciliation
    - ui: NiceGUI page rendering the conversation
    - api: FastAPI host application
    - models: message, snapshot and wire schemas
"""

__version__ = "0.1.0"
