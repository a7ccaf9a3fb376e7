"""Unit tests for individual components in isolation.

Coverage:
    - conversation/: Log, input buffer and reconciliation rules
    - session/: Gate state transitions
    - client/: Request shapes and error collapsing via httpx.MockTransport
    - models/: Pydantic validation

Uses mocks for the backend client.
"""
