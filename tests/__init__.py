"""Test package for Chat Gate.

Structure:
    - unit/: Controller, gate, client and schema tests with mocked I/O
    - integration/: Flows against an in-process stub backend and the host app

Leverages pytest with pytest-asyncio and pytest-check for soft assertions.
"""
