"""Integration tests for components working together.

The stub backend in conftest.py is a real FastAPI app reached through
httpx.ASGITransport, so JSON and multipart bodies are encoded and parsed
for real. No external services are required.
"""
