"""Shared pytest fixtures for the full test suite."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from tests.gemini_stub import GeminiStub


_REAL_ASYNC_CLIENT = httpx.AsyncClient


@pytest.fixture
def gemini_stub(monkeypatch: pytest.MonkeyPatch) -> GeminiStub:
    """Route `httpx.AsyncClient` traffic from the Gemini client to a `GeminiStub`."""

    stub = GeminiStub()

    def _client_factory(*args: object, **kwargs: Any) -> httpx.AsyncClient:
        """Build a real async client backed by the stub transport."""

        kwargs["transport"] = httpx.MockTransport(stub.handler)
        return _REAL_ASYNC_CLIENT(*args, **kwargs)

    monkeypatch.setattr("burmese_ai.llm.gemini_client.httpx.AsyncClient", _client_factory)
    return stub
