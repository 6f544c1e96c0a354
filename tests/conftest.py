"""Shared fixtures: credential contexts and a fake Canva service."""

from typing import Any, Optional

import httpx
import pytest

from core.canva import CanvaOperations
from core.credentials import CredentialContext
from core.dispatcher import RequestDispatcher


class FakeCanva:
    """Stands in for api.canva.com behind an httpx.MockTransport.

    Every request is recorded, so tests can assert on what was sent (or that
    nothing was sent at all).
    """

    def __init__(
        self,
        status: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        exc: Optional[type] = None,
    ) -> None:
        self.status = status
        self.json_body = json_body
        self.text = text
        self.exc = exc
        self.requests: list[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc("connection dropped", request=request)
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        return httpx.Response(self.status, json=self.json_body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def configured() -> CredentialContext:
    return CredentialContext(app_id="app-123", api_key="key-abc")


@pytest.fixture
def unconfigured() -> CredentialContext:
    return CredentialContext()


@pytest.fixture
def fake_canva() -> FakeCanva:
    return FakeCanva(json_body={"id": "d1", "title": "Live Design"})


@pytest.fixture
def live_ops(configured, fake_canva) -> CanvaOperations:
    return CanvaOperations(RequestDispatcher(configured, transport=fake_canva.transport))


@pytest.fixture
def mock_ops(unconfigured, fake_canva) -> CanvaOperations:
    # The transport is wired in so tests can prove it is never touched.
    return CanvaOperations(RequestDispatcher(unconfigured, transport=fake_canva.transport))
