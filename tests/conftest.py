from __future__ import annotations

from typing import Any

import httpx
import pytest

from core.config import AppSettings


class FakeUpstream:
    """Routes exact URLs to canned responses and records every request."""

    def __init__(self) -> None:
        self.routes: dict[str, dict[str, Any]] = {}
        self.calls: list[str] = []

    def add(
        self,
        url: str,
        *,
        status: int = 200,
        json: Any = None,
        text: str | None = None,
        exc: type[httpx.HTTPError] | None = None,
    ) -> None:
        self.routes[url] = {"status": status, "json": json, "text": text, "exc": exc}

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.calls.append(url)
        route = self.routes.get(url)
        if route is None:
            return httpx.Response(404, json={"message": f"no route for {url}"})
        if route["exc"] is not None:
            raise route["exc"]("simulated failure", request=request)
        if route["text"] is not None:
            return httpx.Response(route["status"], text=route["text"])
        return httpx.Response(route["status"], json=route["json"])

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


class FakeProvider:
    """Test double for a LookupProvider with call counting."""

    def __init__(self, name: str, *, result: Any = None, error: Exception | None = None) -> None:
        self.name = name
        self.result = result
        self.error = error
        self.calls: list[str] = []

    async def resolve(self, identifier: str) -> Any:
        self.calls.append(identifier)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()
