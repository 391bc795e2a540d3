"""Shared pytest fixtures for valhalla-client tests."""

from __future__ import annotations

import json
import threading
from typing import Any, Callable, Dict, Generator, List, Optional, Union

import pytest
import requests

from valhalla_client.config import reset_settings

ENDPOINT = "http://valhalla.test"


class TrackingResponse(requests.Response):
    """requests.Response built in memory that records whether it was closed."""

    def __init__(self) -> None:
        super().__init__()
        self.closed = False

    def close(self) -> None:
        self.closed = True


def build_response(
    status_code: int = 200,
    body: Union[Dict[str, Any], List[Any], str, bytes, None] = None,
) -> TrackingResponse:
    response = TrackingResponse()
    response.status_code = status_code
    if isinstance(body, bytes):
        content = body
    elif isinstance(body, str):
        content = body.encode("utf-8")
    elif body is None:
        content = b""
    else:
        content = json.dumps(body).encode("utf-8")
    response._content = content
    response._content_consumed = True
    response.encoding = "utf-8"
    return response


class MockTransport:
    """Records outgoing requests and replays canned responses.

    ``responses`` items are either responses to return or exceptions to raise.
    A ``handler`` callable, when given, builds the response from the request.
    """

    def __init__(
        self,
        responses: Optional[List[Union[requests.Response, Exception]]] = None,
        handler: Optional[Callable[[requests.Request], requests.Response]] = None,
    ) -> None:
        self.responses = list(responses or [])
        self.handler = handler
        self.calls: List[Dict[str, Any]] = []
        self.returned: List[requests.Response] = []
        self.closed = False
        self._lock = threading.Lock()

    def send(self, request: requests.Request, timeout: Optional[float]) -> requests.Response:
        with self._lock:
            self.calls.append(
                {
                    "method": request.method,
                    "url": request.url,
                    "headers": dict(request.headers),
                    "data": request.data,
                    "timeout": timeout,
                }
            )
            if self.handler is None:
                item = self.responses.pop(0) if self.responses else build_response(200, {})
            else:
                item = None
        if item is None:
            item = self.handler(request)
        if isinstance(item, Exception):
            raise item
        with self._lock:
            self.returned.append(item)
        return item

    def close(self) -> None:
        self.closed = True

    def sent_json(self, index: int = 0) -> Any:
        return json.loads(self.calls[index]["data"])


@pytest.fixture
def make_response() -> Callable[..., TrackingResponse]:
    """Factory for in-memory responses."""
    return build_response


@pytest.fixture
def transport_factory() -> Callable[..., MockTransport]:
    """Factory for MockTransport instances."""
    return MockTransport


@pytest.fixture
def clean_env(monkeypatch, tmp_path) -> None:
    """Remove all VALHALLA_* env vars and keep .env lookups away from the repo."""
    env_vars = [
        "VALHALLA_ENDPOINT",
        "VALHALLA_TIMEOUT",
        "VALHALLA_VERIFY_TLS",
        "VALHALLA_CA_BUNDLE",
        "VALHALLA_API_KEY",
        "VALHALLA_API_KEY_HEADER",
        "VALHALLA_LOG_LEVEL",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings singleton between tests to ensure isolation."""
    reset_settings()
    yield
    reset_settings()
