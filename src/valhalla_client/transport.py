"""HTTP transport used by ValhallaClient.

The client only depends on the ``HTTPTransport`` protocol, so tests and callers
can inject their own transport. ``RequestsTransport`` is the default one, backed
by a single ``requests.Session`` whose connection pool is shared by every call.
"""
from __future__ import annotations
import threading
from typing import Any, Optional, Protocol
import requests

from .models import ClientConfig


class HTTPTransport(Protocol):
    def send(
        self,
        request: requests.Request,
        timeout: Optional[float],
    ) -> requests.Response:
        ...


class RequestsTransport:
    def __init__(
        self,
        config: ClientConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config
        self._session = session
        self._session_lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        # Double-checked so concurrent first calls share one session
        if self._session is None:
            with self._session_lock:
                if self._session is None:
                    self._session = requests.Session()
        return self._session

    def close(self) -> None:
        with self._session_lock:
            if self._session is not None:
                self._session.close()
                self._session = None

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def send(
        self,
        request: requests.Request,
        timeout: Optional[float],
    ) -> requests.Response:
        session = self.session
        # Merges session-level headers/auth/cookies into the request
        prepared = session.prepare_request(request)
        settings = session.merge_environment_settings(
            prepared.url,
            proxies=self._config.proxies or {},
            stream=False,
            verify=self._config.verify,
            cert=self._config.cert,
        )
        return session.send(prepared, timeout=timeout, allow_redirects=True, **settings)


__all__ = ["HTTPTransport", "RequestsTransport"]
