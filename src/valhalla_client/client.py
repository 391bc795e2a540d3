from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar
import requests
from pydantic import BaseModel

from .constants import ELEVATION_PATH, ISOCHRONE_PATH, JSON_CONTENT_TYPE, ROUTE_PATH
from .elevation import ElevationInput, ElevationOutput
from .errors import ValhallaBuildError, ValhallaHookError, ValhallaTransportError
from .isochrone import IsochroneInput, IsochroneOutput
from .models import ClientConfig
from .route import RouteInput, RouteOutput
from .serialization import decode_response, encode_body, service_error_from_response
from .transport import HTTPTransport, RequestsTransport

LOGGER = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Called with the outgoing request before it is sent; may mutate it or raise to abort
BeforeRequestFn = Callable[[requests.Request], None]

# Raised by requests while preparing the URL or headers, before any connection attempt
_PREPARE_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidHeader,
)


class ValhallaClient:
    """Client for the Valhalla routing service.

    A client holds no per-call state, so one instance can serve concurrent
    callers. Set the before-request hook before sharing the client.

    Example:
        >>> config = ClientConfig(endpoint="https://valhalla.example.com")
        >>> with ValhallaClient(config) as client:
        ...     output = client.route(RouteInput(locations=[...], costing="auto"))
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[HTTPTransport] = None,
    ) -> None:
        self._config = config
        # Only close a transport we created
        self._owns_transport = transport is None
        self._transport: HTTPTransport = transport or RequestsTransport(config)
        self._before_request: Optional[BeforeRequestFn] = None

    def close(self) -> None:
        if self._owns_transport and hasattr(self._transport, "close"):
            self._transport.close()

    def __enter__(self) -> "ValhallaClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def session(self) -> requests.Session:
        """Underlying requests session, for mounting adapters or session-wide auth."""
        if not isinstance(self._transport, RequestsTransport):
            raise TypeError("client transport is not backed by a requests.Session")
        return self._transport.session

    def before_request(self, fn: Optional[BeforeRequestFn]) -> None:
        """Install (or clear with None) the hook called before every request."""
        self._before_request = fn

    def _build_url(self, path: str) -> str:
        endpoint = self._config.endpoint
        if not endpoint:
            raise ValhallaBuildError("unable to build request uri: endpoint is empty")
        return f"{endpoint.rstrip('/')}/{path.lstrip('/')}"

    def _build_headers(self) -> Dict[str, str]:
        headers = {
            "Accept": JSON_CONTENT_TYPE,
            "User-Agent": self._config.user_agent,
        }
        headers.update(self._config.custom_headers)
        headers["Content-Type"] = JSON_CONTENT_TYPE
        return headers

    def _build_request(self, path: str, body: Any) -> requests.Request:
        request = requests.Request(
            method="POST",
            url=self._build_url(path),
            headers=self._build_headers(),
        )

        hook = self._before_request
        if hook is not None:
            try:
                hook(request)
            except Exception as exc:
                raise ValhallaHookError(
                    f"error while calling before-request hook: {exc}"
                ) from exc

        payload = encode_body(body)
        if payload is not None:
            request.data = payload
        return request

    def execute(self, path: str, body: Any, response_model: Type[ModelT]) -> ModelT:
        """POST ``body`` as JSON to ``path`` and decode the response.

        Args:
            path: Path appended to the configured endpoint (e.g. "route").
            body: Request model or JSON-serializable value; None sends no body.
            response_model: Model the 200 response is decoded into.

        Returns:
            The decoded response.

        Raises:
            ValhallaBuildError: Request or body could not be built; nothing was sent.
            ValhallaHookError: The before-request hook raised; nothing was sent.
            ValhallaTransportError: No response was obtained.
            ValhallaServiceError: The service answered with a non-200 status.
            ValhallaDecodeError: A 200 body did not match ``response_model``.
        """
        request = self._build_request(path, body)
        LOGGER.debug("POST %s", request.url)

        try:
            response = self._transport.send(request, timeout=self._config.timeout)
        except _PREPARE_ERRORS as exc:
            raise ValhallaBuildError(f"unable to build request: {exc}") from exc
        except requests.RequestException as exc:
            raise ValhallaTransportError(
                f"error while calling {request.url}: {exc}", url=request.url
            ) from exc

        try:
            LOGGER.debug("POST %s -> HTTP %d", request.url, response.status_code)
            if response.status_code != requests.codes.ok:
                raise service_error_from_response(response)
            return decode_response(response, response_model)
        finally:
            # Release the connection back to the pool on every exit path
            response.close()

    def route(self, route_input: RouteInput) -> RouteOutput:
        return self.execute(ROUTE_PATH, route_input, RouteOutput)

    def isochrone(self, isochrone_input: IsochroneInput) -> IsochroneOutput:
        return self.execute(ISOCHRONE_PATH, isochrone_input, IsochroneOutput)

    def elevation(self, elevation_input: ElevationInput) -> ElevationOutput:
        return self.execute(ELEVATION_PATH, elevation_input, ElevationOutput)


__all__ = ["ValhallaClient", "BeforeRequestFn"]
