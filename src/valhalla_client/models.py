from __future__ import annotations  # Allows forward references between models (e.g., Location -> LocationSearchFilter)
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple, Union
from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT

if TYPE_CHECKING:
    from .config.settings import ValhallaSettings


class Point(BaseModel):
    """Geographic point in decimal degrees.

    Attributes:
        lat: Latitude.
        lon: Longitude.
    """

    lat: float
    lon: float

    model_config = {"extra": "allow"}


class LocationSearchFilter(BaseModel):
    """Filters excluding candidate edges when correlating a location to the road network.

    Attributes:
        exclude_tunnel: Exclude roads marked as tunnels.
        exclude_bridge: Exclude roads marked as bridges.
        exclude_ramp: Exclude link roads marked as ramps.
        exclude_closures: Exclude roads closed by live traffic. Cannot be combined
            with ``costing_options.<costing>.ignore_closures``.
        min_road_class: Lowest road class allowed (service default "service_other").
        max_road_class: Highest road class allowed (service default "motorway").
    """

    exclude_tunnel: Optional[bool] = None
    exclude_bridge: Optional[bool] = None
    exclude_ramp: Optional[bool] = None
    exclude_closures: Optional[bool] = None
    min_road_class: Optional[str] = None
    max_road_class: Optional[str] = None


class Location(BaseModel):
    """Input location shared by the route and isochrone requests.

    ``lat``/``lon`` are the routing location, and also the display location
    unless ``display_lat``/``display_lon`` are given. ``radius`` and
    ``minimum_reachability`` keep an explicit ``0`` on the wire: the service
    treats an omitted value and a zero value differently.

    Attributes:
        lat: Latitude in degrees.
        lon: Longitude in degrees.
        type: One of "break", "through", "via", "break_through" (default break).
        heading: Preferred direction of travel at the start, degrees clockwise from north.
        heading_tolerance: Angle tolerance for ``heading`` (service default 60).
        street: Street name hint.
        way_id: OpenStreetMap way id hint.
        minimum_reachability: Minimum reachable nodes for a candidate edge.
        radius: Meters around the location within which edges are candidates.
        rank_candidates: Rank edge candidates by distance and other attributes.
        preferred_side: "same", "opposite" or "either".
        display_lat: Map latitude used to determine the side of street.
        display_lon: Map longitude used to determine the side of street.
        search_cutoff: Distance beyond which no correlation is attempted.
        node_snap_tolerance: Snap-to-intersection distance (service default 5 m).
        street_side_tolerance: Below this distance from the centerline, no side of street.
        street_side_max_distance: Beyond this distance, no side of street.
        search_filter: Candidate edge filters.
        name: Location or business name used in narration.
        city: City name.
        state: State name.
        postal_code: Postal code.
        country: Country name.
        phone: Phone number.
        url: URL.
        side_of_street: Response only; "left" or "right".
        date_time: Response only; expected local time at the location.
        original_index: Response only; index in the request locations.
    """

    lat: float
    lon: float
    type: Optional[str] = None
    heading: Optional[float] = None
    heading_tolerance: Optional[float] = None
    street: Optional[str] = None
    way_id: Optional[int] = None
    minimum_reachability: Optional[int] = None
    radius: Optional[int] = None
    rank_candidates: Optional[bool] = None
    preferred_side: Optional[str] = None
    display_lat: Optional[float] = None
    display_lon: Optional[float] = None
    search_cutoff: Optional[float] = None
    node_snap_tolerance: Optional[float] = None
    street_side_tolerance: Optional[float] = None
    street_side_max_distance: Optional[float] = None
    search_filter: Optional[LocationSearchFilter] = None
    name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    url: Optional[str] = None
    side_of_street: Optional[str] = None
    date_time: Optional[str] = None
    original_index: Optional[int] = None

    model_config = {"extra": "allow"}


class DateTime(BaseModel):
    """Departure/arrival time for time-dependent routing.

    Attributes:
        type: 0 current departure, 1 departure at ``value``, 2 arrival at ``value``,
            3 invariant.
        value: Local time as ``YYYY-MM-DDThh:mm``.
    """

    type: int
    value: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error payload returned by the service with a non-200 status."""

    error_code: str = ""
    error: str = ""
    status_code: int = 0
    status: str = ""

    model_config = {"extra": "allow"}

    @field_validator("error_code", mode="before")
    @classmethod
    def coerce_error_code(cls, v: Any) -> str:
        """Valhalla sends numeric codes; keep them as strings."""
        if v is None:
            return ""
        if isinstance(v, bool):
            raise ValueError("error_code must be a string or an integer")
        if isinstance(v, (int, str)):
            return str(v)
        raise ValueError("error_code must be a string or an integer")


class ClientConfig(BaseModel):
    """Immutable configuration for ValhallaClient.

    Attributes:
        endpoint: Base service URL, e.g. ``https://valhalla.example.com``.
        custom_headers: Headers added to every request.
        timeout: Request timeout in seconds; None disables the client deadline.
        verify: TLS verification flag, or path to a CA bundle.
        cert: Client certificate path, or (cert, key) paths.
        proxies: Proxy mapping passed to requests.
        user_agent: User-Agent header value.
    """

    endpoint: str
    custom_headers: Dict[str, str] = Field(default_factory=dict)
    timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS
    verify: Union[bool, str] = True
    cert: Optional[Union[str, Tuple[str, str]]] = None
    proxies: Optional[Dict[str, str]] = None
    user_agent: str = DEFAULT_USER_AGENT

    model_config = {"frozen": True}

    @field_validator("endpoint")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def from_settings(cls, settings: "ValhallaSettings") -> "ClientConfig":
        """Build a config from environment settings."""
        headers: Dict[str, str] = {}
        if settings.api_key:
            headers[settings.api_key_header] = settings.api_key
        verify: Union[bool, str] = settings.verify_tls
        if settings.ca_bundle:
            verify = settings.ca_bundle
        return cls(
            endpoint=settings.endpoint,
            custom_headers=headers,
            timeout=settings.timeout,
            verify=verify,
        )


__all__ = [
    "Point",
    "LocationSearchFilter",
    "Location",
    "DateTime",
    "ErrorResponse",
    "ClientConfig",
]
