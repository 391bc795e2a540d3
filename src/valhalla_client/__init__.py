"""Valhalla HTTP client.

Typed bindings for the Valhalla routing service with:
- Pydantic request/response models for the route, isochrone and height endpoints
- One shared request envelope mapping non-200 answers to ValhallaServiceError
- Dependency injection of the HTTP transport (testability)

Example usage:
    >>> from valhalla_client import ClientConfig, Location, RouteInput, ValhallaClient
    >>> client = ValhallaClient(ClientConfig(endpoint="http://localhost:8002"))
    >>> output = client.route(
    ...     RouteInput(
    ...         locations=[
    ...             Location(lat=48.390394, lon=-4.486076),
    ...             Location(lat=48.45252, lon=-4.25252),
    ...         ],
    ...         costing="auto",
    ...     )
    ... )
    >>> output.trip.summary.length
"""

from __future__ import annotations

from .client import BeforeRequestFn, ValhallaClient
from .costing import (
    AutoCosting,
    BicycleBaseCosting,
    BicycleCosting,
    BusCosting,
    CostingOptions,
    MotorBaseCosting,
    MotorcycleCosting,
    MotorScooterCosting,
    PedestrianCosting,
    TaxiCosting,
    TransitCosting,
    TransitFilter,
    TruckCosting,
)
from .elevation import ElevationInput, ElevationOutput
from .errors import (
    ValhallaBuildError,
    ValhallaDecodeError,
    ValhallaError,
    ValhallaHookError,
    ValhallaServiceError,
    ValhallaTransportError,
)
from .isochrone import (
    Contour,
    IsochroneFeature,
    IsochroneGeometry,
    IsochroneInput,
    IsochroneOutput,
    IsochroneProperties,
)
from .models import (
    ClientConfig,
    DateTime,
    ErrorResponse,
    Location,
    LocationSearchFilter,
    Point,
)
from .route import (
    AlternateRoute,
    Maneuver,
    ManeuverSign,
    RouteInput,
    RouteLeg,
    RouteOutput,
    RouteSummary,
    SignElement,
    Trip,
)
from .transport import HTTPTransport, RequestsTransport

__version__ = "0.1.0"

__all__ = [
    # Client
    "ValhallaClient",
    "BeforeRequestFn",
    "HTTPTransport",
    "RequestsTransport",
    # Shared models
    "ClientConfig",
    "Point",
    "Location",
    "LocationSearchFilter",
    "DateTime",
    "ErrorResponse",
    # Costing
    "BicycleBaseCosting",
    "MotorBaseCosting",
    "AutoCosting",
    "TaxiCosting",
    "BusCosting",
    "TruckCosting",
    "BicycleCosting",
    "MotorScooterCosting",
    "MotorcycleCosting",
    "PedestrianCosting",
    "TransitFilter",
    "TransitCosting",
    "CostingOptions",
    # Route
    "RouteInput",
    "RouteOutput",
    "Trip",
    "RouteLeg",
    "RouteSummary",
    "Maneuver",
    "ManeuverSign",
    "SignElement",
    "AlternateRoute",
    # Isochrone
    "Contour",
    "IsochroneInput",
    "IsochroneOutput",
    "IsochroneFeature",
    "IsochroneGeometry",
    "IsochroneProperties",
    # Elevation
    "ElevationInput",
    "ElevationOutput",
    # Exceptions
    "ValhallaError",
    "ValhallaBuildError",
    "ValhallaHookError",
    "ValhallaTransportError",
    "ValhallaServiceError",
    "ValhallaDecodeError",
]
