"""Request and response shapes for the turn-by-turn ``/route`` endpoint."""
from __future__ import annotations
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from .costing import CostingOptions
from .models import DateTime, Location


class RouteInput(BaseModel):
    """Turn-by-turn route request.

    Attributes:
        locations: Two or more locations, visited in order. First and last are
            always treated as breaks.
        costing: Costing model name (see ``constants.COSTING_*``).
        costing_options: Per-model costing options.
        units: "kilometers" or "miles" (service default kilometers).
        language: Narration language tag, e.g. "fr-FR".
        directions_type: "none", "maneuvers" or "instructions".
        alternates: Number of alternate routes wanted.
        exclude_locations: Locations whose nearest roads must be avoided.
        exclude_polygons: Rings of [lon, lat] pairs to avoid.
        date_time: Departure/arrival time.
        id: Request name echoed back in the response.
    """

    locations: List[Location] = Field(default_factory=list)
    costing: Optional[str] = None
    costing_options: Optional[CostingOptions] = None
    units: Optional[str] = None
    language: Optional[str] = None
    directions_type: Optional[str] = None
    alternates: Optional[int] = None
    exclude_locations: Optional[List[Location]] = None
    exclude_polygons: Optional[List[List[List[float]]]] = None
    date_time: Optional[DateTime] = None
    id: Optional[str] = None


class SignElement(BaseModel):
    text: Optional[str] = None
    is_route_number: Optional[bool] = None
    consecutive_count: Optional[int] = None

    model_config = {"extra": "allow"}


class ManeuverSign(BaseModel):
    """Guide sign information attached to a maneuver."""

    exit_number_elements: List[SignElement] = Field(default_factory=list)
    exit_branch_elements: List[SignElement] = Field(default_factory=list)
    exit_toward_elements: List[SignElement] = Field(default_factory=list)
    exit_name_elements: List[SignElement] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class Maneuver(BaseModel):
    """Single guidance step of a route leg.

    Attributes:
        type: Maneuver type code.
        instruction: Written instruction.
        verbal_transition_alert_instruction: Spoken alert before the maneuver.
        verbal_pre_transition_instruction: Spoken instruction before the maneuver.
        verbal_post_transition_instruction: Spoken instruction after the maneuver.
        street_names: Streets of the consistent segment after the maneuver.
        begin_street_names: Streets at the beginning of the maneuver.
        time: Estimated seconds.
        length: Distance in ``units``.
        cost: Cost of the maneuver.
        begin_shape_index: First index into the leg shape.
        end_shape_index: Last index into the leg shape.
        toll: Contains a toll.
        highway: Contains a highway.
        rough: Contains rough surfaces.
        gate: Contains a gate.
        ferry: Contains a ferry.
        sign: Guide sign elements.
        roundabout_exit_count: Exit to take at a roundabout.
        travel_mode: "drive", "pedestrian", "bicycle" or "transit".
        travel_type: Mode-specific travel type.
    """

    type: Optional[int] = None
    instruction: Optional[str] = None
    verbal_transition_alert_instruction: Optional[str] = None
    verbal_succinct_transition_instruction: Optional[str] = None
    verbal_pre_transition_instruction: Optional[str] = None
    verbal_post_transition_instruction: Optional[str] = None
    depart_instruction: Optional[str] = None
    verbal_depart_instruction: Optional[str] = None
    arrive_instruction: Optional[str] = None
    verbal_arrive_instruction: Optional[str] = None
    verbal_multi_cue: Optional[bool] = None
    street_names: Optional[List[str]] = None
    begin_street_names: Optional[List[str]] = None
    time: Optional[float] = None
    length: Optional[float] = None
    cost: Optional[float] = None
    begin_shape_index: Optional[int] = None
    end_shape_index: Optional[int] = None
    toll: Optional[bool] = None
    highway: Optional[bool] = None
    rough: Optional[bool] = None
    gate: Optional[bool] = None
    ferry: Optional[bool] = None
    sign: Optional[ManeuverSign] = None
    roundabout_exit_count: Optional[int] = None
    transit_info: Optional[Dict[str, Any]] = None
    travel_mode: Optional[str] = None
    travel_type: Optional[str] = None
    bss_maneuver_type: Optional[str] = None

    model_config = {"extra": "allow"}


class RouteSummary(BaseModel):
    """Time, distance and bounding box of a trip or leg.

    Attributes:
        time: Estimated seconds.
        length: Distance in the requested units.
        cost: Total cost.
        min_lat: Bounding box minimum latitude.
        min_lon: Bounding box minimum longitude.
        max_lat: Bounding box maximum latitude.
        max_lon: Bounding box maximum longitude.
        has_toll: Route uses toll roads.
        has_highway: Route uses highways.
        has_ferry: Route uses ferries.
        has_time_restrictions: Route crosses time-restricted edges.
    """

    time: Optional[float] = None
    length: Optional[float] = None
    cost: Optional[float] = None
    min_lat: Optional[float] = None
    min_lon: Optional[float] = None
    max_lat: Optional[float] = None
    max_lon: Optional[float] = None
    has_toll: Optional[bool] = None
    has_highway: Optional[bool] = None
    has_ferry: Optional[bool] = None
    has_time_restrictions: Optional[bool] = None

    model_config = {"extra": "allow"}


class RouteLeg(BaseModel):
    """Trip section between two break locations.

    ``shape`` is the leg geometry as an encoded polyline with 6 digits of precision.
    """

    maneuvers: List[Maneuver] = Field(default_factory=list)
    summary: Optional[RouteSummary] = None
    shape: Optional[str] = None

    model_config = {"extra": "allow"}


class Trip(BaseModel):
    locations: List[Location] = Field(default_factory=list)
    legs: List[RouteLeg] = Field(default_factory=list)
    summary: Optional[RouteSummary] = None
    status: Optional[int] = None
    status_message: Optional[str] = None
    units: Optional[str] = None
    language: Optional[str] = None

    model_config = {"extra": "allow"}


class AlternateRoute(BaseModel):
    trip: Trip

    model_config = {"extra": "allow"}


class RouteOutput(BaseModel):
    """Turn-by-turn route response.

    Attributes:
        trip: Best route.
        alternates: Alternate routes, when requested and found.
        id: Echo of the request id.
        warnings: Deprecation and usage warnings from the service.
    """

    trip: Trip
    alternates: List[AlternateRoute] = Field(default_factory=list)
    id: Optional[str] = None
    warnings: List[Dict[str, Any]] = Field(default_factory=list)

    model_config = {"extra": "allow"}


__all__ = [
    "RouteInput",
    "SignElement",
    "ManeuverSign",
    "Maneuver",
    "RouteSummary",
    "RouteLeg",
    "Trip",
    "AlternateRoute",
    "RouteOutput",
]
