"""Request and response shapes for the isochrone endpoint."""
from __future__ import annotations
from typing import Any, List, Optional
from pydantic import BaseModel, Field

from .costing import CostingOptions
from .models import DateTime, Location


class Contour(BaseModel):
    """One isochrone budget; set either ``time`` (minutes) or ``distance`` (km).

    Attributes:
        time: Minutes of travel.
        distance: Kilometers of travel.
        color: Hex color without the leading ``#``, e.g. "ff0000".
    """

    time: Optional[float] = None
    distance: Optional[float] = None
    color: Optional[str] = None


class IsochroneInput(BaseModel):
    """Isochrone request.

    Attributes:
        locations: Center location(s); only lat/lon and correlation options apply.
        costing: "auto", "bicycle", "pedestrian" or "multimodal".
        costing_options: Per-model costing options.
        contours: Up to four time or distance budgets, in increasing order.
        polygons: Return polygons instead of linestrings.
        denoise: 0-1 factor removing smaller contours.
        generalize: Douglas-Peucker tolerance in meters.
        show_locations: Include input and snapped locations as MultiPoint features.
        date_time: Departure/arrival time.
        id: Request name echoed back in the response.
    """

    locations: List[Location] = Field(default_factory=list)
    costing: Optional[str] = None
    costing_options: Optional[CostingOptions] = None
    contours: List[Contour] = Field(default_factory=list)
    polygons: Optional[bool] = None
    denoise: Optional[float] = None
    generalize: Optional[float] = None
    show_locations: Optional[bool] = None
    date_time: Optional[DateTime] = None
    id: Optional[str] = None


class IsochroneGeometry(BaseModel):
    """GeoJSON geometry; ``coordinates`` nesting depends on ``type``."""

    type: str
    coordinates: Any = None

    model_config = {"extra": "allow"}


class IsochroneProperties(BaseModel):
    contour: Optional[float] = None
    metric: Optional[str] = None
    color: Optional[str] = None
    fill: Optional[str] = None
    opacity: Optional[float] = None
    fill_opacity: Optional[float] = Field(None, alias="fillOpacity")

    model_config = {"populate_by_name": True, "extra": "allow"}


class IsochroneFeature(BaseModel):
    type: str = "Feature"
    geometry: Optional[IsochroneGeometry] = None
    properties: IsochroneProperties = Field(default_factory=IsochroneProperties)

    model_config = {"extra": "allow"}


class IsochroneOutput(BaseModel):
    """Isochrone response: a GeoJSON FeatureCollection, one feature per contour."""

    type: str = "FeatureCollection"
    features: List[IsochroneFeature] = Field(default_factory=list)
    id: Optional[str] = None

    model_config = {"extra": "allow"}


__all__ = [
    "Contour",
    "IsochroneInput",
    "IsochroneGeometry",
    "IsochroneProperties",
    "IsochroneFeature",
    "IsochroneOutput",
]
