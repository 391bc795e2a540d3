"""Request and response shapes for the ``/height`` elevation endpoint."""
from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel

from .models import Point


class ElevationInput(BaseModel):
    """Elevation request; give either ``shape`` or ``encoded_polyline``.

    Attributes:
        range: Return cumulative distance along with each height.
        resample_distance: Resample the input polyline every N meters.
        height_precision: Decimal places of returned heights (0, 1 or 2).
        shape: Points, in order.
        shape_format: "polyline6" (default) or "polyline5" for ``encoded_polyline``.
        encoded_polyline: Encoded shape.
        id: Request name echoed back in the response.
    """

    range: Optional[bool] = None
    resample_distance: Optional[int] = None
    height_precision: Optional[int] = None
    shape: Optional[List[Point]] = None
    shape_format: Optional[str] = None
    encoded_polyline: Optional[str] = None
    id: Optional[str] = None


class ElevationOutput(BaseModel):
    """Elevation response.

    Attributes:
        shape: Input shape coordinates.
        encoded_polyline: Input encoded polyline (6 digits of precision).
        range_height: [range, height] pairs when ``range`` was requested.
        height: Heights for each input coordinate.
        id: Echo of the request id.
    """

    shape: Optional[List[Point]] = None
    encoded_polyline: Optional[str] = None
    range_height: Optional[List[List[Optional[float]]]] = None
    height: Optional[List[Optional[float]]] = None
    id: Optional[str] = None

    model_config = {"extra": "allow"}


__all__ = ["ElevationInput", "ElevationOutput"]
