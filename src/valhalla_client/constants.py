from __future__ import annotations

# Endpoint paths, joined to ClientConfig.endpoint
ROUTE_PATH = "route"
ISOCHRONE_PATH = "isochrone"
ELEVATION_PATH = "height"

# Request defaults
DEFAULT_ENDPOINT = "http://localhost:8002"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = "valhalla-http-client-python"
DEFAULT_API_KEY_HEADER = "api_key"
JSON_CONTENT_TYPE = "application/json"

# Costing models
COSTING_AUTO = "auto"
COSTING_BICYCLE = "bicycle"
COSTING_BUS = "bus"
COSTING_BIKESHARE = "bikeshare"  # beta: pedestrian + bicycle via rental stations
COSTING_TRUCK = "truck"
COSTING_TAXI = "taxi"
COSTING_MOTOR_SCOOTER = "motor_scooter"  # beta
COSTING_MOTORCYCLE = "motorcycle"
COSTING_MULTIMODAL = "multimodal"  # pedestrian + transit
COSTING_PEDESTRIAN = "pedestrian"

COSTING_MODELS = frozenset(
    {
        COSTING_AUTO,
        COSTING_BICYCLE,
        COSTING_BUS,
        COSTING_BIKESHARE,
        COSTING_TRUCK,
        COSTING_TAXI,
        COSTING_MOTOR_SCOOTER,
        COSTING_MOTORCYCLE,
        COSTING_MULTIMODAL,
        COSTING_PEDESTRIAN,
    }
)

# Location types: u-turn allowed / legs generated
LOCATION_TYPE_BREAK = "break"  # yes / yes
LOCATION_TYPE_THROUGH = "through"  # no / no
LOCATION_TYPE_VIA = "via"  # yes / no
LOCATION_TYPE_BREAK_THROUGH = "break_through"  # no / yes

# Side of street to arrive at / depart from
PREFERRED_SIDE_SAME = "same"
PREFERRED_SIDE_OPPOSITE = "opposite"
PREFERRED_SIDE_EITHER = "either"

# Distance units for narrative and summaries
UNITS_KILOMETERS = "kilometers"
UNITS_MILES = "miles"

# Elevation shape formats
SHAPE_FORMAT_POLYLINE6 = "polyline6"
SHAPE_FORMAT_POLYLINE5 = "polyline5"

__all__ = [
    "ROUTE_PATH",
    "ISOCHRONE_PATH",
    "ELEVATION_PATH",
    "DEFAULT_ENDPOINT",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_USER_AGENT",
    "DEFAULT_API_KEY_HEADER",
    "JSON_CONTENT_TYPE",
    "COSTING_AUTO",
    "COSTING_BICYCLE",
    "COSTING_BUS",
    "COSTING_BIKESHARE",
    "COSTING_TRUCK",
    "COSTING_TAXI",
    "COSTING_MOTOR_SCOOTER",
    "COSTING_MOTORCYCLE",
    "COSTING_MULTIMODAL",
    "COSTING_PEDESTRIAN",
    "COSTING_MODELS",
    "LOCATION_TYPE_BREAK",
    "LOCATION_TYPE_THROUGH",
    "LOCATION_TYPE_VIA",
    "LOCATION_TYPE_BREAK_THROUGH",
    "PREFERRED_SIDE_SAME",
    "PREFERRED_SIDE_OPPOSITE",
    "PREFERRED_SIDE_EITHER",
    "UNITS_KILOMETERS",
    "UNITS_MILES",
    "SHAPE_FORMAT_POLYLINE6",
    "SHAPE_FORMAT_POLYLINE5",
]
