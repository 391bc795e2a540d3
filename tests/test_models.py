"""Tests for request/response models and JSON encoding."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from valhalla_client import (
    AutoCosting,
    ClientConfig,
    CostingOptions,
    DateTime,
    ErrorResponse,
    Location,
    LocationSearchFilter,
    MotorScooterCosting,
    PedestrianCosting,
    RouteInput,
    RouteOutput,
    TransitCosting,
    TransitFilter,
    TruckCosting,
    ValhallaBuildError,
)
from valhalla_client.serialization import encode_body


def _payload(model) -> dict:
    return json.loads(encode_body(model))


class TestOptionalFields:
    def test_unset_radius_is_absent(self):
        payload = _payload(Location(lat=48.390394, lon=-4.486076))
        assert "radius" not in payload
        assert payload == {"lat": 48.390394, "lon": -4.486076}

    def test_zero_radius_is_present(self):
        payload = _payload(Location(lat=48.390394, lon=-4.486076, radius=0))
        assert payload["radius"] == 0

    def test_false_and_zero_values_are_kept(self):
        location = Location(
            lat=1.0,
            lon=2.0,
            minimum_reachability=0,
            rank_candidates=False,
            search_filter=LocationSearchFilter(exclude_tunnel=False),
        )
        payload = _payload(location)
        assert payload["minimum_reachability"] == 0
        assert payload["rank_candidates"] is False
        assert payload["search_filter"] == {"exclude_tunnel": False}

    def test_nested_unset_fields_are_absent(self):
        route_input = RouteInput(
            locations=[Location(lat=1.0, lon=2.0), Location(lat=3.0, lon=4.0)],
            costing="auto",
            costing_options=CostingOptions(auto=AutoCosting(use_tolls=0.0)),
            date_time=DateTime(type=0),
        )
        payload = _payload(route_input)
        assert payload["costing_options"] == {"auto": {"use_tolls": 0.0}}
        assert payload["date_time"] == {"type": 0}
        assert "units" not in payload
        assert "alternates" not in payload


class TestCostingModels:
    def test_truck_has_motor_and_bicycle_base_fields(self):
        truck = TruckCosting(maneuver_penalty=5, use_highways=0.8, hazmat=True, weight=21.77)
        assert _payload(truck) == {
            "maneuver_penalty": 5,
            "use_highways": 0.8,
            "weight": 21.77,
            "hazmat": True,
        }

    def test_motor_scooter_top_speed_is_fractional(self):
        scooter = MotorScooterCosting(top_speed=42.5, use_primary=0.2)
        assert _payload(scooter) == {"top_speed": 42.5, "use_primary": 0.2}

    def test_pedestrian_does_not_have_vehicle_fields(self):
        assert "gate_cost" not in PedestrianCosting.model_fields
        assert "walking_speed" in PedestrianCosting.model_fields

    def test_transit_filters_by_name(self):
        transit = TransitCosting(
            use_bus=0.3,
            filters={"operators": TransitFilter(ids=["o-9q9-bart"], action="exclude")},
        )
        assert _payload(transit) == {
            "use_bus": 0.3,
            "filters": {"operators": {"ids": ["o-9q9-bart"], "action": "exclude"}},
        }


class TestResponseModels:
    def test_unknown_fields_are_kept(self):
        output = RouteOutput.model_validate(
            {"trip": {"legs": [], "elevation_interval": 30}, "admins": ["FR"]}
        )
        assert output.trip.model_extra["elevation_interval"] == 30
        assert output.model_extra["admins"] == ["FR"]

    def test_error_response_coerces_numeric_code(self):
        error = ErrorResponse.model_validate({"error_code": 154, "error": "Path distance exceeds the max distance limit"})
        assert error.error_code == "154"
        assert error.status_code == 0

    def test_error_response_rejects_non_object(self):
        with pytest.raises(ValidationError):
            ErrorResponse.model_validate_json(b"Bad Gateway")


class TestClientConfig:
    def test_config_is_immutable(self):
        config = ClientConfig(endpoint="http://localhost:8002")
        with pytest.raises(ValidationError):
            config.endpoint = "http://other:8002"

    def test_endpoint_trailing_slash_removed(self):
        assert ClientConfig(endpoint="https://valhalla.example.com/").endpoint == "https://valhalla.example.com"

    def test_defaults(self):
        config = ClientConfig(endpoint="http://localhost:8002")
        assert config.custom_headers == {}
        assert config.timeout == 30.0
        assert config.verify is True
        assert config.cert is None


class TestEncodeBody:
    def test_none_body(self):
        assert encode_body(None) is None

    def test_plain_values(self):
        assert json.loads(encode_body({"a": [1, 2]})) == {"a": [1, 2]}

    def test_nan_rejected(self):
        with pytest.raises(ValhallaBuildError):
            encode_body({"radius": float("nan")})

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_model_field_rejected(self, value):
        with pytest.raises(ValhallaBuildError):
            encode_body(Location(lat=value, lon=2.0))

    def test_non_finite_nested_costing_rejected(self):
        options = CostingOptions(auto=AutoCosting(use_tolls=float("nan")))
        with pytest.raises(ValhallaBuildError):
            encode_body(options)
