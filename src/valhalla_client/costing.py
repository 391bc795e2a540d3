"""Costing option shapes for each Valhalla travel mode.

Shared field sets are declared once and flattened into the per-mode option
models; the service reads each mode's options independently, so no model here
is used through a common interface.
"""
from __future__ import annotations
from typing import Dict, List, Optional
from pydantic import BaseModel


class BicycleBaseCosting(BaseModel):
    """Fields common to every vehicle costing model.

    Attributes:
        maneuver_penalty: Seconds added when road names change (default 5).
        gate_cost: Seconds added at gates with undefined/private access (default 30).
        gate_penalty: Penalty at gates with no access information (default 300).
        country_crossing_cost: Seconds added at country borders (default 600).
        country_crossing_penalty: Penalty at country borders (default 0).
        service_penalty: Penalty for entering service roads.
        shortest: Minimize distance instead of time.
    """

    maneuver_penalty: Optional[int] = None
    gate_cost: Optional[int] = None
    gate_penalty: Optional[int] = None
    country_crossing_cost: Optional[int] = None
    country_crossing_penalty: Optional[int] = None
    service_penalty: Optional[int] = None
    shortest: Optional[bool] = None


class MotorBaseCosting(BicycleBaseCosting):
    """Fields common to the motorized costing models.

    ``use_*`` factors range from 0 (avoid) to 1 (prefer).
    """

    private_access_penalty: Optional[int] = None
    toll_booth_cost: Optional[int] = None
    toll_booth_penalty: Optional[int] = None
    ferry_cost: Optional[int] = None
    use_ferry: Optional[float] = None
    use_highways: Optional[float] = None
    use_tolls: Optional[float] = None
    use_living_streets: Optional[float] = None
    use_tracks: Optional[float] = None
    service_factor: Optional[float] = None
    top_speed: Optional[int] = None
    ignore_closures: Optional[bool] = None
    closure_factor: Optional[float] = None
    height: Optional[float] = None
    width: Optional[float] = None
    exclude_unpaved: Optional[bool] = None
    exclude_cash_only_tolls: Optional[bool] = None
    include_hov2: Optional[bool] = None
    include_hov3: Optional[bool] = None
    include_hot: Optional[bool] = None


class AutoCosting(MotorBaseCosting):
    pass


class TaxiCosting(MotorBaseCosting):
    pass


class BusCosting(MotorBaseCosting):
    pass


class TruckCosting(MotorBaseCosting):
    """Truck costing: weight and size restrictions on top of the motor fields.

    Attributes:
        length: Truck length in meters.
        weight: Truck weight in metric tons.
        axle_load: Axle load in metric tons.
        hazmat: Truck carries hazardous materials.
    """

    length: Optional[float] = None
    weight: Optional[float] = None
    axle_load: Optional[float] = None
    hazmat: Optional[bool] = None


class BicycleCosting(BicycleBaseCosting):
    """Bicycle costing.

    Attributes:
        bicycle_type: "Road", "Hybrid", "Cross" or "Mountain".
        cycling_speed: Average speed in km/h on smooth flat roads.
        use_roads: Willingness to use roads alongside other vehicles (0-1).
        use_hills: Willingness to climb hills (0-1).
        use_ferry: Willingness to take ferries (0-1).
        use_living_streets: Willingness to use living streets (0-1).
        avoid_bad_surfaces: How much to avoid rough surfaces (0-1).
        bss_return_cost: Seconds to return a bike at a bike share station.
        bss_return_penalty: Penalty for returning a bike.
    """

    bicycle_type: Optional[str] = None
    cycling_speed: Optional[float] = None
    use_roads: Optional[float] = None
    use_hills: Optional[float] = None
    use_ferry: Optional[float] = None
    use_living_streets: Optional[float] = None
    avoid_bad_surfaces: Optional[float] = None
    bss_return_cost: Optional[int] = None
    bss_return_penalty: Optional[int] = None


class MotorScooterCosting(MotorBaseCosting):
    # top speed is fractional km/h for scooters
    top_speed: Optional[float] = None
    use_primary: Optional[float] = None
    use_hills: Optional[float] = None


class MotorcycleCosting(MotorBaseCosting):
    use_trails: Optional[float] = None


class PedestrianCosting(BaseModel):
    """Pedestrian costing.

    Attributes:
        walking_speed: Walking speed in km/h (default 5.1).
        walkway_factor: Multiplier for footways.
        sidewalk_factor: Multiplier for sidewalks.
        alley_factor: Multiplier for alleys.
        driveway_factor: Multiplier for driveways.
        step_penalty: Seconds added for steps.
        use_ferry: Willingness to take ferries (0-1).
        use_living_streets: Willingness to use living streets (0-1).
        use_tracks: Willingness to use tracks (0-1).
        use_hills: Willingness to climb hills (0-1).
        service_penalty: Penalty for service roads.
        service_factor: Multiplier for service roads.
        max_hiking_difficulty: Highest SAC scale allowed (0-6).
        bss_rent_cost: Seconds to rent a bike at a bike share station.
        bss_rent_penalty: Penalty for renting a bike.
        shortest: Minimize distance instead of time.
    """

    walking_speed: Optional[float] = None
    walkway_factor: Optional[float] = None
    sidewalk_factor: Optional[float] = None
    alley_factor: Optional[float] = None
    driveway_factor: Optional[float] = None
    step_penalty: Optional[int] = None
    use_ferry: Optional[float] = None
    use_living_streets: Optional[float] = None
    use_tracks: Optional[float] = None
    use_hills: Optional[float] = None
    service_penalty: Optional[int] = None
    service_factor: Optional[int] = None
    max_hiking_difficulty: Optional[int] = None
    bss_rent_cost: Optional[int] = None
    bss_rent_penalty: Optional[int] = None
    shortest: Optional[bool] = None


class TransitFilter(BaseModel):
    """Include or exclude transit operators, routes or stops by onestop id.

    Attributes:
        ids: Onestop ids.
        action: "exclude" or "include".
    """

    ids: Optional[List[str]] = None
    action: Optional[str] = None


class TransitCosting(BaseModel):
    use_bus: Optional[float] = None
    use_rail: Optional[float] = None
    use_transfers: Optional[float] = None
    transit_start_end_max_distance: Optional[int] = None
    transit_transfer_max_distance: Optional[int] = None
    filters: Optional[Dict[str, TransitFilter]] = None


class CostingOptions(BaseModel):
    """Costing options keyed by costing model name."""

    auto: Optional[AutoCosting] = None
    taxi: Optional[TaxiCosting] = None
    bus: Optional[BusCosting] = None
    truck: Optional[TruckCosting] = None
    bicycle: Optional[BicycleCosting] = None
    motor_scooter: Optional[MotorScooterCosting] = None
    motorcycle: Optional[MotorcycleCosting] = None
    pedestrian: Optional[PedestrianCosting] = None
    transit: Optional[TransitCosting] = None


__all__ = [
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
]
