from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Coordinates(BaseModel):
    """Geographic coordinates in WGS84 (decimal degrees).

    Range is not enforced: lat should be in [-90, 90] and lon in [-180, 180].
    """
    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


class NamedWaypoint(BaseModel):
    """A named point to be visited along a route."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name, e.g. 'Sagrada Familia'")
    location: Coordinates


# Average speeds in km/h used by the route simulation.
_SPEED_KMH: Dict[str, float] = {
    "driving": 40.0,
    "cycling": 15.0,
    "walking": 5.0,
}

# Routing-profile names used by map front-ends (OpenRouteService style).
_MODE_ALIASES: Dict[str, str] = {
    "driving": "driving",
    "driving-car": "driving",
    "car": "driving",
    "cycling": "cycling",
    "cycling-regular": "cycling",
    "bike": "cycling",
    "walking": "walking",
    "foot-walking": "walking",
    "foot": "walking",
}


class TransportMode(str, Enum):
    """Closed set of transport modes, each with a fixed average speed."""
    DRIVING = "driving"
    CYCLING = "cycling"
    WALKING = "walking"

    @property
    def speed_kmh(self) -> float:
        return _SPEED_KMH[self.value]

    @classmethod
    def parse(cls, value: Union[str, "TransportMode", None]) -> "TransportMode":
        """Resolve a mode name or profile alias. Unknown values fall back to driving."""
        if isinstance(value, TransportMode):
            return value
        key = (value or "").strip().lower()
        canonical = _MODE_ALIASES.get(key)
        if canonical is None:
            logger.warning("Unknown transport mode %r, falling back to driving", value)
            return cls.DRIVING
        return cls(canonical)


class RouteStep(BaseModel):
    """One leg of a route, between two consecutive waypoints."""
    model_config = ConfigDict(frozen=True)

    instruction: str
    distance_m: int = Field(..., description="Leg distance in meters (rounded)")
    duration_min: int = Field(..., description="Leg duration in minutes (rounded)")
    start_location: Coordinates
    end_location: Coordinates
    from_place: str
    to_place: str


class Route(BaseModel):
    """Simulated multi-point route.

    Built once per simulation call and never mutated afterwards.
    """
    model_config = ConfigDict(frozen=True)

    distance_km: float = Field(..., description="Total distance in km, 1 decimal")
    duration_min: int = Field(..., description="Total duration in minutes")
    steps: List[RouteStep] = Field(default_factory=list)
    coordinates: List[Coordinates] = Field(
        default_factory=list,
        description="Interpolated path, first waypoint to last, without adjacent duplicates at leg joins.",
    )
    transport_mode: TransportMode = TransportMode.DRIVING


class PlaceRecommendation(BaseModel):
    """A place suggested by the generative model.

    Parsed from free-form generated text, so every field is optional and
    unknown keys are kept as extras.
    """
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    estimated_distance: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> "PlaceRecommendation":
        data = dict(raw)
        for key in ("estimated distance", "estimatedDistance", "distance"):
            if key in data and "estimated_distance" not in data:
                data["estimated_distance"] = data.pop(key)
        for key in ("name", "description", "category", "estimated_distance"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                data[key] = str(value)
        return cls(**data)
