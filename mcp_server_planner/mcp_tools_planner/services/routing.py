"""Route simulation without a routing engine.

Each leg is a great-circle line between two waypoints, sampled roughly every
500 m (at least 5 segments). Durations come from a fixed average speed per
transport mode. Good enough to draw a route on a map and give ballpark
numbers; it knows nothing about roads.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Union

from ..core.errors import InvalidInputError
from ..core.schemas import Coordinates, NamedWaypoint, Route, RouteStep, TransportMode
from ..utils.formatting import round_half_up
from ..utils.geo import distance_km, interpolate_great_circle, travel_time_minutes
from .optimizer import optimize_waypoints

logger = logging.getLogger(__name__)

SAMPLE_SPACING_KM = 0.5
MIN_SEGMENTS = 5

Mode = Union[str, TransportMode, None]


def calculate_route(points: Sequence[NamedWaypoint], transport_mode: Mode = "driving") -> Route:
    """Compute a simulated route through `points` in the given order."""
    if len(points) < 2:
        raise InvalidInputError("at least two points required")

    try:
        return simulate_route(points, transport_mode)
    except Exception as e:
        logger.error("Error calculating route: %s", e)
        raise


def plan_route(
    start: Coordinates,
    waypoints: Sequence[NamedWaypoint],
    transport_mode: Mode = "driving",
    start_name: str = "Start",
) -> Route:
    """Nearest-neighbour order the waypoints from `start`, then route through them."""
    ordered = optimize_waypoints(start, waypoints)
    points: List[NamedWaypoint] = [NamedWaypoint(name=start_name, location=start), *ordered]
    return calculate_route(points, transport_mode)


def simulate_route(points: Sequence[NamedWaypoint], mode: Mode = "driving") -> Route:
    if len(points) < 2:
        raise InvalidInputError("at least two points required")

    resolved = TransportMode.parse(mode)
    coordinates: List[Coordinates] = []
    steps: List[RouteStep] = []
    total_km = 0.0
    total_min = 0.0

    for i in range(len(points) - 1):
        frm = points[i]
        to = points[i + 1]

        leg_km = distance_km(frm.location, to.location)
        leg_min = travel_time_minutes(leg_km, resolved.speed_kmh)
        total_km += leg_km
        total_min += leg_min

        samples = sample_leg(frm.location, to.location)
        coordinates.extend(samples if i == 0 else samples[1:])

        steps.append(
            RouteStep(
                instruction=f"Head to {to.name}",
                distance_m=round_half_up(leg_km * 1000),
                duration_min=round_half_up(leg_min),
                start_location=frm.location,
                end_location=to.location,
                from_place=frm.name,
                to_place=to.name,
            )
        )

    logger.debug(
        "Simulated %s route over %d points: %.3f km, %.1f min",
        resolved.value,
        len(points),
        total_km,
        total_min,
    )

    return Route(
        distance_km=round_half_up(total_km, 1),
        duration_min=round_half_up(total_min),
        steps=steps,
        coordinates=coordinates,
        transport_mode=resolved,
    )


def sample_leg(a: Coordinates, b: Coordinates, segments: Optional[int] = None) -> List[Coordinates]:
    """Evenly spaced points along the great-circle line a→b, both endpoints included."""
    if segments is None:
        segments = leg_segments(distance_km(a, b))
    return [interpolate_great_circle(a, b, j / segments) for j in range(segments + 1)]


def leg_segments(leg_km: float) -> int:
    return max(MIN_SEGMENTS, int(math.floor(leg_km / SAMPLE_SPACING_KM)))
