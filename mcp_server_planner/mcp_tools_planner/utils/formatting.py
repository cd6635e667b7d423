"""Human-readable strings for distances and durations.

Rounding is half-up on the exact binary value of the float, matching
JavaScript's Math.round / toFixed rather than Python's round-half-even.
"""

from __future__ import annotations

from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal
from typing import Any, Dict, Union

from ..core.schemas import Route

Number = Union[int, float]


def round_half_up(value: Number, ndigits: int = 0) -> Number:
    """Half-up rounding (Math.round semantics). Returns int for ndigits=0."""
    if ndigits == 0:
        # Math.round breaks ties toward +infinity, so -2.5 -> -2
        mode = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
        return int(Decimal(value).quantize(Decimal(1), rounding=mode))
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_distance(meters: Number) -> str:
    if meters >= 1000:
        return f"{round_half_up(meters / 1000, 1):.1f} km"
    return f"{round_half_up(meters)} m"


def format_duration(minutes: Number) -> str:
    """Format minutes as 'N min' or 'H h M min'.

    Hours and the leftover minutes are rounded independently, so 119.6 renders
    as '1 h 60 min'.
    """
    if minutes < 60:
        return f"{round_half_up(minutes)} min"
    hours = int(minutes // 60)
    mins = round_half_up(minutes % 60)
    return f"{hours} h {mins} min"


def summarize_route(route: Route) -> Dict[str, Any]:
    """Display strings for a route: totals plus one line per step.

    Under 1 km the total is the sum of the step meters.
    """
    total_m = sum(step.distance_m for step in route.steps)
    return {
        "distance": format_distance(route.distance_km * 1000 if total_m >= 1000 else total_m),
        "duration": format_duration(route.duration_min),
        "transport_mode": route.transport_mode.value,
        "steps": [
            f"{step.instruction} ({format_distance(step.distance_m)}, {format_duration(step.duration_min)})"
            for step in route.steps
        ],
    }
