from __future__ import annotations

from typing import List, Sequence

from ..core.schemas import Coordinates, NamedWaypoint
from ..utils.geo import distance_km


def optimize_waypoints(start: Coordinates, waypoints: Sequence[NamedWaypoint]) -> List[NamedWaypoint]:
    """Order waypoints with the nearest-neighbour heuristic, starting from `start`.

    Greedy and O(n^2): fine for a day's worth of stops, not an optimal TSP
    solver. On equal distances the waypoint listed first wins.
    """
    if len(waypoints) <= 1:
        return list(waypoints)

    remaining: List[NamedWaypoint] = list(waypoints)
    ordered: List[NamedWaypoint] = []
    current = start

    while remaining:
        closest_idx = 0
        closest_km = distance_km(current, remaining[0].location)
        for idx in range(1, len(remaining)):
            d_km = distance_km(current, remaining[idx].location)
            if d_km < closest_km:
                closest_km = d_km
                closest_idx = idx

        nxt = remaining[closest_idx]
        ordered.append(nxt)
        current = nxt.location
        remaining = remaining[:closest_idx] + remaining[closest_idx + 1:]

    return ordered
