from __future__ import annotations

import math

from ..core.schemas import Coordinates

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance (Haversine) in kilometers."""
    r = EARTH_RADIUS_KM
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return r * c


def distance_km(a: Coordinates, b: Coordinates) -> float:
    """Haversine distance between two Coordinates in kilometers."""
    return haversine_km(a.lat, a.lon, b.lat, b.lon)


def interpolate_great_circle(a: Coordinates, b: Coordinates, fraction: float) -> Coordinates:
    """Point at `fraction` (0..1) of the great-circle arc from a to b."""
    if fraction <= 0.0:
        return a
    if fraction >= 1.0:
        return b

    delta = distance_km(a, b) / EARTH_RADIUS_KM
    if delta == 0.0:
        return a

    sin_delta = math.sin(delta)
    if abs(sin_delta) < 1e-12:
        # antipodal: the arc is undefined, use a straight lat/lon blend
        return Coordinates(
            lat=a.lat + (b.lat - a.lat) * fraction,
            lon=a.lon + (b.lon - a.lon) * fraction,
        )

    phi1, lambda1 = math.radians(a.lat), math.radians(a.lon)
    phi2, lambda2 = math.radians(b.lat), math.radians(b.lon)

    wa = math.sin((1 - fraction) * delta) / sin_delta
    wb = math.sin(fraction * delta) / sin_delta

    x = wa * math.cos(phi1) * math.cos(lambda1) + wb * math.cos(phi2) * math.cos(lambda2)
    y = wa * math.cos(phi1) * math.sin(lambda1) + wb * math.cos(phi2) * math.sin(lambda2)
    z = wa * math.sin(phi1) + wb * math.sin(phi2)

    lat = math.degrees(math.atan2(z, math.sqrt(x * x + y * y)))
    lon = math.degrees(math.atan2(y, x))
    return Coordinates(lat=lat, lon=lon)


def travel_time_minutes(distance_km: float, speed_kmh: float) -> float:
    """Travel time at a constant average speed, in minutes."""
    return (distance_km / speed_kmh) * 60.0
