from .formatting import format_distance, format_duration, round_half_up, summarize_route  # noqa: F401
from .geo import distance_km, haversine_km, interpolate_great_circle, travel_time_minutes  # noqa: F401
