from .config import GeminiConfig  # noqa: F401
from .errors import InvalidInputError, ParseError, PlannerError, UpstreamError  # noqa: F401
from .schemas import (  # noqa: F401
    Coordinates,
    NamedWaypoint,
    PlaceRecommendation,
    Route,
    RouteStep,
    TransportMode,
)
