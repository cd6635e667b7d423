"""MCP server (official python-sdk) exposing mcp_tools_planner tools.

This uses FastMCP from the official MCP Python SDK:
- Tools are ordinary Python functions decorated with @mcp.tool().
- Schemas are derived automatically from type hints / Pydantic models.
- Transport (stdio, SSE, streamable HTTP) is handled by the SDK/CLI.
"""

from __future__ import annotations

from typing import Any, Dict, List

import sys
import argparse
import logging

import uvicorn
from mcp.server.fastmcp import FastMCP

from ..core.config import GeminiConfig
from ..core.schemas import Coordinates, NamedWaypoint, PlaceRecommendation, Route
from ..services import optimizer, routing
from ..services.recommendations import GeminiClient
from ..utils.formatting import summarize_route


# ---------------------------------------------------------------------------
# MCP-Server & Tools
# ---------------------------------------------------------------------------

mcp = FastMCP(name="route-planner", stateless_http=False)

logger = logging.getLogger("route-planner-mcp")
logging.basicConfig(stream=sys.stderr, level=logging.INFO)


@mcp.tool()
def calculate_route(points: List[NamedWaypoint], transport_mode: str = "driving") -> Route:
    """Simulate a route through the points in the given order.

    transport_mode: driving | cycling | walking (driving-car, cycling-regular and
    foot-walking are accepted too). Returns distance (km), duration (min), one
    step per leg and the interpolated path.
    """
    return routing.calculate_route(points, transport_mode)


@mcp.tool()
def optimize_waypoints(start_lat: float, start_lon: float, waypoints: List[NamedWaypoint]) -> List[NamedWaypoint]:
    """Order waypoints by nearest neighbour, starting from (start_lat, start_lon)."""
    start = Coordinates(lat=start_lat, lon=start_lon)
    return optimizer.optimize_waypoints(start, waypoints)


@mcp.tool()
def plan_route(
    start_lat: float,
    start_lon: float,
    waypoints: List[NamedWaypoint],
    transport_mode: str = "driving",
) -> Route:
    """Mini pipeline: nearest-neighbour ordering from the start point + route simulation."""
    start = Coordinates(lat=start_lat, lon=start_lon)
    return routing.plan_route(start, waypoints, transport_mode)


@mcp.tool()
def format_route(points: List[NamedWaypoint], transport_mode: str = "driving") -> Dict[str, Any]:
    """Simulate a route and return human-readable distance/duration strings per step."""
    return summarize_route(routing.calculate_route(points, transport_mode))


@mcp.tool()
def generate_itinerary(destination: str, days: int, preferences: str = "") -> str:
    """Generate a day-by-day itinerary text with Gemini (requires GEMINI_API_KEY)."""
    client = GeminiClient(GeminiConfig.from_env())
    return client.generate_itinerary(destination, days, preferences)


@mcp.tool()
def recommend_places(lat: float, lon: float, preferences: str = "") -> List[PlaceRecommendation]:
    """Ask Gemini for ~5 places near (lat, lon).

    Upstream and parse failures give an empty list. A missing GEMINI_API_KEY
    raises ValueError.
    """
    client = GeminiClient(GeminiConfig.from_env())
    return client.recommend_places(Coordinates(lat=lat, lon=lon), preferences)


# ---------------------------------------------------------------------------
# ASGI app for streamable HTTP & Uvicorn entry point
# ---------------------------------------------------------------------------

# MCP endpoint is /mcp
starlette_app = mcp.streamable_http_app()


def main() -> None:
    """Start the route-planner MCP server via Uvicorn (streamable HTTP)."""
    parser = argparse.ArgumentParser()
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8765)
    args = parser.parse_args()

    logger.info(
        "Starting route-planner MCP server (streamable-http) on http://%s:%d/mcp …",
        args.host,
        args.port,
    )

    uvicorn.run(
        starlette_app,
        host=args.host,
        port=args.port,
        reload=False,
        loop="asyncio",
    )


if __name__ == "__main__":
    main()
