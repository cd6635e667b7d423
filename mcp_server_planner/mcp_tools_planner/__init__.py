"""mcp_tools_planner package

Purpose:
- Provide clean, testable services for a travel planner: simulated multi-stop
  routes, nearest-neighbour stop ordering and Gemini-generated suggestions.
- Expose those services via an MCP server (official python-sdk / FastMCP), so an LLM can call tools.

Structure:
- core/: schemas, errors, config
- services/: routing/optimizer/recommendation logic
- utils/: pure helpers (geo math, formatting)
- mcp/: FastMCP server + tool wiring
"""

from .core.schemas import Coordinates, NamedWaypoint, PlaceRecommendation, Route, RouteStep, TransportMode  # noqa: F401
