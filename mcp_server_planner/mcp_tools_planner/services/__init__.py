from .optimizer import optimize_waypoints  # noqa: F401
from .recommendations import GeminiClient, extract_candidate_text, parse_recommendations  # noqa: F401
from .routing import calculate_route, plan_route, simulate_route  # noqa: F401
