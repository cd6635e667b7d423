from mcp_server_planner.mcp_tools_planner.core import Coordinates, GeminiConfig, NamedWaypoint
from mcp_server_planner.mcp_tools_planner.services import GeminiClient, plan_route
from mcp_server_planner.mcp_tools_planner.utils import summarize_route

if __name__ == "__main__":
    # Manual smoke run; the recommendation part needs GEMINI_API_KEY and network access.
    start = Coordinates(lat=41.8933203, lon=12.4829321)
    stops = [
        NamedWaypoint(name="Colosseum", location=Coordinates(lat=41.8902, lon=12.4922)),
        NamedWaypoint(name="Trevi Fountain", location=Coordinates(lat=41.9009, lon=12.4833)),
        NamedWaypoint(name="Pantheon", location=Coordinates(lat=41.8986, lon=12.4769)),
    ]
    route = plan_route(start, stops, transport_mode="foot-walking")
    summary = summarize_route(route)
    print(summary["distance"], summary["duration"])
    for line in summary["steps"]:
        print(line)

    client = GeminiClient(GeminiConfig.from_env())
    for place in client.recommend_places(start, preferences="history, food"):
        print(place.name, place.estimated_distance)
