"""Entrypoint for running the route-planner MCP server.

Usage:
  python -m mcp_server_planner.run_mcp_server [--host 127.0.0.1] [--port 8765]

Or via an MCP host config pointing to this script.
"""
from mcp_server_planner.mcp_tools_planner.mcp.server import main

if __name__ == "__main__":
    main()
