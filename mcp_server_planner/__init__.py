"""mcp_server_planner: route planner tools for an MCP host.

See mcp_tools_planner for the services and the FastMCP server.
"""
