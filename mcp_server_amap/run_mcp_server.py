"""Entrypoint for running the china-weather-map MCP server.

Usage:
  AMAP_API_KEY=... python run_mcp_server.py                     # stdio
  AMAP_API_KEY=... python run_mcp_server.py --transport streamable-http --port 8765

Or via MCP host config (e.g., Claude Desktop) pointing to this script.
"""
from mcp_tools_amap.mcp.server import main

if __name__ == "__main__":
    main()
