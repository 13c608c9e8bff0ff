"""mcp_tools_amap package

Purpose:
- Weather forecasts and driving routes for Chinese place names via the AMap (高德) web service.
- Expose both as MCP tools (official python-sdk / FastMCP), so an LLM can call them.

Structure:
- core/: settings + AMap payload schemas
- services/: AMap client, place-name resolution, weather/route pipelines
- utils/: pure text formatting
- mcp/: FastMCP server composition + entry point
"""

from .core.schemas import AreaCode, Coordinate, DrivingResponse, WeatherResponse  # noqa: F401
