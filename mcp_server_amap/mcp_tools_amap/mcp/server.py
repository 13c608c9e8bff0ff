"""MCP server (official python-sdk) exposing the AMap weather & route tools.

This uses FastMCP from the official MCP Python SDK:
- Tools are ordinary Python functions registered with @mcp.tool().
- Schemas are derived automatically from type hints / pydantic Field metadata.
- The server is composed explicitly in create_server(); importing this module
  has no side effects.
"""

from __future__ import annotations

import sys
import argparse
import logging
from typing import Annotated, Optional

import uvicorn
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ..core.config import AMapSettings
from ..services.amap_client import AMapClient
from ..services.resolver import LocationResolver
from ..services.routing import get_route_text
from ..services.weather import get_weather_text

logger = logging.getLogger("amap-mcp")

SERVER_NAME = "china-weather-map"


# ---------------------------------------------------------------------------
# MCP-Server & Tools
# ---------------------------------------------------------------------------

def create_server(settings: AMapSettings, client: Optional[AMapClient] = None) -> FastMCP:
    """Build the client + resolver and bind both tools to a fresh FastMCP server."""
    client = client or AMapClient(settings)
    resolver = LocationResolver(client)

    mcp = FastMCP(name=SERVER_NAME, stateless_http=False)

    @mcp.tool(name="get-weather", description="获取中国城市天气预报")
    def get_weather(
        city: Annotated[str, Field(description="城市名称，如北京、上海、广州等")],
    ) -> str:
        logger.info("get-weather city=%s", city)
        return get_weather_text(city, client, resolver)

    @mcp.tool(name="get-route", description="获取驾车路线规划")
    def get_route(
        origin: Annotated[str, Field(description="起点位置，如北京南站、上海外滩等地点名称")],
        destination: Annotated[str, Field(description="终点位置，如北京西站、上海虹桥火车站等地点名称")],
    ) -> str:
        logger.info("get-route origin=%s destination=%s", origin, destination)
        return get_route_text(origin, destination, client, resolver)

    return mcp


# ---------------------------------------------------------------------------
# Entry-Point (stdio or streamable HTTP via Uvicorn)
# ---------------------------------------------------------------------------

def main(argv: Optional[list] = None) -> None:
    """Start the china-weather-map MCP server."""
    parser = argparse.ArgumentParser(prog=SERVER_NAME)
    parser.add_argument("--transport", choices=["stdio", "streamable-http"], default="stdio")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    # stdout belongs to the stdio transport
    logging.basicConfig(stream=sys.stderr, level=args.log_level.upper())

    settings = AMapSettings.from_env()
    if not settings.has_key:
        logger.warning("AMAP_API_KEY is not set; AMap will reject every request.")

    mcp = create_server(settings)

    if args.transport == "stdio":
        logger.info("Starting %s MCP server on stdio …", SERVER_NAME)
        mcp.run(transport="stdio")
        return

    logger.info(
        "Starting %s MCP server (streamable-http) on http://%s:%d/mcp …",
        SERVER_NAME,
        args.host,
        args.port,
    )

    # ASGI-App; der MCP-Endpunkt ist /mcp
    uvicorn.run(
        mcp.streamable_http_app(),
        host=args.host,
        port=args.port,
        reload=False,
        loop="asyncio",
    )


if __name__ == "__main__":
    main()
