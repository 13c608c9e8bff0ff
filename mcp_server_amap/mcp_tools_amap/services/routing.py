from __future__ import annotations

import logging

from ..utils.formatting import format_route_report
from .amap_client import AMapClient
from .resolver import LocationResolver

logger = logging.getLogger(__name__)

MSG_ORIGIN_NOT_FOUND = "未找到起点位置: {origin}"
MSG_DESTINATION_NOT_FOUND = "未找到终点位置: {destination}"
MSG_FETCH_FAILED = "获取路线规划数据失败"
MSG_PROVIDER_ERROR = "请求错误: {info} (代码: {infocode})"
MSG_NO_ROUTE = "未找到从 {origin} 到 {destination} 的驾车路线"


def get_route_text(
    origin: str,
    destination: str,
    client: AMapClient,
    resolver: LocationResolver,
) -> str:
    """Driving route between two place names, rendered as text.

    Both ends are geocoded first; the route header uses AMap's formatted
    addresses rather than the raw input.
    """
    start = resolver.resolve_coordinate(origin)
    if start is None:
        return MSG_ORIGIN_NOT_FOUND.format(origin=origin)

    end = resolver.resolve_coordinate(destination)
    if end is None:
        return MSG_DESTINATION_NOT_FOUND.format(destination=destination)

    resp = client.driving(start.location, end.location)
    if resp is None:
        return MSG_FETCH_FAILED

    if not resp.ok:
        logger.info("AMap driving error: %s (%s)", resp.info, resp.infocode)
        return MSG_PROVIDER_ERROR.format(info=resp.info, infocode=resp.infocode)

    # An empty path list is a failure, not an empty report.
    if resp.route is None or not resp.route.paths:
        return MSG_NO_ROUTE.format(origin=origin, destination=destination)

    return format_route_report(resp.route, start.label, end.label)
