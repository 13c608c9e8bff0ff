from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..core.schemas import AreaCode, Coordinate
from .amap_client import AMapClient

logger = logging.getLogger(__name__)

CityCodeStrategy = Callable[[str], Optional[AreaCode]]


class LocationResolver:
    """Turn free-form Chinese place names into AMap identifiers.

    City codes are tried through an ordered list of strategies (geocoder first,
    then the district lookup). Coordinates only ever come from the geocoder.
    The first candidate AMap returns always wins.
    """

    def __init__(self, client: AMapClient) -> None:
        self.client = client
        self.city_code_strategies: List[CityCodeStrategy] = [
            self._city_code_from_geocode,
            self._city_code_from_district,
        ]

    def resolve_city_code(self, name: str) -> Optional[AreaCode]:
        for strategy in self.city_code_strategies:
            code = strategy(name)
            if code is not None:
                logger.debug("Resolved city '%s' -> %s via %s", name, code.adcode, strategy.__name__)
                return code
        logger.info("No area code found for '%s'", name)
        return None

    def resolve_coordinate(self, name: str) -> Optional[Coordinate]:
        resp = self.client.geocode(name)
        if resp is None or not resp.ok or not resp.geocodes:
            logger.info("No coordinate found for '%s'", name)
            return None

        first = resp.geocodes[0]
        if not first.location:
            logger.info("No coordinate found for '%s'", name)
            return None
        return Coordinate(location=first.location, label=first.formatted_address or name)

    def _city_code_from_geocode(self, name: str) -> Optional[AreaCode]:
        resp = self.client.geocode(name)
        if resp is None or not resp.ok or not resp.geocodes:
            return None
        adcode = resp.geocodes[0].adcode
        return AreaCode(adcode=adcode) if adcode else None

    def _city_code_from_district(self, name: str) -> Optional[AreaCode]:
        resp = self.client.district(name)
        if resp is None or not resp.ok or not resp.districts:
            return None
        adcode = resp.districts[0].adcode
        return AreaCode(adcode=adcode) if adcode else None
