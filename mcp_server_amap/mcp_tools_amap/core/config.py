"""Runtime settings for the AMap web service, sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AMapSettings:
    """Credential and transport settings injected into the AMap client."""

    api_key: str = ""
    base_url: str = "https://restapi.amap.com"
    timeout_seconds: float = 30.0

    @classmethod
    def from_env(cls) -> "AMapSettings":
        return cls(
            api_key=os.getenv("AMAP_API_KEY", cls.api_key).strip(),
            base_url=os.getenv("AMAP_BASE_URL", cls.base_url),
            timeout_seconds=float(
                os.getenv("AMAP_TIMEOUT_SECONDS", str(cls.timeout_seconds))
            ),
        )

    @property
    def has_key(self) -> bool:
        return bool(self.api_key)
