from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens (page styling)
# - Centralized here; components/styles.py turns them into CSS.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F4F3EE",     # page background
    "bg_card": "#FFFFFF",       # card surface
    "navy_900": "#0B1220",
    # Text + borders
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.72)",
    "border_color": "#E6E4E0",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 10,
    # Status colors
    "success": "#067647",
    "danger": "#B42318",
}

DEFAULT_API_BASE_URL = "http://localhost:3000"


@dataclass(frozen=True)
class AppConfig:
    # Remote users service, e.g. a local json-server
    api_base_url: str

    # None means the remote call may wait indefinitely
    api_timeout_s: Optional[float]

    log_level: str

    @property
    def users_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/users"


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"USERS_API_TIMEOUT_S must be a positive number of seconds, got {raw!r}")
    return value


def _parse_log_level(raw: Optional[str]) -> str:
    level = (raw or "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"LOG_LEVEL must be a standard logging level name, got {raw!r}")
    return level


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Blank values count as unset
    """
    load_dotenv(override=False)

    return AppConfig(
        api_base_url=_getenv("USERS_API_BASE_URL", DEFAULT_API_BASE_URL) or DEFAULT_API_BASE_URL,
        api_timeout_s=_parse_timeout(_getenv("USERS_API_TIMEOUT_S")),
        log_level=_parse_log_level(_getenv("LOG_LEVEL")),
    )


def configure_logging(cfg: AppConfig) -> None:
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
