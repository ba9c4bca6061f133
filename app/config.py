from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv


#
# Shared theme tokens (dashboard styling)
# - Centralized here so components/styles.py and components/metrics.py agree.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F3F4F6",     # page background (gray-100)
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",       # card surface
    # Accents (blue-500 / blue-600)
    "accent_primary": "#3B82F6",
    "accent_secondary": "#2563EB",
    "navy_900": "#1F2937",
    "navy_800": "#374151",
    # Text + borders
    "text_primary": "#1F2937",
    "text_secondary": "rgba(75, 85, 99, 0.90)",
    "border_color": "#E5E7EB",
    "grid": "rgba(17, 24, 39, 0.10)",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 12,
    # Status colors
    "success": "#067647",
    "warning": "#F59E0B",
    "danger": "#EF4444",
}

# Floor prices are denominated in SOL on the raffle platform.
CURRENCY = "SOL"

RAFFLES_COLLECTION = "raffles"
BUYERS_COLLECTION = "rafflebuyers"


@dataclass(frozen=True)
class AppConfig:
    # Required for "real data" mode (MongoDB Atlas)
    mongo_username: Optional[str]
    mongo_password: Optional[str]
    mongo_cluster: Optional[str]
    mongo_database: str

    # Full connection string override (local mongod, docker, ...)
    mongo_uri: Optional[str]
    mongo_timeout_ms: int

    # Defaults
    default_use_mock: bool
    # The upstream buyers endpoint returns every buyer; scoping is opt-in.
    scope_buyer_query: bool
    search_debounce_ms: int

    # JSON API
    api_host: str
    api_port: int

    # Logging
    log_level: str
    log_file: Optional[str]

    @property
    def has_store_credentials(self) -> bool:
        return bool(self.mongo_uri) or bool(self.mongo_username and self.mongo_password and self.mongo_cluster)

    @property
    def connection_uri(self) -> str:
        if self.mongo_uri:
            return self.mongo_uri
        user = quote_plus(self.mongo_username or "")
        password = quote_plus(self.mongo_password or "")
        return (
            f"mongodb+srv://{user}:{password}@{self.mongo_cluster}/{self.mongo_database}"
            "?retryWrites=true&w=majority"
        )

    @property
    def store_label(self) -> str:
        # Never echo credentials back to the UI
        if self.mongo_uri:
            return f"{self.mongo_database} (custom URI)"
        return f"{self.mongo_cluster or '<no cluster>'}/{self.mongo_database}"


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getint(name: str, default: int) -> int:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _getbool(name: str, default: bool) -> bool:
    raw = _getenv(name)
    if raw is None:
        return default
    return raw.lower() in ("1", "true", "yes", "on")


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Store variables keep the deployed names (USERNAME, PASSWORD, CLUSTER_NAME, DATABASE_NAME)
    """
    load_dotenv(override=False)

    return AppConfig(
        mongo_username=_getenv("USERNAME"),
        mongo_password=_getenv("PASSWORD"),
        mongo_cluster=_getenv("CLUSTER_NAME"),
        mongo_database=_getenv("DATABASE_NAME", "raffles") or "raffles",
        mongo_uri=_getenv("MONGODB_URI"),
        mongo_timeout_ms=_getint("MONGODB_TIMEOUT_MS", 5000),
        default_use_mock=_getbool("USE_MOCK_DATA", True),
        scope_buyer_query=_getbool("SCOPE_BUYER_QUERY", False),
        search_debounce_ms=max(0, _getint("SEARCH_DEBOUNCE_MS", 300)),
        api_host=_getenv("API_HOST", "127.0.0.1") or "127.0.0.1",
        api_port=_getint("API_PORT", 5000),
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
        log_file=_getenv("LOG_FILE"),
    )
