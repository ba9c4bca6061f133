from __future__ import annotations

from typing import Any

from config import BUYERS_COLLECTION, RAFFLES_COLLECTION, AppConfig


RAFFLE_COLUMNS = ["_id", "name", "creator", "startTime", "floorPrice", "isDeleted"]
BUYER_COLUMNS = ["_id", "raffleId", "buyer", "tickets", "createdAt", "updatedAt"]


def q_raffles(cfg: AppConfig) -> tuple[str, dict[str, Any]]:
    # Unfiltered on purpose: search runs over the full snapshot
    return RAFFLES_COLLECTION, {}


def q_raffle_buyers(cfg: AppConfig, raffle_id: str) -> tuple[str, dict[str, Any]]:
    """Buyers for a raffle page.

    The deployed endpoint returns every buyer record; scoping server-side is
    opt-in via SCOPE_BUYER_QUERY. Callers re-filter by raffleId either way.
    """
    if cfg.scope_buyer_query:
        return BUYERS_COLLECTION, {"raffleId": raffle_id}
    return BUYERS_COLLECTION, {}
