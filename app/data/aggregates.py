from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from data.filters import instant_series, price_series


@dataclass(frozen=True)
class RaffleSummary:
    count: int
    total_floor_price: float

    @property
    def total_floor_price_display(self) -> str:
        return f"{self.total_floor_price:.2f}"


@dataclass(frozen=True)
class BuyerSummary:
    total_purchasers: int
    total_tickets: int


def summarize_raffles(raffles: pd.DataFrame) -> RaffleSummary:
    """
    Count every row; sum parsable floor prices, unparsable ones add 0.
    A malformed price therefore still counts toward `count`.
    """
    if raffles.empty:
        return RaffleSummary(count=0, total_floor_price=0.0)
    total = float(price_series(raffles["floorPrice"]).fillna(0.0).sum())
    return RaffleSummary(count=int(len(raffles)), total_floor_price=total)


def _ticket_count(tickets) -> int:
    return len(tickets) if isinstance(tickets, (list, tuple)) else 0


def summarize_buyers(buyers: pd.DataFrame) -> BuyerSummary:
    if buyers.empty:
        return BuyerSummary(total_purchasers=0, total_tickets=0)
    return BuyerSummary(
        total_purchasers=int(len(buyers)),
        total_tickets=int(buyers["tickets"].map(_ticket_count).sum()),
    )


def creator_addresses(raffles: pd.DataFrame) -> str:
    """Newline-joined creator address per row, in row order."""
    if raffles.empty:
        return ""
    return "\n".join(raffles["creator"].fillna("").astype(str).tolist())


def raffles_per_day(raffles: pd.DataFrame) -> pd.DataFrame:
    """Raffles started per UTC day (columns: day, raffles)."""
    if raffles.empty:
        return pd.DataFrame(columns=["day", "raffles"])
    days = instant_series(raffles["startTime"]).dt.tz_localize(None).dt.normalize().dropna()
    out = days.value_counts().sort_index().rename_axis("day").reset_index(name="raffles")
    return out
