"""
Raffle search pipeline.

Pure functions over the page snapshot (a DataFrame with the store's field
names as columns). Nothing here mutates its input or touches I/O, so the
same snapshot + criteria always produce the same rows in the same order.

Parsing policy:
- Floor prices are parsed strictly. A malformed price never raises; it fails
  any minimum-price comparison and counts as 0 in sums (see aggregates.py).
- Times are compared as UTC instants. Naive values are taken as UTC.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Optional, Union

import numpy as np
import pandas as pd


DateLike = Union[date, datetime, str, pd.Timestamp]

# Last representable millisecond of a day
_END_OF_DAY = timedelta(days=1) - timedelta(milliseconds=1)


def parse_price(value: Any) -> Optional[float]:
    """Decimal string -> float, or None if it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        n = float(str(value).strip())
    except ValueError:
        return None
    return n if math.isfinite(n) else None


def price_series(values: pd.Series) -> pd.Series:
    """Element-wise parse_price; malformed values become NaN."""
    return pd.to_numeric(values.map(parse_price), errors="coerce")


def instant_series(values: pd.Series) -> pd.Series:
    # ISO-8601 strings with or without time/offset, or datetimes straight from the driver
    as_text = values.map(lambda v: v.isoformat() if isinstance(v, (date, datetime)) else v)
    return pd.to_datetime(as_text, utc=True, errors="coerce", format="ISO8601")


def _is_date_only(value: DateLike) -> bool:
    if isinstance(value, str):
        try:
            date.fromisoformat(value.strip())
        except ValueError:
            return False
        return True
    return isinstance(value, date) and not isinstance(value, datetime)


def parse_instant(value: Optional[DateLike], end_of_day: bool = False) -> Optional[pd.Timestamp]:
    """
    Criteria bound -> UTC Timestamp (ms precision).

    A date-only bound is pinned to the start of that day, or to its last
    millisecond when `end_of_day` is set so the whole end day is included.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        ts = pd.Timestamp(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None
    if pd.isna(ts):
        return None
    ts = ts.tz_localize("UTC") if ts.tzinfo is None else ts.tz_convert("UTC")
    if _is_date_only(value):
        ts = ts.normalize()
        if end_of_day:
            ts = ts + _END_OF_DAY
    return ts.floor("ms")


@dataclass(frozen=True)
class RaffleCriteria:
    start_date: Optional[DateLike] = None
    end_date: Optional[DateLike] = None
    creator: str = ""
    min_floor_price: Optional[str] = None

    @classmethod
    def from_inputs(
        cls,
        start_date: Optional[DateLike] = None,
        end_date: Optional[DateLike] = None,
        creator: Optional[str] = None,
        min_floor_price: Optional[str] = None,
    ) -> "RaffleCriteria":
        """Basic coercion of raw form values: strip, blank -> unset."""

        def blank(v):
            if isinstance(v, str):
                v = v.strip()
                return v or None
            return v

        return cls(
            start_date=blank(start_date),
            end_date=blank(end_date),
            creator=(creator or "").strip(),
            min_floor_price=blank(None if min_floor_price is None else str(min_floor_price)),
        )

    @property
    def is_empty(self) -> bool:
        return (
            self.start_date is None
            and self.end_date is None
            and not self.creator
            and parse_price(self.min_floor_price) is None
        )


def _is_deleted(v: Any) -> bool:
    # Missing flag counts as live; only a true boolean (or "true") deletes
    if isinstance(v, (bool, np.bool_)):
        return bool(v)
    return isinstance(v, str) and v.strip().lower() == "true"


def _not_deleted(values: pd.Series) -> pd.Series:
    return ~values.map(_is_deleted).astype(bool)


def sort_by_start_time(raffles: pd.DataFrame) -> pd.DataFrame:
    """Most recent first. Stable for equal times; unparsable times go last."""
    if raffles.empty or "startTime" not in raffles.columns:
        return raffles.copy()
    keys = instant_series(raffles["startTime"]).reset_index(drop=True)
    positions = keys.sort_values(ascending=False, kind="stable", na_position="last").index
    return raffles.iloc[positions]


def filter_raffles(raffles: pd.DataFrame, criteria: RaffleCriteria) -> pd.DataFrame:
    """Rows of `raffles` matching every active criterion, in input order."""
    if raffles.empty:
        return raffles.copy()

    mask = _not_deleted(raffles.get("isDeleted", pd.Series(False, index=raffles.index)))

    start = parse_instant(criteria.start_date)
    end = parse_instant(criteria.end_date, end_of_day=True)
    if start is not None or end is not None:
        times = instant_series(raffles["startTime"])
        if start is not None:
            mask &= times.ge(start).fillna(False).astype(bool)
        if end is not None:
            mask &= times.le(end).fillna(False).astype(bool)

    if criteria.creator:
        creators = raffles["creator"].fillna("").astype(str).str.lower()
        mask &= creators.str.contains(criteria.creator.lower(), regex=False)

    min_price = parse_price(criteria.min_floor_price)
    if min_price is not None:
        prices = price_series(raffles["floorPrice"])
        mask &= prices.ge(min_price).fillna(False).astype(bool)

    return raffles.loc[mask]


def scope_buyers(buyers: pd.DataFrame, raffle_id: str) -> pd.DataFrame:
    """Keep only records whose raffleId equals `raffle_id`."""
    if buyers.empty or "raffleId" not in buyers.columns:
        return buyers.iloc[0:0].copy()
    target = str(raffle_id)
    keep = buyers["raffleId"].map(lambda v: v is not None and str(v) == target).astype(bool)
    return buyers.loc[keep]
