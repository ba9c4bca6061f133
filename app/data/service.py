from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

import pandas as pd

from config import AppConfig
from data.connection import FetchError, MongoStore, get_store, plain_document
from data import queries
from data import mock_data
from log import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class DataResult:
    df: pd.DataFrame
    source: str  # "mock" | "mongodb"
    error: str | None = None
    # Documents exactly as read (JSON-ready); the API serves these, not `df`
    records: list[dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


def _frame(docs: list[dict], columns: list[str]) -> pd.DataFrame:
    df = pd.DataFrame(docs)
    for c in columns:
        if c not in df.columns:
            df[c] = pd.Series(dtype="object")
    return df


def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
    # Equality-only filter documents, as built in queries.py
    return all(doc.get(k) == v for k, v in query.items())


def _fetch(
    use_mock: bool,
    fn_live: Callable[[], list[dict]],
    fn_mock: Callable[[], list[dict]],
    columns: list[str],
) -> DataResult:
    # No retry and no silent fallback: a failed live read surfaces as an error
    if use_mock:
        docs, source = fn_mock(), "mock"
    else:
        source = "mongodb"
        try:
            docs = fn_live()
        except FetchError as e:
            return DataResult(df=pd.DataFrame(columns=columns), source=source, error=str(e))
    docs = [plain_document(d) for d in docs]
    return DataResult(df=_frame(docs, columns), source=source, records=docs)


def list_raffles(cfg: AppConfig, use_mock: bool, store: Optional[MongoStore] = None) -> DataResult:
    """Full, unfiltered, unsorted raffle set."""
    store = store or get_store(cfg)
    collection, query = queries.q_raffles(cfg)

    res = _fetch(
        use_mock,
        fn_live=lambda: store.find_all(collection, query),
        fn_mock=lambda: mock_data.raffles_mock().to_dict(orient="records"),
        columns=queries.RAFFLE_COLUMNS,
    )
    logger.info("Loaded %d raffles (source=%s)", len(res.df), res.source)
    return res


def list_buyers(cfg: AppConfig, use_mock: bool, raffle_id: str, store: Optional[MongoStore] = None) -> DataResult:
    """
    Buyer records as the store returns them. Not guaranteed to be scoped to
    `raffle_id`; pass the result through filters.scope_buyers before use.
    """
    store = store or get_store(cfg)
    collection, query = queries.q_raffle_buyers(cfg, raffle_id)

    def mock() -> list[dict]:
        ids = mock_data.raffles_mock()["_id"].tolist()
        docs = mock_data.buyers_mock(ids).to_dict(orient="records")
        return [d for d in docs if _matches(d, query)]

    res = _fetch(
        use_mock,
        fn_live=lambda: store.find_all(collection, query),
        fn_mock=mock,
        columns=queries.BUYER_COLUMNS,
    )
    logger.info("Loaded %d buyer records for raffle %s (source=%s)", len(res.df), raffle_id, res.source)
    return res
