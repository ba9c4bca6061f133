"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pandas as pd
import pytest

from config import AppConfig
from data.connection import FetchError


def make_config(**overrides) -> AppConfig:
    values = dict(
        mongo_username="reader",
        mongo_password="s3cret",
        mongo_cluster="cluster0.example.mongodb.net",
        mongo_database="raffles",
        mongo_uri=None,
        mongo_timeout_ms=100,
        default_use_mock=False,
        scope_buyer_query=False,
        search_debounce_ms=300,
        api_host="127.0.0.1",
        api_port=5000,
        log_level="INFO",
        log_file=None,
    )
    values.update(overrides)
    return AppConfig(**values)


class FakeStore:
    """Stands in for MongoStore: serves fixed documents per collection."""

    def __init__(self, docs: dict[str, list[dict]] | None = None, fail: bool = False) -> None:
        self.docs = docs or {}
        self.fail = fail
        self.calls: list[tuple[str, dict]] = []

    def find_all(self, collection: str, query: dict | None = None) -> list[dict]:
        self.calls.append((collection, query or {}))
        if self.fail:
            raise FetchError()
        rows = self.docs.get(collection, [])
        if query:
            rows = [r for r in rows if all(r.get(k) == v for k, v in query.items())]
        return [dict(r) for r in rows]


@pytest.fixture
def cfg() -> AppConfig:
    return make_config()


@pytest.fixture
def scenario_raffles() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"_id": "a", "name": "A", "creator": "Alice", "startTime": "2024-01-01", "floorPrice": "1.5", "isDeleted": False},
            {"_id": "b", "name": "B", "creator": "Bob", "startTime": "2024-02-01", "floorPrice": "0.5", "isDeleted": True},
        ]
    )


@pytest.fixture
def raffles() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"_id": "r1", "name": "Okay Bears #1", "creator": "7xKXabc", "startTime": "2024-03-10T12:00:00.000Z", "floorPrice": "2.25", "isDeleted": False},
            {"_id": "r2", "name": "Mad Lads #2", "creator": "9QrsTUV", "startTime": "2024-03-05T08:30:00.000Z", "floorPrice": "12.00", "isDeleted": False},
            {"_id": "r3", "name": "Deleted", "creator": "7xKXabc", "startTime": "2024-03-04T00:00:00.000Z", "floorPrice": "50", "isDeleted": True},
            {"_id": "r4", "name": "Broken price", "creator": "7XKXzzz", "startTime": "2024-02-28T23:59:00.000Z", "floorPrice": "abc", "isDeleted": False},
            {"_id": "r5", "name": "Old", "creator": "Hh11", "startTime": "2024-01-15T10:00:00.000Z", "floorPrice": "0.75", "isDeleted": False},
        ]
    )


@pytest.fixture
def buyer_docs() -> list[dict]:
    return [
        {"_id": "b1", "raffleId": "r1", "buyer": "W1", "tickets": [1, 2], "createdAt": "2024-03-11T00:00:00Z", "updatedAt": "2024-03-11T00:00:00Z"},
        {"_id": "b2", "raffleId": "r2", "buyer": "W2", "tickets": [3], "createdAt": "2024-03-12T00:00:00Z", "updatedAt": "2024-03-12T00:00:00Z"},
        {"_id": "b3", "raffleId": "r1", "buyer": "W3", "tickets": [], "createdAt": "2024-03-13T00:00:00Z", "updatedAt": "2024-03-13T00:00:00Z"},
    ]
