from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

import pandas as pd
from faker import Faker

from data.queries import BUYER_COLUMNS, RAFFLE_COLUMNS


fake = Faker()

BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
COLLECTIONS = ["Mad Lads", "Tensorians", "Claynosaurz", "Okay Bears", "SMB Gen2", "Famous Fox"]


def _wallet(rng: random.Random) -> str:
    # Solana-style base58 address
    return "".join(rng.choice(BASE58) for _ in range(44))


def _object_id(rng: random.Random) -> str:
    return "".join(rng.choice("0123456789abcdef") for _ in range(24))


def _iso(ts: datetime) -> str:
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def raffles_mock(n_rows: int = 120, now: datetime | None = None) -> pd.DataFrame:
    rng = random.Random(7)
    Faker.seed(7)
    now = now or datetime.now(timezone.utc)
    creators = [_wallet(rng) for _ in range(15)]
    rows = []
    for _ in range(n_rows):
        start = now - timedelta(days=rng.randint(0, 90), minutes=rng.randint(0, 24 * 60))
        collection = rng.choice(COLLECTIONS)
        floor = max(0.05, rng.gauss(12.0 if collection in ("Mad Lads", "Tensorians") else 3.5, 2.5))
        rows.append(
            {
                "_id": _object_id(rng),
                "name": f"{collection} #{rng.randint(1, 9999)} - {fake.word().title()}",
                "creator": rng.choice(creators),
                "startTime": _iso(start),
                "floorPrice": f"{floor:.2f}",
                "isDeleted": rng.random() < 0.08,
            }
        )
    return pd.DataFrame(rows, columns=RAFFLE_COLUMNS)


def buyers_mock(raffle_ids: list[str], n_rows: int = 600, now: datetime | None = None) -> pd.DataFrame:
    """All buyer records across raffles, unscoped like the live endpoint."""
    rng = random.Random(13)
    now = now or datetime.now(timezone.utc)
    next_ticket: dict[str, int] = {}
    rows = []
    for _ in range(n_rows if raffle_ids else 0):
        rid = rng.choice(raffle_ids)
        n_tickets = max(0, int(rng.gauss(4, 3)))
        first = next_ticket.get(rid, 1)
        next_ticket[rid] = first + n_tickets
        created = now - timedelta(days=rng.randint(0, 60), minutes=rng.randint(0, 24 * 60))
        rows.append(
            {
                "_id": _object_id(rng),
                "raffleId": rid,
                "buyer": _wallet(rng),
                "tickets": list(range(first, first + n_tickets)),
                "createdAt": _iso(created),
                "updatedAt": _iso(created + timedelta(minutes=rng.randint(0, 600))),
            }
        )
    return pd.DataFrame(rows, columns=BUYER_COLUMNS)
