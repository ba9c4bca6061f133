#!/usr/bin/env python3
"""
Export a raffle search to CSV from the command line.

Runs the same fetch + search pipeline as the dashboard and prints the totals.

Usage:
  python scripts/export_raffles.py --out raffles.csv \
    --start 2024-01-01 --end 2024-03-31 --creator 7xKX --min-floor 1.5
  python scripts/export_raffles.py --out buyers.csv --buyers <raffleId>
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

APP_DIR = Path(__file__).resolve().parent.parent / "app"
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))

from config import CURRENCY, get_config  # noqa: E402
from data.aggregates import summarize_buyers, summarize_raffles  # noqa: E402
from data.filters import RaffleCriteria, filter_raffles, scope_buyers, sort_by_start_time  # noqa: E402
from data.service import list_buyers, list_raffles  # noqa: E402
from log import setup_logger  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", required=True)
    ap.add_argument("--start")
    ap.add_argument("--end")
    ap.add_argument("--creator", default="")
    ap.add_argument("--min-floor")
    ap.add_argument("--buyers", metavar="RAFFLE_ID", help="export buyers of one raffle instead")
    ap.add_argument("--mock", action="store_true", help="use mock data regardless of USE_MOCK_DATA")
    args = ap.parse_args()

    cfg = get_config()
    setup_logger(level=cfg.log_level, log_file=cfg.log_file)
    use_mock = args.mock or cfg.default_use_mock
    out_path = Path(args.out)

    if args.buyers:
        res = list_buyers(cfg, use_mock, args.buyers)
        if not res.ok:
            print(f"ERROR: {res.error}")
            sys.exit(1)
        rows = scope_buyers(res.df, args.buyers)
        summary = summarize_buyers(rows)
        totals = f"Purchasers: {summary.total_purchasers}  Tickets: {summary.total_tickets}"
    else:
        res = list_raffles(cfg, use_mock)
        if not res.ok:
            print(f"ERROR: {res.error}")
            sys.exit(1)
        criteria = RaffleCriteria.from_inputs(args.start, args.end, args.creator, args.min_floor)
        rows = filter_raffles(sort_by_start_time(res.df), criteria)
        summary = summarize_raffles(rows)
        totals = f"Raffles: {summary.count}  Floor total: {summary.total_floor_price_display} {CURRENCY}"

    out_path.parent.mkdir(parents=True, exist_ok=True)
    rows.to_csv(out_path, index=False)
    print(f"Wrote: {out_path} ({len(rows)} rows, source={res.source})")
    print(totals)


if __name__ == "__main__":
    main()
