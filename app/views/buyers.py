from __future__ import annotations

import html
from dataclasses import replace

import pandas as pd
import streamlit as st

from components.metrics import Kpi, render_kpi_row
from components.narrative import render_empty, render_fetch_error, render_page_intro
from components.sidebar import back_to_raffles, open_raffle
from config import AppConfig
from data.aggregates import summarize_buyers
from data.filters import RaffleCriteria, filter_raffles, instant_series, scope_buyers
from data.service import DataResult, list_buyers
from views.raffles import load_snapshot


def _snapshot_key(raffle_id: str) -> str:
    return f"snapshot:buyers:{raffle_id}"


def load_buyers(cfg: AppConfig, use_mock: bool, raffle_id: str) -> DataResult:
    """Fetch once per raffle; always re-scoped to `raffle_id` before caching."""
    key = _snapshot_key(raffle_id)
    if key not in st.session_state:
        with st.spinner("Loading buyers..."):
            res = list_buyers(cfg, use_mock, raffle_id)
        if res.ok:
            res = replace(res, df=scope_buyers(res.df, raffle_id))
        st.session_state[key] = res
    return st.session_state[key]


def _pick_raffle(cfg: AppConfig, use_mock: bool) -> None:
    raffles = load_snapshot(cfg, use_mock)
    if not raffles.ok:
        render_fetch_error("Failed to load raffles. Please try again later.")
        return
    live = filter_raffles(raffles.df, RaffleCriteria())
    if live.empty:
        render_empty("No raffles found.")
        return
    options = live["_id"].astype(str).tolist()
    names = dict(zip(options, live["name"].fillna("").astype(str)))
    choice = st.selectbox("Raffle", options, index=None, format_func=lambda rid: f"{names[rid]} ({rid})")
    if choice:
        open_raffle(choice)


def _table(buyers: pd.DataFrame) -> pd.DataFrame:
    purchased = instant_series(buyers["createdAt"]).dt.strftime("%Y-%m-%d")
    return pd.DataFrame(
        {
            "Buyer": buyers["buyer"].fillna("").astype(str),
            "Total Tickets": buyers["tickets"].map(lambda t: len(t) if isinstance(t, (list, tuple)) else 0),
            "Purchased on": purchased.fillna("—"),
        }
    ).reset_index(drop=True)


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Raffle Buyers")

    raffle_id = st.query_params.get("raffle")
    if not raffle_id:
        render_page_intro(question="Pick a raffle to see who bought tickets.")
        _pick_raffle(cfg, use_mock)
        return

    if st.button("← Back to raffles"):
        back_to_raffles()

    render_page_intro(
        question="Who bought tickets, and how many?",
        context=f"Raffle <code>{html.escape(raffle_id)}</code>",
    )

    res = load_buyers(cfg, use_mock, raffle_id)
    if not res.ok:
        render_fetch_error("Failed to load buyers. Please try again later.")
        return

    st.caption(f"Data source: **{res.source}**")

    buyers = res.df
    if len(buyers):
        st.dataframe(_table(buyers), use_container_width=True, hide_index=True, height=420)
    else:
        render_empty("No buyers found for this raffle.")

    summary = summarize_buyers(buyers)
    render_kpi_row(
        [
            Kpi("Total Purchasers", f"{summary.total_purchasers:,}"),
            Kpi("Total Tickets Purchased", f"{summary.total_tickets:,}"),
        ]
    )
