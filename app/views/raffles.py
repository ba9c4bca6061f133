from __future__ import annotations

from dataclasses import replace

import pandas as pd
import streamlit as st

from components.debounce import Debouncer
from components.metrics import Kpi, bar_chart, render_kpi_row
from components.narrative import render_empty, render_fetch_error, render_page_intro
from components.sidebar import open_raffle
from config import CURRENCY, AppConfig
from data.aggregates import creator_addresses, raffles_per_day, summarize_raffles
from data.filters import RaffleCriteria, filter_raffles, instant_series, sort_by_start_time
from data.service import DataResult, list_raffles


SNAPSHOT_KEY = "snapshot:raffles"
APPLIED_KEY = "raffles:applied_criteria"
PENDING_KEY = "raffles:pending_criteria"
DEBOUNCER_KEY = "raffles:debouncer"
TABLE_VERSION_KEY = "raffles:table_version"


def load_snapshot(cfg: AppConfig, use_mock: bool) -> DataResult:
    """Fetch once per session (until Reload); sorted most recent first."""
    if SNAPSHOT_KEY not in st.session_state:
        with st.spinner("Loading raffles..."):
            res = list_raffles(cfg, use_mock)
        if res.ok:
            res = replace(res, df=sort_by_start_time(res.df))
        st.session_state[SNAPSHOT_KEY] = res
    return st.session_state[SNAPSHOT_KEY]


def _apply(criteria: RaffleCriteria) -> None:
    st.session_state[APPLIED_KEY] = criteria


def _debouncer(cfg: AppConfig) -> Debouncer:
    if DEBOUNCER_KEY not in st.session_state:
        st.session_state[DEBOUNCER_KEY] = Debouncer(_apply, wait=cfg.search_debounce_ms / 1000.0)
    return st.session_state[DEBOUNCER_KEY]


def _poll(deb: Debouncer) -> None:
    if deb.poll():
        st.rerun()


def _search_form() -> tuple[RaffleCriteria, bool]:
    c1, c2, c3, c4, c5 = st.columns([1, 1, 2, 1, 0.6])
    start = c1.date_input("Start Date", value=None, format="YYYY-MM-DD", key="f_start")
    end = c2.date_input("End Date", value=None, format="YYYY-MM-DD", key="f_end")
    creator = c3.text_input("Creator Address", placeholder="Creator Address", key="f_creator")
    floor = c4.text_input("Floor Price", placeholder="Floor Price", key="f_floor")
    c5.markdown("<div style='height:28px'></div>", unsafe_allow_html=True)
    clicked = c5.button("Search", type="primary", use_container_width=True)
    return RaffleCriteria.from_inputs(start, end, creator, floor), clicked


def _table(filtered: pd.DataFrame) -> pd.DataFrame:
    started = instant_series(filtered["startTime"]).dt.strftime("%Y-%m-%d")
    return pd.DataFrame(
        {
            "Name": filtered["name"].fillna("").astype(str),
            "Creator": filtered["creator"].fillna("").astype(str),
            "Start": started.fillna("—"),
            "Floor Price": filtered["floorPrice"].fillna("").astype(str) + f" {CURRENCY}",
        }
    ).reset_index(drop=True)


def render(cfg: AppConfig, use_mock: bool) -> None:
    st.title("Raffles")
    render_page_intro(
        question="Which raffles match, and what are they worth at floor?",
        context="Search by start date range, creator address, or minimum floor price. Select a row to see its buyers.",
    )

    snapshot = load_snapshot(cfg, use_mock)
    if not snapshot.ok:
        render_fetch_error("Failed to load raffles. Please try again later.")
        return

    st.caption(f"Data source: **{snapshot.source}** · {len(snapshot.df)} records")

    criteria, clicked = _search_form()
    deb = _debouncer(cfg)
    if criteria != st.session_state.get(PENDING_KEY, RaffleCriteria()):
        st.session_state[PENDING_KEY] = criteria
        deb.call(criteria)
    if clicked:
        deb.flush()
    if deb.pending:
        # Re-checks the quiet window without re-rendering the page
        st.fragment(_poll, run_every=max(cfg.search_debounce_ms, 50) / 1000.0)(deb)

    filtered = filter_raffles(snapshot.df, st.session_state.get(APPLIED_KEY, RaffleCriteria()))
    summary = summarize_raffles(filtered)

    if summary.count:
        event = st.dataframe(
            _table(filtered),
            use_container_width=True,
            hide_index=True,
            height=420,
            on_select="rerun",
            selection_mode="single-row",
            key=f"raffle_table:{st.session_state.get(TABLE_VERSION_KEY, 0)}",
        )
        rows = event.selection.rows if event is not None else []
        if rows:
            # Fresh widget key so the selection is not replayed on return
            st.session_state[TABLE_VERSION_KEY] = st.session_state.get(TABLE_VERSION_KEY, 0) + 1
            open_raffle(str(filtered.iloc[rows[0]]["_id"]))
    else:
        render_empty("No raffles found.")

    render_kpi_row(
        [
            Kpi("Total Raffles", f"{summary.count:,}"),
            Kpi(
                "Total Floor Price",
                f"{summary.total_floor_price_display} {CURRENCY}",
                help="Unparsable floor prices count as 0",
            ),
        ]
    )

    addresses = creator_addresses(filtered)
    c1, c2 = st.columns([1, 3])
    c1.download_button(
        "Copy Owner Addresses",
        data=addresses,
        file_name="owner_addresses.txt",
        mime="text/plain",
        disabled=not addresses,
        use_container_width=True,
    )
    with c2.expander("Show owner addresses"):
        st.code(addresses or "(none)", language="text")

    per_day = raffles_per_day(filtered)
    if len(per_day):
        st.subheader("Raffles started per day")
        bar_chart(per_day, x="day", y="raffles")
