from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from config import AppConfig


@dataclass(frozen=True)
class SidebarState:
    view: str
    use_mock: bool


NAV_ITEMS = [
    ("🎟️ Raffles", "raffles"),
    ("👥 Raffle Buyers", "buyers"),
]


def _label_for(view: str) -> str:
    return next(l for l, v in NAV_ITEMS if v == view)


def open_raffle(raffle_id: str) -> None:
    st.query_params["raffle"] = raffle_id
    st.session_state["nav_label"] = _label_for("buyers")
    st.rerun()


def back_to_raffles() -> None:
    st.query_params.pop("raffle", None)
    st.session_state["nav_label"] = _label_for("raffles")
    st.rerun()


def clear_snapshots() -> None:
    for key in [k for k in st.session_state.keys() if str(k).startswith("snapshot:")]:
        del st.session_state[key]


def render_sidebar(cfg: AppConfig) -> SidebarState:
    with st.sidebar:
        st.markdown("### 🎟️ Raffle Dashboard")
        st.caption("Raffles and ticket buyers, read-only")

        labels = [l for l, _ in NAV_ITEMS]
        # A raffle id in the URL (?raffle=...) opens the buyers page directly
        default_view = "buyers" if st.query_params.get("raffle") else "raffles"
        default_label = st.session_state.get("nav_label") or _label_for(default_view)
        idx = labels.index(default_label) if default_label in labels else 0

        label = st.radio(
            "Nav",
            labels,
            index=idx,
            label_visibility="collapsed",
        )
        st.session_state["nav_label"] = label
        view = dict(NAV_ITEMS)[label]

        with st.expander("⚙️ Settings", expanded=False):
            use_mock = st.toggle(
                "Use mock data",
                value=st.session_state.get("use_mock", cfg.default_use_mock),
                help="When off, the app reads MongoDB. Failures are shown, not masked.",
            )
            if use_mock != st.session_state.get("use_mock", cfg.default_use_mock):
                clear_snapshots()
            st.session_state["use_mock"] = use_mock

            st.markdown("**Store**")
            st.code(cfg.store_label, language="text")

        if st.button("🔄 Reload data", use_container_width=True):
            clear_snapshots()

    use_mock = st.session_state.get("use_mock", cfg.default_use_mock)
    return SidebarState(view=view, use_mock=use_mock)
