from __future__ import annotations

import streamlit as st


def render_page_intro(question: str, context: str | None = None) -> None:
    st.markdown(
        f"""
<div class="tab-intro">
  <div class="tab-intro-question">{question}</div>
  {f'<div class="tab-intro-context">{context}</div>' if context else ''}
</div>
        """,
        unsafe_allow_html=True,
    )


def render_empty(message: str) -> None:
    st.markdown(f'<div class="empty-state">{message}</div>', unsafe_allow_html=True)


def render_fetch_error(message: str) -> None:
    """Inline failure banner. No retry here; the sidebar's Reload button refetches."""
    st.markdown(f'<div class="fetch-error">{message}</div>', unsafe_allow_html=True)
