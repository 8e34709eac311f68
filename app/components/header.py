from __future__ import annotations

import html

import streamlit as st


def render_header(app_name: str, subtitle: str, right_pill: str) -> None:
    st.markdown(
        f"""
<div class="app-header">
  <div>
    <div class="app-title">{html.escape(app_name)}</div>
    <div class="app-subtitle">{html.escape(subtitle)}</div>
  </div>
  <div class="pill">{html.escape(right_pill)}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
