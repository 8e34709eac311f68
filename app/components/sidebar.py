from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from config import AppConfig


@dataclass(frozen=True)
class SidebarState:
    reload_requested: bool


def render_sidebar(cfg: AppConfig) -> SidebarState:
    with st.sidebar:
        st.markdown("### 👥 User Directory")
        st.caption("UI-to-API separation demo")

        with st.expander("⚙️ Settings", expanded=False):
            st.markdown("**Users endpoint**")
            st.code(cfg.users_url, language="text")
            timeout = f"{cfg.api_timeout_s:g}s" if cfg.api_timeout_s is not None else "none"
            st.caption(f"Request timeout: {timeout}. Any failure falls back to mock data.")

        reload_requested = st.button("🔄 Reload users", use_container_width=True)

    return SidebarState(reload_requested=reload_requested)
