from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "User Directory (Demo)"

# Rules for the header (components/header.py) and status banners (components/messages.py)
_CSS = """
<style>
[data-testid="stAppViewContainer"]{ background: __BG_PAGE__; color: __TEXT__; }
[data-testid="stSidebar"]{ border-right: 1px solid __BORDER__; }

.app-header, .message{
  background: __BG_CARD__;
  border: 1px solid __BORDER__;
  border-radius: __RADIUS__px;
  box-shadow: __SHADOW__;
}
.app-header{
  display:flex;
  align-items:center;
  justify-content:space-between;
  padding: 10px 14px;
  margin-bottom: 14px;
}
.app-title{ font-size: 20px; font-weight: 700; color: __TITLE__; }
.app-subtitle{ font-size: 14px; color: __TEXT_MUTED__; }
.pill{
  border: 1px solid __BORDER__;
  border-radius: 999px;
  padding: 4px 10px;
  font-size: 13px;
  font-family: monospace;
}

.message{ padding: 10px 14px; margin: 10px 0; font-size: 14px; }
.message--success{ border-left: 4px solid __SUCCESS__; }
.message--error{ border-left: 4px solid __DANGER__; }
.message--info{ border-left: 4px solid __TITLE__; }
</style>
"""


def apply_theme() -> None:
    st.set_page_config(page_title=APP_TITLE, layout="centered")

    css = _CSS
    for token, key in (
        ("__BG_PAGE__", "bg_primary"),
        ("__BG_CARD__", "bg_card"),
        ("__TEXT__", "text_primary"),
        ("__TEXT_MUTED__", "text_secondary"),
        ("__TITLE__", "navy_900"),
        ("__BORDER__", "border_color"),
        ("__SHADOW__", "shadow"),
        ("__RADIUS__", "radius_px"),
        ("__SUCCESS__", "success"),
        ("__DANGER__", "danger"),
    ):
        css = css.replace(token, str(THEME[key]))
    st.markdown(css, unsafe_allow_html=True)
