from __future__ import annotations

import html
from dataclasses import dataclass

import streamlit as st


@dataclass(frozen=True)
class StatusMessage:
    text: str
    kind: str = "success"  # "success" | "error" | "info"


def render_message(message: StatusMessage | None) -> None:
    if message is None or not message.text:
        return
    st.markdown(
        f'<div class="message message--{message.kind}">{html.escape(message.text)}</div>',
        unsafe_allow_html=True,
    )
