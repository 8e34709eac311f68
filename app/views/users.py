from __future__ import annotations

import asyncio

import pandas as pd
import streamlit as st

from components.messages import StatusMessage, render_message
from config import AppConfig
from data.models import User, UserCandidate
from data.service import create_user, get_users


# Page state lives in the session; the data layer never sees it
USERS_KEY = "users"
STATUS_KEY = "status"


def _load_users(cfg: AppConfig) -> None:
    with st.spinner("Loading users..."):
        res = asyncio.run(get_users(cfg))
    st.session_state[USERS_KEY] = list(res.payload)
    if res.is_fallback:
        st.session_state[STATUS_KEY] = StatusMessage(res.message, "error")
    else:
        st.session_state[STATUS_KEY] = StatusMessage("Users loaded successfully.")


def _users_frame(users: list[User]) -> pd.DataFrame:
    return pd.DataFrame([u.to_dict() for u in users], columns=["id", "name", "email"])


def _submit(cfg: AppConfig, name: str, email: str) -> None:
    try:
        candidate = UserCandidate.from_form(name, email)
    except ValueError:
        st.warning("Name and email are required.")
        return

    with st.spinner("Creating user..."):
        res = asyncio.run(create_user(cfg, candidate))
    st.session_state[USERS_KEY] = [*st.session_state.get(USERS_KEY, []), res.payload]
    if res.is_fallback:
        st.session_state[STATUS_KEY] = StatusMessage(res.message, "error")
    else:
        st.session_state[STATUS_KEY] = StatusMessage("User created successfully")
    st.rerun()


def render(cfg: AppConfig, reload_requested: bool) -> None:
    if reload_requested or USERS_KEY not in st.session_state:
        _load_users(cfg)

    render_message(st.session_state.get(STATUS_KEY))

    st.subheader("Users")
    users = st.session_state.get(USERS_KEY, [])
    if users:
        st.dataframe(_users_frame(users), hide_index=True, use_container_width=True)
    else:
        st.info("No users")

    st.subheader("Add a user")
    with st.form("user-form", clear_on_submit=True):
        name = st.text_input("Name")
        email = st.text_input("Email")
        submitted = st.form_submit_button("Create user")
    if submitted:
        _submit(cfg, name, email)
