"""Session helpers for the sign-up page."""

from __future__ import annotations

from typing import Optional

import streamlit as st

from leadforms.config import AppConfig, load_config
from leadforms.webhook_client import WebhookClient

from .phone import PhoneField
from .service import SubmissionController

PHONE_KEY = "signup_phone_number"
PHONE_FIELD_KEY = "signup_phone_field"
CONTROLLER_KEY = "signup_controller"


def initialize_session(config: Optional[AppConfig] = None) -> None:
    """Mount the sign-up form state once per browser session."""

    if PHONE_FIELD_KEY not in st.session_state:
        st.session_state[PHONE_FIELD_KEY] = PhoneField()
    if PHONE_KEY not in st.session_state:
        # widget state is dropped when the page is left; the mask goes with it
        st.session_state[PHONE_FIELD_KEY].reset()
        st.session_state[PHONE_KEY] = ""
    if CONTROLLER_KEY not in st.session_state:
        config = config or load_config()
        client = WebhookClient.from_config(config.webhook)
        st.session_state[CONTROLLER_KEY] = SubmissionController(client)


def get_phone_field() -> PhoneField:
    return st.session_state[PHONE_FIELD_KEY]


def get_controller() -> SubmissionController:
    return st.session_state[CONTROLLER_KEY]


def reset_session() -> None:
    """Unmount the form: clear the phone mask and the submission state."""

    if PHONE_FIELD_KEY in st.session_state:
        st.session_state[PHONE_FIELD_KEY].reset()
    if CONTROLLER_KEY in st.session_state:
        st.session_state[CONTROLLER_KEY].reset()
    st.session_state[PHONE_KEY] = ""
