"""Sign-up page of the Vyral PEO onboarding flow."""

from __future__ import annotations

import logging

import streamlit as st

from leadforms.app_bootstrap import ensure_bootstrap
from leadforms.signup.state import initialize_session
from leadforms.signup.ui_sections import signup_section

log = logging.getLogger(__name__)


def main() -> None:
    st.set_page_config(page_title="Sign up | Vyral PEO", page_icon="👋", layout="centered")
    initialize_session(ensure_bootstrap())
    state = signup_section()
    log.debug("signup.render state=%s", state.value)


if __name__ == "__main__":
    main()
