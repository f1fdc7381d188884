"""Company-information step of the onboarding flow."""

from __future__ import annotations

import logging

import streamlit as st

from leadforms.app_bootstrap import ensure_bootstrap
from leadforms.company.ui_sections import SESSION_KEY, company_information_section

log = logging.getLogger(__name__)


def main() -> None:
    st.set_page_config(page_title="Company information | Vyral PEO", page_icon="🏢", layout="centered")
    ensure_bootstrap()
    st.session_state.setdefault(SESSION_KEY, {})

    result = company_information_section(st.session_state[SESSION_KEY])
    if result.submitted:
        st.session_state[SESSION_KEY] = result.data
        log.info("company.saved company=%s", result.data.get("company-name"))
        st.success("Company information saved.")


if __name__ == "__main__":
    main()
