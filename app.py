"""Entry point of the Vyral PEO onboarding app."""

from __future__ import annotations

import streamlit as st

from leadforms.app_bootstrap import ensure_bootstrap
from leadforms.signup.state import reset_session


def _hero_section() -> None:
    st.markdown("# Vyral PEO")
    st.markdown(
        "Payroll, benefits and HR for growing teams. Tell us about yourself and "
        "your company and we will tailor the onboarding to your needs."
    )


def _steps_section() -> None:
    col1, col2 = st.columns(2)
    with col1:
        st.markdown("### 1. Sign up")
        st.caption("Your contact details so our team can reach out.")
        if st.button("Start sign-up", use_container_width=True, type="primary"):
            reset_session()
            st.switch_page("pages/01_Sign_Up.py")
    with col2:
        st.markdown("### 2. Company information")
        st.caption("Legal entity, address and EIN of your incorporated company.")
        if st.button("Company information", use_container_width=True):
            st.switch_page("pages/02_Company_Information.py")


def main() -> None:
    """Global settings and top-level content of the app."""
    st.set_page_config(page_title="Home | Vyral PEO", page_icon="✨", layout="wide")
    ensure_bootstrap()
    _hero_section()
    st.divider()
    _steps_section()


if __name__ == "__main__":
    main()
