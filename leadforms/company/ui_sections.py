"""Streamlit UI for the company-information form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import streamlit as st

from leadforms.options import COMPANY_INDUSTRIES, COMPANY_TYPES, STATES, Option, find_option, titles

SESSION_KEY = "company_information"


@dataclass
class SectionResult:
    data: Dict[str, Any]
    submitted: bool = False


def _resolve_option_index(options: Sequence[Option], value: Any) -> Optional[int]:
    option = find_option(options, value)
    if option is None:
        return None
    return list(options).index(option)


def _select(label: str, options: Sequence[Option], placeholder: str, current: Dict[str, Any], name: str) -> str | None:
    title = st.selectbox(
        f"{label} *",
        titles(options),
        index=_resolve_option_index(options, current.get(name)),
        placeholder=placeholder,
    )
    option = find_option(options, title)
    return option.value if option else None


def company_information_section(session_data: Dict[str, Any]) -> SectionResult:
    """Render the company form; values are handed back untouched."""

    st.markdown("## Company Information")
    st.caption("Please provide the information for your incorporated company")

    with st.form("company_information"):
        col1, col2 = st.columns(2)
        with col1:
            company_type = _select("Company Type", COMPANY_TYPES, "C Corporation", session_data, "company-type")
        with col2:
            registration_state = _select(
                "Registration State", STATES, "Delaware", session_data, "registration-state"
            )

        col1, col2 = st.columns(2)
        with col1:
            company_name = st.text_input(
                "Company Name *",
                value=session_data.get("company-name", ""),
                placeholder="Type your company name here",
            )
        with col2:
            entity_ending = st.text_input(
                "Entity Ending *", value=session_data.get("entity-ending", ""), placeholder="Inc."
            )

        industry = _select("Company Industry", COMPANY_INDUSTRIES, "B2C SaaS", session_data, "company-industry")

        col1, col2 = st.columns(2)
        with col1:
            street = st.text_input(
                "Street Name *", value=session_data.get("street-name", ""), placeholder="Geary 2234"
            )
        with col2:
            suite = st.text_input("Suite *", value=session_data.get("suite", ""), placeholder="#166")

        col1, col2, col3 = st.columns(3)
        with col1:
            state = _select("State", STATES, "Delaware", session_data, "state")
        with col2:
            city = st.text_input("City *", value=session_data.get("city", ""), placeholder="San Francisco")
        with col3:
            zip_code = st.text_input("Zip Code *", value=session_data.get("zip-code", ""), placeholder="9409")

        col1, col2 = st.columns(2)
        with col1:
            ein = st.text_input("EIN *", value=session_data.get("ein", ""), placeholder="Type your company EIN here")
        with col2:
            confirm_ein = st.text_input(
                "Confirm EIN *",
                value=session_data.get("confirm-ein", ""),
                placeholder="Confirm your company EIN here",
            )

        submitted = st.form_submit_button("Continue", use_container_width=True)

    data = {
        "company-type": company_type,
        "registration-state": registration_state,
        "company-name": company_name,
        "entity-ending": entity_ending,
        "company-industry": industry,
        "street-name": street,
        "suite": suite,
        "state": state,
        "city": city,
        "zip-code": zip_code,
        "ein": ein,
        "confirm-ein": confirm_ein,
    }
    return SectionResult(data=data, submitted=submitted)
