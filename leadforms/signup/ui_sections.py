"""Streamlit UI for the sign-up form."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import streamlit as st

from .mapper import clamp_non_negative
from .service import SubmissionController, SubmissionState
from .state import PHONE_KEY, get_controller, get_phone_field

log = logging.getLogger(__name__)

EMPLOYEE_COUNT_KEY = "signup_employee_count"

BUTTON_LABELS = {
    SubmissionState.IDLE: "Connect with us",
    SubmissionState.LOADING: "Submitting",
    SubmissionState.SUCCESS: "✓ Sent!",
}


@dataclass(frozen=True)
class FieldDef:
    name: str
    label: str
    placeholder: str
    required: bool = True
    wide: bool = False


FIELDS = (
    FieldDef("first-name", "First Name", "Type your first name here"),
    FieldDef("last-name", "Last Name", "Type your last name here"),
    FieldDef("email", "Email", "john.doe@gmail.com"),
    FieldDef("phone-number", "Phone Number", "(555) 555-5555 Ext. 1234"),
    FieldDef("company-name", "Company Name", "Vyral LLC"),
    FieldDef("role", "Role", "Founder, Operations, etc."),
    FieldDef("employee-count", "Employee Count", "e.g., 10"),
    FieldDef(
        "additional-notes",
        "Additional Notes (optional)",
        "Anything else you'd like us to know?",
        required=False,
        wide=True,
    ),
)


def session_key(name: str) -> str:
    return "signup_" + name.replace("-", "_")


def button_label(state: SubmissionState) -> str:
    return BUTTON_LABELS[state]


def collect_fields(session: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
    """Read the named form fields from the session as plain strings."""

    source = st.session_state if session is None else session
    return {field_def.name: str(source.get(session_key(field_def.name)) or "") for field_def in FIELDS}


def _on_phone_change() -> None:
    field = get_phone_field()
    st.session_state[PHONE_KEY] = field.apply_edit(st.session_state.get(PHONE_KEY))


def _on_employee_count_change() -> None:
    st.session_state[EMPLOYEE_COUNT_KEY] = clamp_non_negative(st.session_state.get(EMPLOYEE_COUNT_KEY))


def _render_field(field_def: FieldDef) -> None:
    label = f"{field_def.label} *" if field_def.required else field_def.label
    key = session_key(field_def.name)
    if field_def.name == "phone-number":
        st.text_input(label, key=key, placeholder=field_def.placeholder, max_chars=26, on_change=_on_phone_change)
    elif field_def.name == "employee-count":
        st.text_input(label, key=key, placeholder=field_def.placeholder, on_change=_on_employee_count_change)
    elif field_def.name == "additional-notes":
        st.text_area(label, key=key, placeholder=field_def.placeholder)
    else:
        st.text_input(label, key=key, placeholder=field_def.placeholder)


def run_submit(controller: SubmissionController, fields: Dict[str, str]) -> Optional[SubmissionState]:
    """Run one submit; unexpected errors are logged and shown as a generic message."""

    try:
        return asyncio.run(controller.submit(fields))
    except Exception:  # noqa: BLE001
        log.exception("signup.submit.error")
        st.error("Something went wrong while sending the form. Please try again.")
    return None


def _render_status(placeholder: Any, state: SubmissionState) -> None:
    if state is SubmissionState.LOADING:
        placeholder.info("⏳ " + button_label(state))
    elif state is SubmissionState.SUCCESS:
        placeholder.success(button_label(state))
    else:
        placeholder.empty()


def signup_section() -> SubmissionState:
    """Render the sign-up form and run a submit when the button is clicked."""

    st.markdown("## Welcome to Vyral PEO 👋")
    st.caption(
        "Share a few details so we can tailor Vyral PEO services to your needs. "
        "After you submit, our AI agent will reach out to connect."
    )

    paired = [field_def for field_def in FIELDS if not field_def.wide]
    for idx in range(0, len(paired), 2):
        columns = st.columns(2)
        for column, field_def in zip(columns, paired[idx : idx + 2]):
            with column:
                _render_field(field_def)
    for field_def in FIELDS:
        if field_def.wide:
            _render_field(field_def)

    controller = get_controller()
    status = st.empty()
    _render_status(status, controller.state)
    controller.on_state_change = lambda state: _render_status(status, state)

    clicked = st.button(
        button_label(controller.state),
        disabled=not controller.can_submit,
        type="primary",
    )
    if clicked:
        previous = controller.state
        state = run_submit(controller, collect_fields())
        if state is not None and state is not previous:
            st.rerun()
    return controller.state
