"""Mapping utilities for the sign-up form."""

from __future__ import annotations

import math
from typing import Any, Mapping

from .dto import SignUpPayload


def assemble(fields: Mapping[str, Any]) -> SignUpPayload:
    """Create a SignUpPayload from the submitted form fields."""

    return SignUpPayload(
        first_name=_text(fields, "first-name"),
        last_name=_text(fields, "last-name"),
        email=_text(fields, "email"),
        phone_number=_text(fields, "phone-number"),
        company_name=_text(fields, "company-name"),
        role=_text(fields, "role"),
        employee_count=_to_non_negative_int(fields.get("employee-count")),
        additional_notes=_text(fields, "additional-notes"),
    )


def clamp_non_negative(raw: Any) -> str:
    """Keep the employee count input at a non-negative number while editing."""

    text = str(raw if raw is not None else "")
    if not text.strip():
        return text
    try:
        number = float(text)
    except ValueError:
        return "0"
    if math.isnan(number) or number < 0:
        return "0"
    return text


def _text(fields: Mapping[str, Any], name: str) -> str:
    return str(fields.get(name) or "").strip()


def _to_non_negative_int(value: Any) -> int:
    if value in (None, ""):
        return 0
    try:
        number = int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(number, 0)
