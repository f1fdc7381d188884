"""Presence rules for the sign-up form."""

from __future__ import annotations

from typing import Any, List, Mapping

REQUIRED_FIELDS = (
    "first-name",
    "last-name",
    "email",
    "phone-number",
    "company-name",
    "role",
    "employee-count",
)


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    return bool(str(value).strip())


def missing_required_fields(fields: Mapping[str, Any]) -> List[str]:
    """Return the required field names that are empty after trimming."""

    return [name for name in REQUIRED_FIELDS if not _is_present(fields.get(name))]
