"""Phone number mask for the sign-up form.

The displayed value is always re-derived from the digits typed so far:

    (555) 555-1234 Ext. 12345

Ten digits make up area code, prefix and line; up to five more are kept as
the extension.
"""

from __future__ import annotations

import re
from typing import Any, Optional

_NON_DIGIT_RE = re.compile(r"\D+")

MAX_DIGITS = 15
DELETE_KEYS = frozenset({"Backspace", "Delete"})


def extract_digits(value: Any) -> str:
    """Return only the digits of ``value``, truncated to 15."""

    digits = re.sub(_NON_DIGIT_RE, "", str(value or ""))
    return digits[:MAX_DIGITS]


def format_phone(raw_input: Any) -> str:
    """Format any raw text into the masked phone + extension display."""

    digits = extract_digits(raw_input)
    area = digits[0:3]
    prefix = digits[3:6]
    line = digits[6:10]
    ext = digits[10:15]

    if not digits:
        return ""
    if len(digits) <= 3:
        # parenthesis closes as soon as the area code is complete
        close = ") " if len(digits) == 3 else ""
        return f"({area}{close}"
    if len(digits) <= 6:
        return f"({area}) {prefix}"

    formatted = f"({area}) {prefix}-{line}"
    if len(digits) >= 10:
        formatted += " Ext." + (f" {ext}" if ext else "")
    return formatted


def should_intercept_delete(
    current_formatted: str,
    caret_start: int,
    caret_end: int,
    key: str,
) -> bool:
    """Tell whether a delete keystroke must bypass the default text edit.

    Only the area-code boundary ``"(555) "`` needs it: removing the
    auto-inserted ``") "`` by hand would leave the mask out of sync with the
    digits, so the last digit is dropped instead.
    """

    if key not in DELETE_KEYS:
        return False
    if caret_start != caret_end:
        return False
    digits = extract_digits(current_formatted)
    return len(digits) <= 3 and caret_start <= 6 and current_formatted.startswith("(")


class PhoneField:
    """Controlled value of the phone input for one mounted form."""

    def __init__(self, value: str = "") -> None:
        self.value = format_phone(value)

    @property
    def digits(self) -> str:
        return extract_digits(self.value)

    def on_change(self, raw: Any) -> str:
        self.value = format_phone(raw)
        return self.value

    def on_keydown(self, key: str, caret_start: int, caret_end: int) -> bool:
        """Handle a keydown; return True when the default edit is prevented."""

        if not should_intercept_delete(self.value, caret_start, caret_end, key):
            return False
        self.value = format_phone(self.digits[:-1])
        return True

    def apply_edit(self, raw: Any, caret: Optional[int] = None) -> str:
        """Apply an edit reported after the fact by a change event.

        Widgets without keydown events only report the edited text. A
        shorter text carrying the same digits means a mask character was
        deleted, which is replayed as a Backspace at ``caret``.
        """

        text = str(raw or "")
        deleted_mask_only = len(text) < len(self.value) and extract_digits(text) == self.digits
        if deleted_mask_only:
            position = len(text) if caret is None else caret
            if self.on_keydown("Backspace", position, position):
                return self.value
        return self.on_change(text)

    def reset(self) -> None:
        self.value = ""
