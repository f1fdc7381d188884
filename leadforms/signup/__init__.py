"""Sign-up form module."""

from .dto import SignUpPayload
from .mapper import assemble, clamp_non_negative
from .phone import PhoneField, extract_digits, format_phone, should_intercept_delete
from .service import SubmissionController, SubmissionState
from .validators import REQUIRED_FIELDS, missing_required_fields

__all__ = [
    "REQUIRED_FIELDS",
    "PhoneField",
    "SignUpPayload",
    "SubmissionController",
    "SubmissionState",
    "assemble",
    "clamp_non_negative",
    "extract_digits",
    "format_phone",
    "missing_required_fields",
    "should_intercept_delete",
]
