"""Data Transfer Objects used by the sign-up form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class SignUpPayload:
    """Trimmed and typed sign-up answers, built fresh for every submit."""

    first_name: str
    last_name: str
    email: str
    phone_number: str
    company_name: str
    role: str
    employee_count: int = 0
    additional_notes: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON body sent to the webhook."""

        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "phoneNumber": self.phone_number,
            "companyName": self.company_name,
            "role": self.role,
            "employeeCount": self.employee_count,
            "additionalNotes": self.additional_notes,
        }
