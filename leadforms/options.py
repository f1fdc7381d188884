"""Static option tables used by the onboarding forms."""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence, Tuple


class Option(NamedTuple):
    value: str
    title: str


COMPANY_TYPES: Tuple[Option, ...] = (
    Option("c-corporation", "C Corporation"),
    Option("s-corporation", "S Corporation"),
    Option("llc", "Limited Liability Company (LLC)"),
    Option("partnership", "Partnership"),
    Option("sole-proprietorship", "Sole Proprietorship"),
    Option("professional-corporation", "Professional Corporation"),
    Option("nonprofit", "Nonprofit Corporation"),
)

STATES: Tuple[Option, ...] = (
    Option("AL", "Alabama"),
    Option("AK", "Alaska"),
    Option("AZ", "Arizona"),
    Option("AR", "Arkansas"),
    Option("CA", "California"),
    Option("CO", "Colorado"),
    Option("CT", "Connecticut"),
    Option("DE", "Delaware"),
    Option("DC", "District of Columbia"),
    Option("FL", "Florida"),
    Option("GA", "Georgia"),
    Option("HI", "Hawaii"),
    Option("ID", "Idaho"),
    Option("IL", "Illinois"),
    Option("IN", "Indiana"),
    Option("IA", "Iowa"),
    Option("KS", "Kansas"),
    Option("KY", "Kentucky"),
    Option("LA", "Louisiana"),
    Option("ME", "Maine"),
    Option("MD", "Maryland"),
    Option("MA", "Massachusetts"),
    Option("MI", "Michigan"),
    Option("MN", "Minnesota"),
    Option("MS", "Mississippi"),
    Option("MO", "Missouri"),
    Option("MT", "Montana"),
    Option("NE", "Nebraska"),
    Option("NV", "Nevada"),
    Option("NH", "New Hampshire"),
    Option("NJ", "New Jersey"),
    Option("NM", "New Mexico"),
    Option("NY", "New York"),
    Option("NC", "North Carolina"),
    Option("ND", "North Dakota"),
    Option("OH", "Ohio"),
    Option("OK", "Oklahoma"),
    Option("OR", "Oregon"),
    Option("PA", "Pennsylvania"),
    Option("RI", "Rhode Island"),
    Option("SC", "South Carolina"),
    Option("SD", "South Dakota"),
    Option("TN", "Tennessee"),
    Option("TX", "Texas"),
    Option("UT", "Utah"),
    Option("VT", "Vermont"),
    Option("VA", "Virginia"),
    Option("WA", "Washington"),
    Option("WV", "West Virginia"),
    Option("WI", "Wisconsin"),
    Option("WY", "Wyoming"),
)

COMPANY_INDUSTRIES: Tuple[Option, ...] = (
    Option("b2b-saas", "B2B SaaS"),
    Option("b2c-saas", "B2C SaaS"),
    Option("ecommerce", "E-commerce"),
    Option("fintech", "Fintech"),
    Option("healthcare", "Healthcare"),
    Option("biotech", "Biotech"),
    Option("education", "Education"),
    Option("marketplace", "Marketplace"),
    Option("media", "Media & Entertainment"),
    Option("professional-services", "Professional Services"),
    Option("real-estate", "Real Estate"),
    Option("manufacturing", "Manufacturing"),
    Option("hardware", "Hardware"),
    Option("hospitality", "Hospitality"),
    Option("nonprofit", "Nonprofit"),
    Option("other", "Other"),
)


def titles(options: Sequence[Option]) -> list[str]:
    return [option.title for option in options]


def find_option(options: Sequence[Option], value: Optional[str]) -> Optional[Option]:
    """Return the option whose value or title matches ``value`` (case-insensitive)."""

    if value is None:
        return None
    normalized = str(value).casefold()
    for option in options:
        if option.value.casefold() == normalized or option.title.casefold() == normalized:
            return option
    return None
