"""Name field transformation engine.

Turns a traveler's given name, patronymic marker (e.g. BIN/BINTI) and surname into
the first/middle/last layout a particular airline's booking form expects.
All functions here are pure; the only shared state is the read-only policy table.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Dict, Optional, Union

import pandas as pd

from data.airlines import AIRLINES, AirlinePolicy, get_policy

_SEPARATOR_CHARS = re.compile(r"[@\-]")
_NON_NAME_CHARS = re.compile(r"[^A-Z\s]")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class NameFields:
    first: str
    middle: str = ""
    last: str = ""

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


def sanitize(raw: Optional[str]) -> str:
    """Canonical uppercase, single-spaced, A-Z-only form of a raw name part."""
    if not raw:
        return ""
    cleaned = _SEPARATOR_CHARS.sub(" ", str(raw).upper())
    cleaned = _NON_NAME_CHARS.sub("", cleaned)
    return _WHITESPACE.sub(" ", cleaned).strip()


def _strip_spaces(value: str) -> str:
    return _WHITESPACE.sub("", value)


def compute_fields(given: str, patronymic: str, surname: str, policy: AirlinePolicy) -> NameFields:
    """
    Lay out already-sanitized name parts for one airline.

    Rules are applied in a fixed order so combined flags stay deterministic:
    single-name duplication wins over the three-field split, which wins over the
    default two-field layout; whitespace stripping always runs last.
    """
    given = given or ""
    patronymic = patronymic or ""
    surname = surname or ""

    is_single_name = not surname and not patronymic
    if patronymic and surname:
        surname_with_marker = f"{patronymic} {surname}"
    else:
        surname_with_marker = patronymic or surname
    effective_surname = surname if policy.drop_marker else surname_with_marker

    given_parts = given.split()
    first_token = given_parts[0] if given_parts else ""
    remainder = " ".join(given_parts[1:])

    duplicated = is_single_name and policy.duplicate_single
    if duplicated:
        first, middle, last = given, "", given
    elif policy.three_fields:
        first, middle, last = first_token, remainder, effective_surname
    else:
        first, middle, last = given, "", effective_surname

    if policy.no_spaces:
        first = _strip_spaces(first)
        middle = _strip_spaces(middle)
        last = _strip_spaces(last)
        if duplicated:
            last = first

    return NameFields(first=first, middle=middle, last=last)


def format_name(
    given: Optional[str],
    patronymic: Optional[str],
    surname: Optional[str],
    airline: Union[str, AirlinePolicy],
) -> NameFields:
    """Sanitize raw input and compute the fields for an airline key or policy."""
    policy = airline if isinstance(airline, AirlinePolicy) else get_policy(airline)
    return compute_fields(sanitize(given), sanitize(patronymic), sanitize(surname), policy)


def format_for_all_airlines(
    given: Optional[str],
    patronymic: Optional[str] = "",
    surname: Optional[str] = "",
) -> pd.DataFrame:
    clean_given, clean_patronymic, clean_surname = sanitize(given), sanitize(patronymic), sanitize(surname)
    rows = []
    for key, policy in AIRLINES.items():
        fields = compute_fields(clean_given, clean_patronymic, clean_surname, policy)
        rows.append(
            {
                "Airline Key": key,
                "Airline": policy.label,
                "First": fields.first,
                "Middle": fields.middle,
                "Last": fields.last,
            }
        )
    return pd.DataFrame(rows, columns=["Airline Key", "Airline", "First", "Middle", "Last"])
