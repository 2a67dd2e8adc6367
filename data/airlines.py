"""Airline name-field policies shared across the project.

Each airline's booking form splits a traveler's name differently. The quirks are
captured as a handful of independent flags; `src/name_format.py` applies them in a
fixed order so any combination is well defined.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from rapidfuzz import fuzz, process  # type: ignore


@dataclass(frozen=True)
class AirlinePolicy:
    label: str
    drop_marker: bool = False
    duplicate_single: bool = False
    three_fields: bool = False
    no_spaces: bool = False


class UnknownAirlineError(KeyError):
    """Raised when an airline key or query does not map to a known policy."""

    def __init__(self, query):
        super().__init__(query)
        self.query = query

    def __str__(self) -> str:
        return f"Unknown airline: {self.query!r}"


AIRLINES: Mapping[str, AirlinePolicy] = MappingProxyType(
    {
        "mas": AirlinePolicy("Malaysia Airlines"),
        "airasia": AirlinePolicy("AirAsia"),
        "batikair": AirlinePolicy("Batik Air", drop_marker=True, duplicate_single=True),
        "firefly": AirlinePolicy("Firefly"),
        "qatar": AirlinePolicy("Qatar Airways"),
        "turkish": AirlinePolicy("Turkish Airlines"),
        "thai": AirlinePolicy("Thai Airways"),
        "ana": AirlinePolicy("ANA", three_fields=True),
        "jal": AirlinePolicy("Japan Airlines", three_fields=True),
        "china_airlines": AirlinePolicy("China Airlines", no_spaces=True, duplicate_single=True),
        "royal_brunei": AirlinePolicy("Royal Brunei Airlines"),
        "srilankan": AirlinePolicy("SriLankan Airlines"),
        "scoot": AirlinePolicy("Scoot"),
        "cebu_pacific": AirlinePolicy("Cebu Pacific"),
        "lion_air": AirlinePolicy("Lion Air", duplicate_single=True),
        "hk_express": AirlinePolicy("HK Express"),
        "air_india": AirlinePolicy("Air India"),
        "etihad": AirlinePolicy("Etihad Airways"),
        "saudia": AirlinePolicy("Saudia"),
        "oman_air": AirlinePolicy("Oman Air"),
    }
)


def normalize_name(name):
    if not isinstance(name, str):
        return ""
    lowered = name.lower().replace("_", " ")
    for token in ["airlines", "airways", "air line", "airline", "air"]:
        lowered = lowered.replace(token, " ")
    return "".join(ch for ch in lowered if ch.isalnum()).strip()


def get_policy(key: str) -> AirlinePolicy:
    """Exact, case-insensitive lookup by airline key."""
    cleaned = key.strip().lower() if isinstance(key, str) else key
    try:
        return AIRLINES[cleaned]
    except (KeyError, TypeError):
        raise UnknownAirlineError(key) from None


def resolve_airline(query: str, min_score: float = 80) -> str:
    """Return the airline key that best matches a key, label, or loose spelling."""
    if not isinstance(query, str) or not query.strip():
        raise ValueError("Airline query must be a non-empty string.")

    cleaned = query.strip().lower()
    if cleaned in AIRLINES:
        return cleaned

    normalized = normalize_name(query)
    # Labels like "Air India" normalize to a single distinctive token ("india");
    # fall back to the lowercased query when nothing but generic words remain.
    if not normalized:
        normalized = "".join(ch for ch in cleaned if ch.isalnum())

    choices = {}
    for key, policy in AIRLINES.items():
        choices[f"label:{key}"] = normalize_name(policy.label) or key
        choices[f"key:{key}"] = key.replace("_", "")

    for choice_id, candidate in choices.items():
        if choice_id.startswith("label:") and candidate == normalized:
            return choice_id.split(":", 1)[1]

    match = process.extractOne(normalized, choices, scorer=fuzz.WRatio)
    if match is None or match[1] < min_score:
        raise UnknownAirlineError(query)
    _, _, choice_id = match
    return choice_id.split(":", 1)[1]


def list_policies(query: Optional[str] = None) -> List[Tuple[str, AirlinePolicy]]:
    """Airline table rows in declaration order, optionally filtered by substring."""
    rows = list(AIRLINES.items())
    if not query or not query.strip():
        return rows
    needle = query.strip().lower()
    return [
        (key, policy)
        for key, policy in rows
        if needle in key or needle in policy.label.lower()
    ]
