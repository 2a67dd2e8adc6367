"""Service helpers behind the name formatting API."""

from typing import Any, Dict, List, Optional

from data.airlines import AirlinePolicy, UnknownAirlineError, get_policy, list_policies, resolve_airline
from pydantic import BaseModel, Field
from src.name_format import compute_fields, format_for_all_airlines, sanitize

MAX_NAME_LENGTH = 200


class FormatError(Exception):
    """Raised when a user request cannot be satisfied."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class NameOnlyRequest(BaseModel):
    given: str = Field(..., max_length=MAX_NAME_LENGTH, description="Given name(s) as printed on the passport.")
    patronymic: str = Field("", max_length=MAX_NAME_LENGTH, description="Patronymic marker such as BIN or BINTI.")
    surname: str = Field("", max_length=MAX_NAME_LENGTH, description="Surname or father's name.")


class NameFormatRequest(NameOnlyRequest):
    airline: str = Field(..., max_length=80, description="Airline key, name, or close spelling.")


def _policy_to_dict(key: str, policy: AirlinePolicy) -> Dict[str, Any]:
    return {
        "key": key,
        "label": policy.label,
        "drop_marker": policy.drop_marker,
        "duplicate_single": policy.duplicate_single,
        "three_fields": policy.three_fields,
        "no_spaces": policy.no_spaces,
    }


def list_airlines(query: Optional[str] = None) -> List[Dict[str, Any]]:
    """Return airline policies filtered by an optional substring."""
    return [_policy_to_dict(key, policy) for key, policy in list_policies(query)]


def format_request(payload: NameFormatRequest) -> Dict[str, Any]:
    try:
        key = resolve_airline(payload.airline)
    except ValueError as exc:
        raise FormatError(400, str(exc)) from exc
    except UnknownAirlineError as exc:
        raise FormatError(404, str(exc)) from exc

    policy = get_policy(key)
    given, patronymic, surname = sanitize(payload.given), sanitize(payload.patronymic), sanitize(payload.surname)
    fields = compute_fields(given, patronymic, surname, policy)
    return {
        "airline": key,
        "label": policy.label,
        "input": {"given": given, "patronymic": patronymic, "surname": surname},
        "fields": fields.as_dict(),
    }


def format_all(payload: NameOnlyRequest) -> Dict[str, Any]:
    table = format_for_all_airlines(payload.given, payload.patronymic, payload.surname)
    results = [
        {
            "airline": row["Airline Key"],
            "label": row["Airline"],
            "fields": {"first": row["First"], "middle": row["Middle"], "last": row["Last"]},
        }
        for _, row in table.iterrows()
    ]
    return {"results": results}
