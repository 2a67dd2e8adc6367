"""Check the engine against the worked examples from airline reference pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

import pandas as pd

from data.airlines import get_policy
from data.reference_cases import REFERENCE_CASES, ReferenceCase
from src.name_format import NameFields, compute_fields, sanitize


@dataclass(frozen=True)
class FieldMismatch:
    field: str
    expected: str
    actual: str


@dataclass
class CaseResult:
    case: ReferenceCase
    actual: NameFields
    mismatches: List[FieldMismatch] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.mismatches


def run_case(case: ReferenceCase) -> CaseResult:
    policy = get_policy(case.airline)
    actual = compute_fields(
        sanitize(case.given),
        sanitize(case.patronymic),
        sanitize(case.surname),
        policy,
    )
    actual_fields = actual.as_dict()
    mismatches = [
        FieldMismatch(name, expected, actual_fields.get(name, ""))
        for name, expected in case.expected.items()
        if actual_fields.get(name, "") != expected
    ]
    return CaseResult(case=case, actual=actual, mismatches=mismatches)


def run_cases(cases: Iterable[ReferenceCase] = REFERENCE_CASES) -> List[CaseResult]:
    return [run_case(case) for case in cases]


def results_to_frame(results: Iterable[CaseResult]) -> pd.DataFrame:
    """Flatten case results into one row per case for CSV export."""
    rows = []
    for result in results:
        case = result.case
        rows.append(
            {
                "Airline Key": case.airline,
                "Note": case.note,
                "Given": case.given,
                "Patronymic": case.patronymic,
                "Surname": case.surname,
                "First": result.actual.first,
                "Middle": result.actual.middle,
                "Last": result.actual.last,
                "Passed": result.passed,
                "Mismatches": "; ".join(
                    f"{m.field}: expected {m.expected!r} got {m.actual!r}" for m in result.mismatches
                ),
            }
        )
    columns = ["Airline Key", "Note", "Given", "Patronymic", "Surname", "First", "Middle", "Last", "Passed", "Mismatches"]
    return pd.DataFrame(rows, columns=columns)
