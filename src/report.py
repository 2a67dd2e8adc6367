"""Terminal rendering for the reference-case and URL checks."""

from __future__ import annotations

import os
import sys
from typing import Dict, List, Optional, Sequence, TextIO

from data.airlines import AIRLINES
from src.case_runner import CaseResult
from src.reference_check import UrlCheck

ANSI_COLORS: Dict[str, str] = {
    "green": "\x1b[32m",
    "red": "\x1b[31m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "cyan": "\x1b[36m",
    "dim": "\x1b[2m",
    "bold": "\x1b[1m",
    "reset": "\x1b[0m",
}

RULE = "─" * 66
TICK = "✓"
CROSS = "✗"


def exit_code(results: Sequence[CaseResult]) -> int:
    """Only logic mismatches fail the run; unreachable URLs are warnings."""
    return 0 if all(result.passed for result in results) else 1


def _shorten(url: str, width: int = 72) -> str:
    return url if len(url) <= width else url[: width - 3] + "…"


class ConsoleReport:
    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None):
        self.stream = stream or sys.stdout
        if color is None:
            color = not os.environ.get("NO_COLOR")
        self.c = ANSI_COLORS if color else {name: "" for name in ANSI_COLORS}

    def _line(self, text: str = "") -> None:
        print(text, file=self.stream)

    def header(self) -> None:
        c = self.c
        self._line(f"\n{c['bold']}Flight Name Formatter — Reference Checks{c['reset']}")
        self._line(RULE)

    def logic_section(self, results: List[CaseResult]) -> None:
        c = self.c
        self._line(f"\n{c['bold']}{c['blue']}[1/2] LOGIC TESTS{c['reset']}  (compute_fields against worked examples)\n")

        previous_airline = None
        for result in results:
            case = result.case
            if case.airline != previous_airline:
                previous_airline = case.airline
                policy = AIRLINES.get(case.airline)
                label = policy.label if policy else case.airline
                self._line(f"  {c['cyan']}{label}{c['reset']}")

            if result.passed:
                self._line(f"    {c['green']}{TICK}{c['reset']} {case.note}")
                continue

            self._line(f"    {c['red']}{CROSS}{c['reset']} {case.note}")
            actual = result.actual.as_dict()
            for name, expected in case.expected.items():
                got = actual.get(name, "")
                mark = f"{c['green']}{TICK}" if got == expected else f"{c['red']}{CROSS}"
                self._line(
                    f"      {mark}{c['reset']} {name}: expected {c['bold']}\"{expected}\"{c['reset']}"
                    f"  got {c['bold']}\"{got}\"{c['reset']}"
                )

        failed = sum(1 for result in results if not result.passed)
        passed = len(results) - failed
        if failed == 0:
            verdict = f"{c['green']}{c['bold']}ALL PASSED{c['reset']}"
        else:
            verdict = f"{c['red']}{c['bold']}{failed} FAILED{c['reset']}"
        self._line(f"\n  {verdict} — {passed} passed, {failed} failed out of {len(results)}\n")

    def url_section(self, checks: List[UrlCheck], source: str) -> None:
        c = self.c
        self._line(f"{c['bold']}{c['blue']}[2/2] URL HEALTH + EXAMPLE SCAN{c['reset']}  (from {source})\n")
        self._line(f"  {c['dim']}Fetching each reference URL… SPA-rendered pages may show empty{c['reset']}")
        self._line(f"  {c['dim']}content even when alive. 403/blocked ≠ page removed.{c['reset']}\n")

        for check in checks:
            result = check.result
            if result.ok:
                self._line(f"  {c['green']}{TICK}{c['reset']} {result.status}  {c['dim']}{_shorten(result.url)}{c['reset']}")
                if check.snippets:
                    self._line(f"      {c['yellow']}↳ Example sentences found:{c['reset']}")
                    for snippet in check.snippets:
                        self._line(f"        {c['dim']}• {snippet[:150]}{c['reset']}")
                else:
                    self._line(f"      {c['dim']}↳ No example text detected (may be SPA-rendered or gated){c['reset']}")
            else:
                reason = f" ({result.error})" if result.error else ""
                self._line(f"  {c['red']}{CROSS}{c['reset']} {result.status or 'ERR'}  {result.url}{reason}")

        failed = sum(1 for check in checks if not check.result.ok)
        reachable = len(checks) - failed
        if failed == 0:
            verdict = f"{c['green']}{c['bold']}ALL REACHABLE{c['reset']}"
        else:
            verdict = f"{c['yellow']}{c['bold']}{failed} UNREACHABLE{c['reset']}"
        self._line(f"\n  {verdict} — {reachable} ok, {failed} failed out of {len(checks)} URLs")

    def summary(self, results: Sequence[CaseResult], checks: Sequence[UrlCheck]) -> None:
        c = self.c
        self._line("\n" + RULE)
        failed = sum(1 for result in results if not result.passed)
        if failed == 0:
            self._line(f"\n  {c['green']}{c['bold']}{TICK} All logic tests passed.{c['reset']}")
        else:
            self._line(
                f"\n  {c['red']}{c['bold']}{CROSS} {failed} logic test(s) failed — "
                f"check compute_fields() in src/name_format.py.{c['reset']}"
            )
        unreachable = sum(1 for check in checks if not check.result.ok)
        if unreachable:
            self._line(f"  {c['yellow']}⚠  {unreachable} URL(s) unreachable — verify the reference document.{c['reset']}")
        self._line()
