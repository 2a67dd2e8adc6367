import io

import pytest

from data.reference_cases import REFERENCE_CASES, ReferenceCase
from src.case_runner import run_cases
from src.reference_check import FetchResult, UrlCheck
from src.report import ANSI_COLORS, ConsoleReport, exit_code


@pytest.fixture
def plain_report():
    stream = io.StringIO()
    return ConsoleReport(stream=stream, color=False), stream


def _failing_case():
    return ReferenceCase("ana", "ANA guide: wrong expectation", "JOHN WILLIAM", "", "DOE", {"first": "JOHN WILLIAM", "last": "DOE"})


def test_exit_code_only_depends_on_logic_results():
    assert exit_code(run_cases()) == 0
    assert exit_code(run_cases([_failing_case()])) == 1
    assert exit_code([]) == 0


def test_logic_section_groups_by_airline(plain_report):
    report, stream = plain_report

    report.logic_section(run_cases(REFERENCE_CASES[:4]))

    output = stream.getvalue()
    assert output.count("Malaysia Airlines") == 1
    assert "\n  AirAsia\n" in output
    assert output.count("✓") == 4
    assert "ALL PASSED — 4 passed, 0 failed out of 4" in output


def test_logic_section_shows_field_diff_for_failures(plain_report):
    report, stream = plain_report

    report.logic_section(run_cases([_failing_case()]))

    output = stream.getvalue()
    assert "✗ ANA guide: wrong expectation" in output
    assert '✗ first: expected "JOHN WILLIAM"  got "JOHN"' in output
    assert '✓ last: expected "DOE"  got "DOE"' in output
    assert "1 FAILED — 0 passed, 1 failed out of 1" in output


def test_url_section_reports_snippets_and_failures(plain_report):
    report, stream = plain_report
    long_url = "https://example.com/" + "a" * 80
    checks = [
        UrlCheck(FetchResult(long_url, True, 200, "<p/>"), ["For example, JOHN DOE enters DOE as the surname."]),
        UrlCheck(FetchResult("https://example.com/empty", True, 200, "")),
        UrlCheck(FetchResult("https://example.com/slow", False, 0, "", "timeout")),
        UrlCheck(FetchResult("https://example.com/gone", False, 404)),
    ]

    report.url_section(checks, "References.md")

    output = stream.getvalue()
    assert "(from References.md)" in output
    assert long_url[:69] + "…" in output
    assert long_url not in output
    assert "• For example, JOHN DOE enters DOE as the surname." in output
    assert "No example text detected" in output
    assert "✗ ERR  https://example.com/slow (timeout)" in output
    assert "✗ 404  https://example.com/gone" in output
    assert "2 UNREACHABLE — 2 ok, 2 failed out of 4 URLs" in output


def test_summary_warns_about_unreachable_urls(plain_report):
    report, stream = plain_report
    checks = [UrlCheck(FetchResult("https://example.com/slow", False, 0, "", "timeout"))]

    report.summary(run_cases(), checks)

    output = stream.getvalue()
    assert "All logic tests passed." in output
    assert "1 URL(s) unreachable" in output


def test_summary_reports_logic_failures(plain_report):
    report, stream = plain_report

    report.summary(run_cases([_failing_case()]), [])

    assert "1 logic test(s) failed" in stream.getvalue()


def test_colors_follow_no_color_env(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    stream = io.StringIO()

    ConsoleReport(stream=stream).header()

    assert "\x1b[" not in stream.getvalue()


def test_colors_enabled_by_default(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    stream = io.StringIO()

    ConsoleReport(stream=stream).header()

    assert ANSI_COLORS["bold"] in stream.getvalue()
