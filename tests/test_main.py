import pandas as pd
import pytest

import main
from data.reference_cases import ReferenceCase
from src.case_runner import run_cases
from src.reference_check import FetchResult, UrlCheck


@pytest.fixture(autouse=True)
def quiet_env(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("REFERENCES_PATH", raising=False)
    monkeypatch.delenv("REFERENCE_FETCH_TIMEOUT", raising=False)
    monkeypatch.delenv("REFERENCE_FETCH_CONCURRENCY", raising=False)
    monkeypatch.setattr(main, "setup_logging", lambda *args, **kwargs: None)


def test_skip_urls_runs_logic_checks_only(capsys, monkeypatch):
    def fail_fetch(*args, **kwargs):
        raise AssertionError("network should not be touched")

    monkeypatch.setattr(main, "check_references", fail_fetch)

    assert main.main(["--skip-urls"]) == 0

    output = capsys.readouterr().out
    assert "ALL PASSED" in output
    assert "URL HEALTH" not in output


def test_missing_reference_document_is_not_fatal(capsys, tmp_path):
    assert main.main(["--references", str(tmp_path / "missing.md")]) == 0

    assert "All logic tests passed." in capsys.readouterr().out


def test_url_failures_do_not_change_exit_code(capsys, monkeypatch, tmp_path):
    references = tmp_path / "References.md"
    references.write_text("https://example.com/gone\n", encoding="utf-8")
    captured = {}

    def fake_check(path, config):
        captured["config"] = config
        return [UrlCheck(FetchResult("https://example.com/gone", False, 0, "", "timeout"))]

    monkeypatch.setattr(main, "check_references", fake_check)

    code = main.main(["--references", str(references), "--timeout", "2", "--concurrency", "4"])

    assert code == 0
    assert captured["config"].timeout_seconds == 2
    assert captured["config"].concurrency == 4
    assert "1 URL(s) unreachable" in capsys.readouterr().out


def test_logic_failure_sets_exit_code(monkeypatch, capsys):
    bad = ReferenceCase("mas", "broken", "JOHN", "", "DOE", {"last": "SMITH"})
    monkeypatch.setattr(main, "run_cases", lambda: run_cases([bad]))

    assert main.main(["--skip-urls"]) == 1
    assert "1 logic test(s) failed" in capsys.readouterr().out


def test_save_dir_writes_csv_tables(tmp_path, capsys):
    main.main(["--skip-urls", "--save-dir", str(tmp_path / "out")])

    table = pd.read_csv(tmp_path / "out" / "logic_cases.csv")
    assert len(table) == 26
    assert table["Passed"].all()


def test_format_single_airline(capsys):
    code = main.main(["--airline", "Batik Air", "--given", "mohammed fazil", "--patronymic", "bin", "--surname", "mohammed faleel"])

    output = capsys.readouterr().out
    assert code == 0
    assert "Batik Air (batikair)" in output
    assert "First:  MOHAMMED FAZIL" in output
    assert "Last:   MOHAMMED FALEEL" in output
    assert "Middle" not in output


def test_format_single_three_field_airline_shows_middle(capsys):
    main.main(["--airline", "ana", "--given", "JOHN WILLIAM", "--surname", "DOE"])

    assert "Middle: WILLIAM" in capsys.readouterr().out


def test_format_unknown_airline(capsys):
    assert main.main(["--airline", "qwxz", "--given", "JOHN"]) == 2
    assert "Unknown airline" in capsys.readouterr().err


def test_all_airlines_table(capsys):
    assert main.main(["--all-airlines", "--given", "ISKANDAR"]) == 0

    output = capsys.readouterr().out
    assert "Airline Key" in output
    assert "china_airlines" in output


@pytest.mark.parametrize(
    "argv",
    [
        ["--airline", "mas"],
        ["--all-airlines"],
        ["--given", "JOHN"],
        ["--timeout", "0"],
        ["--concurrency", "0"],
    ],
)
def test_invalid_argument_combinations(argv):
    with pytest.raises(SystemExit) as excinfo:
        main.parse_args(argv)
    assert excinfo.value.code == 2
