import argparse
import logging
import os
import sys
from pathlib import Path

from data.airlines import UnknownAirlineError, get_policy, resolve_airline
from src.case_runner import results_to_frame, run_cases
from src.logging_setup import setup_logging
from src.name_format import format_for_all_airlines, format_name
from src.reference_check import FetchConfig, check_references, checks_to_frame
from src.report import ConsoleReport, exit_code

BASE_DIR = Path(__file__).resolve().parent
DEFAULT_REFERENCES = BASE_DIR / "References.md"

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Airline passenger name formatter: check worked examples or format a name."
    )
    parser.add_argument(
        "--references",
        type=str,
        default=os.environ.get("REFERENCES_PATH") or str(DEFAULT_REFERENCES),
        help="Reference document whose URLs are checked for reachability and example text."
    )
    parser.add_argument(
        "--skip-urls",
        action="store_true",
        help="Only run the worked-example logic checks; skip fetching reference URLs."
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Per-request timeout in seconds for reference URL fetches."
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        help="Number of reference URLs fetched at once (1 fetches sequentially)."
    )
    parser.add_argument(
        "--save-dir",
        type=str,
        help="Optional directory to persist logic-case and URL-check tables as CSV files."
    )
    parser.add_argument(
        "--airline",
        help="Airline key or name to format a single traveler's name for (requires --given)."
    )
    parser.add_argument(
        "--all-airlines",
        action="store_true",
        help="Show how the name is laid out for every known airline (requires --given)."
    )
    parser.add_argument("--given", help="Given name(s), e.g. 'AHMAD FALIQ'.")
    parser.add_argument("--patronymic", default="", help="Patronymic marker such as BIN or BINTI.")
    parser.add_argument("--surname", default="", help="Surname or father's name.")
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colours in the console report."
    )
    args = parser.parse_args(argv)

    if (args.airline or args.all_airlines) and not args.given:
        parser.error("--given is required with --airline or --all-airlines")
    if args.given is not None and not (args.airline or args.all_airlines):
        parser.error("--given needs --airline or --all-airlines")
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be positive")
    if args.concurrency is not None and args.concurrency < 1:
        parser.error("--concurrency must be at least 1")
    return args


def build_fetch_config(args):
    config = FetchConfig.from_env()
    if args.timeout is not None:
        config.timeout_seconds = args.timeout
    if args.concurrency is not None:
        config.concurrency = args.concurrency
    return config


def persist_table(save_dir, filename, table):
    if not save_dir:
        return
    output_dir = Path(save_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    table.to_csv(path, index=False)
    print(f"Saved {filename} to {path}")


def format_single(args):
    if args.all_airlines:
        table = format_for_all_airlines(args.given, args.patronymic, args.surname)
        print(table.to_string(index=False))
        persist_table(args.save_dir, "formatted_names.csv", table)
        return 0

    try:
        key = resolve_airline(args.airline)
    except (UnknownAirlineError, ValueError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2
    policy = get_policy(key)
    fields = format_name(args.given, args.patronymic, args.surname, policy)
    print(f"{policy.label} ({key})")
    print(f"  First:  {fields.first}")
    if policy.three_fields:
        print(f"  Middle: {fields.middle}")
    print(f"  Last:   {fields.last}")
    return 0


def run_checks(args):
    report = ConsoleReport(color=False if args.no_color else None)
    report.header()

    results = run_cases()
    report.logic_section(results)
    persist_table(args.save_dir, "logic_cases.csv", results_to_frame(results))

    checks = []
    if args.skip_urls:
        logger.info("reference URL scan skipped")
    elif not Path(args.references).exists():
        logger.warning("reference document not found, skipping URL scan: %s", args.references)
    else:
        checks = check_references(args.references, build_fetch_config(args))
        report.url_section(checks, Path(args.references).name)
        persist_table(args.save_dir, "reference_urls.csv", checks_to_frame(checks))

    report.summary(results, checks)
    return exit_code(results)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.WARNING)
    if args.given is not None:
        return format_single(args)
    return run_checks(args)


if __name__ == "__main__":
    sys.exit(main())
