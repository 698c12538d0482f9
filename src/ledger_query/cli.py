import argparse
import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

from . import __version__
from .config import load_settings
from .logging_setup import setup_logging


def _decimal(value: str) -> Decimal:
    try:
        d = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not d.is_finite():
        raise argparse.ArgumentTypeError(f"not a finite number: {value!r}")
    return d


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ledger-query")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument(
        "--ledger",
        type=Path,
        default=None,
        help="Path to a .json or .jsonl ledger file. Overrides LEDGER_PATH. "
        "If neither is set, the built-in sample dataset is used.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first invalid ledger record instead of skipping it",
    )

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("health", help="Check that the tool starts")
    sub.add_parser("status-env", help="Print resolved settings")
    sub.add_parser("report", help="Run every query and print a plain-text report")
    sub.add_parser("facts", help="Print summary facts as JSON")

    p = sub.add_parser("by-type", help="Transactions of one type")
    p.add_argument("tx_type", choices=["debit", "credit"])

    p = sub.add_parser("by-merchant", help="Transactions of one merchant (exact match)")
    p.add_argument("name")

    p = sub.add_parser("range", help="Transactions between two dates, inclusive")
    p.add_argument("start", help="YYYY-MM-DD")
    p.add_argument("end", help="YYYY-MM-DD")

    p = sub.add_parser("before", help="Transactions strictly before a date")
    p.add_argument("date", help="YYYY-MM-DD")

    p = sub.add_parser("amount-range", help="Transactions with amount in [MIN, MAX]")
    p.add_argument("min_amount", type=_decimal)
    p.add_argument("max_amount", type=_decimal)

    p = sub.add_parser("find", help="Find a transaction by id")
    p.add_argument("transaction_id")

    return parser


def _load_transactions(ledger: Path | None, strict: bool):
    from .analytics.from_ledger import rows_from_ledger
    from .ledger import SAMPLE_TRANSACTIONS, LedgerStore

    if ledger is None:
        return SAMPLE_TRANSACTIONS

    store = LedgerStore(ledger, strict=strict)
    return rows_from_ledger(store.load())


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    settings = load_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)
    command = args.command or "health"

    if command == "health":
        logger.info("Application started successfully.")
        print("ok")
        return 0

    if command == "status-env":
        print("LOG_LEVEL =", settings.log_level)
        print("LEDGER_PATH =", settings.ledger_path)
        print("LEDGER_STRICT =", settings.ledger_strict)
        return 0

    from .analytics import queries as q
    from .analytics.compute import compute_facts
    from .ledger import LedgerFormatError
    from .report import templates
    from .report.driver import build_reference_report

    ledger = args.ledger or settings.ledger_path
    strict = args.strict or settings.ledger_strict

    try:
        txs = _load_transactions(ledger, strict)
    except (FileNotFoundError, LedgerFormatError) as e:
        logger.error("Cannot load ledger: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2

    if command == "report":
        print(build_reference_report(txs))
        return 0

    if command == "facts":
        print(json.dumps(compute_facts(txs), ensure_ascii=False, indent=2))
        return 0

    if command == "find":
        found = q.find_by_id(txs, args.transaction_id)
        if found is None:
            print("not found")
            return 1
        print(templates.tx_line(found))
        return 0

    try:
        if command == "by-type":
            result = q.transactions_by_type(txs, args.tx_type)
        elif command == "by-merchant":
            result = q.transactions_by_merchant(txs, args.name)
        elif command == "range":
            result = q.transactions_in_date_range(txs, args.start, args.end)
        elif command == "before":
            result = q.transactions_before_date(txs, args.date)
        elif command == "amount-range":
            result = q.transactions_by_amount_range(txs, args.min_amount, args.max_amount)
        else:
            return 1
    except ValueError as e:
        # bad date strings from the command line
        print(f"error: {e}", file=sys.stderr)
        return 2

    for t in result:
        print(templates.tx_line(t))
    print(f"count = {len(result)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
