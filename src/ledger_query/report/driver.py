"""
Reference driver: runs every query over a dataset and renders the results
as one plain-text report, in the same order and with the same parameters
as the classic console walkthrough.
"""

from __future__ import annotations

from typing import Iterable

from ..analytics import queries as q
from ..analytics.models import DEBIT, Transaction
from . import templates as t


def build_reference_report(txs: Iterable[Transaction]) -> str:
    rows = tuple(txs)

    found = q.find_by_id(rows, "3")

    blocks = [
        t.section("1. Unique types", [", ".join(sorted(q.unique_transaction_types(rows))) or "(none)"]),
        t.section("2. Total amount", [t.money(q.total_amount(rows))]),
        t.section(
            "3. Total by date",
            [
                f"2019: {t.money(q.total_amount_by_date(rows, 2019))}",
                f"2019-01: {t.money(q.total_amount_by_date(rows, 2019, 1))}",
                f"2019-01-01: {t.money(q.total_amount_by_date(rows, 2019, 1, 1))}",
            ],
        ),
        t.section("4. Debit transactions", [t.tx_list(q.transactions_by_type(rows, DEBIT))]),
        t.section(
            "5. In date range 2019-01-01..2019-01-31",
            [t.tx_list(q.transactions_in_date_range(rows, "2019-01-01", "2019-01-31"))],
        ),
        t.section("6. By merchant SuperMart", [t.tx_list(q.transactions_by_merchant(rows, "SuperMart"))]),
        t.section("7. Average amount", [t.money(q.average_amount(rows))]),
        t.section("8. Amount range 50..100", [t.tx_list(q.transactions_by_amount_range(rows, 50, 100))]),
        t.section("9. Total debit amount", [t.money(q.total_debit_amount(rows))]),
        t.section("10. Month with most transactions", [t.optional(q.month_with_most_transactions(rows))]),
        t.section(
            "11. Month with most debit transactions",
            [t.optional(q.month_with_most_debit_transactions(rows))],
        ),
        t.section("12. Dominant transaction type", [q.dominant_transaction_type(rows)]),
        t.section("13. Before 2019-02-01", [t.tx_list(q.transactions_before_date(rows, "2019-02-01"))]),
        t.section("14. Find id 3", [t.tx_line(found) if found is not None else "not found"]),
        t.section("15. Descriptions", [t.bullets(q.descriptions(rows)) or "(none)"]),
    ]

    return t.report_layout(f"Transaction analysis ({len(rows)} transactions)", blocks)
