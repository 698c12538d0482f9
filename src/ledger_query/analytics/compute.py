from __future__ import annotations

from collections import Counter, defaultdict
from decimal import Decimal
from typing import Any, Iterable

from .models import CREDIT, Transaction
from .queries import (
    average_amount,
    dominant_transaction_type,
    month_with_most_debit_transactions,
    month_with_most_transactions,
    total_amount,
    total_debit_amount,
    transactions_by_type,
    unique_transaction_types,
)


def to_money(value: Decimal) -> float:
    return round(float(value), 2)


def compute_facts(txs: Iterable[Transaction]) -> dict[str, Any]:
    rows = tuple(txs)

    merchant_amount: dict[str, Decimal] = defaultdict(Decimal)
    merchant_count: Counter[str] = Counter()
    for t in rows:
        merchant_amount[t.merchant_name] += t.transaction_amount
        merchant_count[t.merchant_name] += 1

    # amount desc, then name for a stable order among equal amounts
    top_merchants = sorted(merchant_amount.items(), key=lambda x: (-x[1], x[0]))[:10]

    by_month = Counter(t.transaction_date.month for t in rows)

    facts: dict[str, Any] = {
        "transactions_count": len(rows),
        "totals": {
            "amount": to_money(total_amount(rows)),
            "debit": to_money(total_debit_amount(rows)),
            "credit": to_money(total_amount(transactions_by_type(rows, CREDIT))),
            "average": to_money(average_amount(rows)),
        },
        "transaction_types": sorted(unique_transaction_types(rows)),
        "dominant_type": dominant_transaction_type(rows),
        "busiest_month": month_with_most_transactions(rows),
        "busiest_debit_month": month_with_most_debit_transactions(rows),
        "by_month": {m: by_month[m] for m in sorted(by_month)},
        "top_merchants": [
            {"merchant": name, "amount": to_money(amount), "count": merchant_count[name]}
            for name, amount in top_merchants
        ],
    }
    return facts
