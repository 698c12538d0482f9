"""
Pure query and aggregation functions over a collection of transactions.

Every function takes the collection as its first argument and returns a new
value; the input is never mutated. Ordered results are tuples that keep the
original relative order. Absent results are explicit: `None` from
`find_by_id` and the month lookups, `Decimal(0)` from sums over nothing.
"""

from __future__ import annotations

from collections import Counter
from datetime import date
from decimal import Decimal
from typing import Iterable

from ..core.time_ranges import DateRange, as_date
from .models import CREDIT, DEBIT, DominantType, Transaction

ZERO = Decimal(0)


def _sum_amounts(txs: Iterable[Transaction]) -> Decimal:
    return sum((t.transaction_amount for t in txs), ZERO)


def unique_transaction_types(txs: Iterable[Transaction]) -> frozenset[str]:
    return frozenset(t.transaction_type for t in txs)


def total_amount(txs: Iterable[Transaction]) -> Decimal:
    return _sum_amounts(txs)


def total_amount_by_date(
    txs: Iterable[Transaction],
    year: int | None = None,
    month: int | None = None,
    day: int | None = None,
) -> Decimal:
    """
    Sum of amounts whose date matches every given part; omitted parts match all.
    """

    def _matches(d: date) -> bool:
        return (
            (year is None or d.year == year)
            and (month is None or d.month == month)
            and (day is None or d.day == day)
        )

    return _sum_amounts(t for t in txs if _matches(t.transaction_date))


def transactions_by_type(txs: Iterable[Transaction], tx_type: str) -> tuple[Transaction, ...]:
    return tuple(t for t in txs if t.transaction_type == tx_type)


def transactions_in_date_range(
    txs: Iterable[Transaction], start: date | str, end: date | str
) -> tuple[Transaction, ...]:
    dr = DateRange.of(start, end)
    if dr.is_empty:
        return ()
    return tuple(t for t in txs if dr.contains(t.transaction_date))


def transactions_by_merchant(txs: Iterable[Transaction], name: str) -> tuple[Transaction, ...]:
    return tuple(t for t in txs if t.merchant_name == name)


def average_amount(txs: Iterable[Transaction]) -> Decimal:
    items = list(txs)
    if not items:
        return ZERO
    return _sum_amounts(items) / len(items)


def transactions_by_amount_range(
    txs: Iterable[Transaction], min_amount: Decimal | int | float, max_amount: Decimal | int | float
) -> tuple[Transaction, ...]:
    lo = Decimal(str(min_amount))
    hi = Decimal(str(max_amount))
    if lo > hi:
        return ()
    return tuple(t for t in txs if lo <= t.transaction_amount <= hi)


def total_debit_amount(txs: Iterable[Transaction]) -> Decimal:
    return _sum_amounts(transactions_by_type(txs, DEBIT))


def month_with_most_transactions(txs: Iterable[Transaction]) -> int | None:
    """
    Calendar month (1..12) with the most transactions, years merged.

    Ties go to the largest month number. None for an empty collection.
    """
    counts = Counter(t.transaction_date.month for t in txs)
    if not counts:
        return None
    return max(counts, key=lambda m: (counts[m], m))


def month_with_most_debit_transactions(txs: Iterable[Transaction]) -> int | None:
    return month_with_most_transactions(transactions_by_type(txs, DEBIT))


def dominant_transaction_type(txs: Iterable[Transaction]) -> DominantType:
    counts = Counter(t.transaction_type for t in txs)
    debit_count = counts.get(DEBIT, 0)
    credit_count = counts.get(CREDIT, 0)

    if debit_count > credit_count:
        return "debit"
    if credit_count > debit_count:
        return "credit"
    return "equal"


def transactions_before_date(txs: Iterable[Transaction], before: date | str) -> tuple[Transaction, ...]:
    cutoff = as_date(before)
    return tuple(t for t in txs if t.transaction_date < cutoff)


def find_by_id(txs: Iterable[Transaction], transaction_id: str) -> Transaction | None:
    return next((t for t in txs if t.transaction_id == transaction_id), None)


def descriptions(txs: Iterable[Transaction]) -> tuple[str, ...]:
    return tuple(t.transaction_description for t in txs)
