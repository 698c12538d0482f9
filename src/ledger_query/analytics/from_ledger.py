from __future__ import annotations

from typing import Iterable

from ..ledger.models import LedgerItem
from .models import Transaction


def rows_from_ledger(items: Iterable[LedgerItem]) -> tuple[Transaction, ...]:
    rows: list[Transaction] = []
    for it in items:
        rows.append(
            Transaction(
                transaction_id=it.transaction_id,
                transaction_date=it.transaction_date,
                transaction_amount=it.transaction_amount,
                transaction_type=it.transaction_type,
                transaction_description=it.transaction_description,
                merchant_name=it.merchant_name,
                card_type=it.card_type,
            )
        )
    return tuple(rows)
