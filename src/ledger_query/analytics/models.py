from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Literal

TxType = Literal["debit", "credit"]
DominantType = Literal["debit", "credit", "equal"]

DEBIT: TxType = "debit"
CREDIT: TxType = "credit"


@dataclass(frozen=True)
class Transaction:
    transaction_id: str
    transaction_date: date
    transaction_amount: Decimal  # non-negative
    transaction_type: TxType
    transaction_description: str
    merchant_name: str
    card_type: TxType
