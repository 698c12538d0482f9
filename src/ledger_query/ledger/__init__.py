from .models import LedgerItem
from .sample import SAMPLE_TRANSACTIONS
from .store import LedgerFormatError, LedgerStore

__all__ = [
    "LedgerItem",
    "LedgerStore",
    "LedgerFormatError",
    "SAMPLE_TRANSACTIONS",
]
