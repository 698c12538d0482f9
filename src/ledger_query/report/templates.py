from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from ..analytics.models import Transaction


def section(title: str, lines: Iterable[str]) -> str:
    body = "\n".join(line for line in lines if line)
    return f"{title}\n{body}".strip()


def divider() -> str:
    return "-" * 40


def bullets(items: Iterable[str], *, prefix: str = "• ") -> str:
    xs = [x for x in items if x]
    return "\n".join(prefix + x for x in xs)


def money(value: Decimal) -> str:
    return f"{value:.2f}"


def tx_line(t: Transaction) -> str:
    return (
        f"#{t.transaction_id} {t.transaction_date.isoformat()} "
        f"{t.transaction_type} {money(t.transaction_amount)} "
        f"{t.merchant_name} ({t.card_type} card): {t.transaction_description}"
    )


def tx_list(txs: Iterable[Transaction]) -> str:
    lines = [tx_line(t) for t in txs]
    if not lines:
        return "(no transactions)"
    return bullets(lines)


def optional(value: object | None, missing: str = "none") -> str:
    return missing if value is None else str(value)


def report_layout(header: str, blocks: Iterable[str]) -> str:
    parts: list[str] = [header]
    for b in blocks:
        if not b:
            continue
        parts.append(divider())
        parts.append(b)
    return "\n\n".join(parts).strip()
