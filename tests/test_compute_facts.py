from __future__ import annotations

from ledger_query.analytics.compute import compute_facts
from ledger_query.ledger.sample import SAMPLE_TRANSACTIONS


def test_compute_facts_on_sample():
    facts = compute_facts(SAMPLE_TRANSACTIONS)

    assert facts["transactions_count"] == 5
    assert facts["totals"] == {"amount": 580.0, "debit": 430.0, "credit": 150.0, "average": 116.0}
    assert facts["transaction_types"] == ["credit", "debit"]
    assert facts["dominant_type"] == "debit"
    assert facts["busiest_month"] == 2
    assert facts["busiest_debit_month"] == 2
    assert facts["by_month"] == {1: 2, 2: 2, 3: 1}


def test_compute_facts_top_merchants_sorted_by_amount():
    facts = compute_facts(SAMPLE_TRANSACTIONS)

    top = facts["top_merchants"]
    assert top[0] == {"merchant": "SuperMart", "amount": 250.0, "count": 2}
    assert [m["merchant"] for m in top] == ["SuperMart", "TechStore", "FashionOutlet", "RestaurantABC"]


def test_compute_facts_empty():
    facts = compute_facts([])

    assert facts["transactions_count"] == 0
    assert facts["totals"]["average"] == 0.0
    assert facts["busiest_month"] is None
    assert facts["dominant_type"] == "equal"
    assert facts["top_merchants"] == []
