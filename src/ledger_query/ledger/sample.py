from __future__ import annotations

from datetime import date
from decimal import Decimal

from ..analytics.models import Transaction

SAMPLE_TRANSACTIONS: tuple[Transaction, ...] = (
    Transaction(
        transaction_id="1",
        transaction_date=date(2019, 1, 1),
        transaction_amount=Decimal("100.00"),
        transaction_type="debit",
        transaction_description="Payment for groceries",
        merchant_name="SuperMart",
        card_type="debit",
    ),
    Transaction(
        transaction_id="2",
        transaction_date=date(2019, 1, 5),
        transaction_amount=Decimal("150.00"),
        transaction_type="credit",
        transaction_description="Refund for returned item",
        merchant_name="SuperMart",
        card_type="credit",
    ),
    Transaction(
        transaction_id="3",
        transaction_date=date(2019, 2, 10),
        transaction_amount=Decimal("50.00"),
        transaction_type="debit",
        transaction_description="Dinner with friends",
        merchant_name="RestaurantABC",
        card_type="debit",
    ),
    Transaction(
        transaction_id="4",
        transaction_date=date(2019, 2, 15),
        transaction_amount=Decimal("200.00"),
        transaction_type="debit",
        transaction_description="Electronics purchase",
        merchant_name="TechStore",
        card_type="credit",
    ),
    Transaction(
        transaction_id="5",
        transaction_date=date(2019, 3, 20),
        transaction_amount=Decimal("80.00"),
        transaction_type="debit",
        transaction_description="Clothing shopping",
        merchant_name="FashionOutlet",
        card_type="credit",
    ),
)
