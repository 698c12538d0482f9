from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LedgerItem(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    transaction_id: str = Field(min_length=1)
    transaction_date: date
    transaction_amount: Decimal = Field(ge=0)
    transaction_type: Literal["debit", "credit"]
    transaction_description: str = ""
    merchant_name: str = ""
    card_type: Literal["debit", "credit"]

    @field_validator("transaction_id", mode="before")
    @classmethod
    def _id_as_str(cls, v: object) -> object:
        # ledgers exported from spreadsheets often carry numeric ids
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("transaction_type", "card_type", mode="before")
    @classmethod
    def _lower_kind(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v
