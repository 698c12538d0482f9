from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


def as_date(value: date | str) -> date:
    """
    Accepts a date, a datetime (time part dropped) or a zero-padded ISO string (YYYY-MM-DD).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    @classmethod
    def of(cls, start: date | str, end: date | str) -> "DateRange":
        return cls(start=as_date(start), end=as_date(end))

    @property
    def is_empty(self) -> bool:
        return self.start > self.end

    def contains(self, d: date) -> bool:
        # inclusive on both ends; an inverted range contains nothing
        return self.start <= d <= self.end

