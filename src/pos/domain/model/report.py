"""Report query types and results.

A report is asked for either one calendar day or one calendar month.
Sales dates are compared in UTC, the timezone invoices are stamped in.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

MIN_REPORT_YEAR = 2000
MAX_REPORT_YEAR = 2100


def month_name(month: int) -> str:
    """Map 1-12 to its English month name."""
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise ValidationError("month 1-12 required")
    return MONTH_NAMES[month - 1]


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


@dataclass(frozen=True)
class ExactDay:
    day: date

    def matches(self, moment: datetime) -> bool:
        return _as_utc(moment).date() == self.day


@dataclass(frozen=True)
class YearMonth:
    year: int
    month: int

    def __post_init__(self) -> None:
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise ValidationError("year required")
        if not MIN_REPORT_YEAR <= self.year <= MAX_REPORT_YEAR:
            raise ValidationError(
                f"year must be between {MIN_REPORT_YEAR} and {MAX_REPORT_YEAR}"
            )
        month_name(self.month)

    @property
    def month_name(self) -> str:
        return month_name(self.month)

    def matches(self, moment: datetime) -> bool:
        moment = _as_utc(moment)
        return moment.year == self.year and moment.month == self.month


DateFilter = ExactDay | YearMonth


@dataclass(frozen=True)
class ReportLine:
    product_name: str
    quantity: int
    revenue: Money


@dataclass(frozen=True)
class SalesReport:
    """Per-product totals for one period, rows in first-seen order."""

    period: DateFilter
    lines: tuple[ReportLine, ...]

    @property
    def total_revenue(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.revenue
        return result

    @property
    def total_quantity(self) -> int:
        return sum(line.quantity for line in self.lines)
