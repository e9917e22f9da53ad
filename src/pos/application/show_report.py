"""Application service: Sales Report use cases (queries).

Daily and monthly reports differ only in how the period is parsed and
echoed back; both hand the actual rollup to the SalesAggregator.
"""

from __future__ import annotations

import re
from datetime import date

from pos.application.dto import DailyReportDTO, MonthlyReportDTO
from pos.application.mapping import report_lines_to_dto
from pos.domain.exceptions import ValidationError
from pos.domain.model.report import ExactDay, YearMonth
from pos.domain.repository.document_repository import DocumentRepository
from pos.domain.service.sales_aggregator import SalesAggregator

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_day(text: str | None) -> date:
    """Parse a strict ``YYYY-MM-DD`` calendar date."""
    raw = (text or "").strip()
    if not _DATE_PATTERN.match(raw):
        raise ValidationError("date=YYYY-MM-DD required")
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError(f"date {raw!r} is not a valid calendar date") from exc


def _parse_int(value: int | str | None, message: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(message)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise ValidationError(message) from exc


class DailyReportHandler:

    def __init__(
        self,
        document_repo: DocumentRepository,
        aggregator: SalesAggregator | None = None,
    ) -> None:
        self._document_repo = document_repo
        self._aggregator = aggregator or SalesAggregator()

    def handle(self, day: str | None) -> DailyReportDTO:
        period = ExactDay(parse_day(day))
        sales = self._document_repo.load().sales
        report = self._aggregator.aggregate(sales, period)
        return DailyReportDTO(
            date=period.day.isoformat(),
            items=report_lines_to_dto(report),
            total_revenue=report.total_revenue.amount,
        )


class MonthlyReportHandler:

    def __init__(
        self,
        document_repo: DocumentRepository,
        aggregator: SalesAggregator | None = None,
    ) -> None:
        self._document_repo = document_repo
        self._aggregator = aggregator or SalesAggregator()

    def handle(self, year: int | str | None, month: int | str | None) -> MonthlyReportDTO:
        period = YearMonth(
            year=_parse_int(year, "year required"),
            month=_parse_int(month, "month 1-12 required"),
        )
        sales = self._document_repo.load().sales
        report = self._aggregator.aggregate(sales, period)
        return MonthlyReportDTO(
            month=period.month_name,
            year=period.year,
            items=report_lines_to_dto(report),
            total_revenue=report.total_revenue.amount,
        )
