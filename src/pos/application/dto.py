"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the gateways (HTTP, CLI) and the application
layer without exposing domain internals.  Amounts stay Decimal here;
each gateway decides how to render them.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class LineItemSpec:
    """Input: one cart line exactly as the client sent it.

    Fields are deliberately untyped; the invoice builder validates them.
    """

    product_id: Any
    product_name: Any
    quantity: Any
    price: Any
    image_url: Any = ""


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    image_url: str


@dataclass(frozen=True)
class LineItemDTO:
    product_id: str
    product_name: str
    quantity: int
    price: Decimal
    line_total: Decimal
    image_url: str


@dataclass(frozen=True)
class InvoiceDTO:
    id: str
    date: str  # ISO-8601, UTC
    items: list[LineItemDTO]
    total: Decimal


@dataclass(frozen=True)
class ReportLineDTO:
    product_name: str
    quantity: int
    revenue: Decimal


@dataclass(frozen=True)
class DailyReportDTO:
    date: str  # YYYY-MM-DD
    items: list[ReportLineDTO]
    total_revenue: Decimal


@dataclass(frozen=True)
class MonthlyReportDTO:
    month: str  # English month name
    year: int
    items: list[ReportLineDTO]
    total_revenue: Decimal
