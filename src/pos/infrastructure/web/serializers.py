"""DTO -> JSON payload mapping for the HTTP gateway.

Keys are camelCase and amounts are JSON numbers, the shape the
browser client renders directly.
"""

from __future__ import annotations

from decimal import Decimal

from pos.application.dto import (
    DailyReportDTO,
    InvoiceDTO,
    LineItemDTO,
    MonthlyReportDTO,
    ProductDTO,
    ReportLineDTO,
)


def _number(amount: Decimal) -> float | int:
    """Render an amount as a JSON number.

    Integral amounts become ints and are always exact.  Fractional ones
    go through float, which is exact up to 15 significant digits; cent
    prices and invoice totals are kept below 10**12 so they always fit.
    Report revenue summed over very many invoices can pass that ceiling.
    """
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


def product_payload(dto: ProductDTO) -> dict:
    return {"id": dto.id, "name": dto.name, "imageUrl": dto.image_url}


def _line_item_payload(dto: LineItemDTO) -> dict:
    return {
        "productId": dto.product_id,
        "productName": dto.product_name,
        "quantity": dto.quantity,
        "price": _number(dto.price),
        "imageUrl": dto.image_url,
    }


def invoice_payload(dto: InvoiceDTO) -> dict:
    return {
        "id": dto.id,
        "date": dto.date,
        "items": [_line_item_payload(i) for i in dto.items],
        "total": _number(dto.total),
    }


def _report_lines(items: list[ReportLineDTO]) -> list[dict]:
    return [
        {
            "productName": line.product_name,
            "quantity": line.quantity,
            "revenue": _number(line.revenue),
        }
        for line in items
    ]


def daily_report_payload(dto: DailyReportDTO) -> dict:
    return {
        "date": dto.date,
        "items": _report_lines(dto.items),
        "totalRevenue": _number(dto.total_revenue),
    }


def monthly_report_payload(dto: MonthlyReportDTO) -> dict:
    return {
        "month": dto.month,
        "year": dto.year,
        "items": _report_lines(dto.items),
        "totalRevenue": _number(dto.total_revenue),
    }
