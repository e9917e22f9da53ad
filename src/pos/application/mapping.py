"""Domain -> DTO mapping shared by several use cases."""

from __future__ import annotations

from pos.application.dto import (
    InvoiceDTO,
    LineItemDTO,
    ProductDTO,
    ReportLineDTO,
)
from pos.domain.model.invoice import Invoice
from pos.domain.model.product import Product
from pos.domain.model.report import SalesReport
from pos.domain.model.timestamps import format_timestamp


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(id=product.id, name=product.name, image_url=product.image_url)


def invoice_to_dto(invoice: Invoice) -> InvoiceDTO:
    return InvoiceDTO(
        id=invoice.id,
        date=format_timestamp(invoice.date),
        items=[
            LineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                price=item.price.amount,
                line_total=item.line_total.amount,
                image_url=item.image_url,
            )
            for item in invoice.items
        ],
        total=invoice.total.amount,
    )


def report_lines_to_dto(report: SalesReport) -> list[ReportLineDTO]:
    return [
        ReportLineDTO(
            product_name=line.product_name,
            quantity=line.quantity,
            revenue=line.revenue.amount,
        )
        for line in report.lines
    ]
