"""Invoice aggregate and the sales record derived from it.

Invoices are write-once: there is no update, cancel or delete.  Each
invoice produces exactly one SalesRecord, which is what reporting
reads, so reports never need to replay the invoice list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import MAX_AMOUNT_DIGITS, Money, Quantity

MAX_INVOICE_TOTAL = Money(Decimal(10) ** MAX_AMOUNT_DIGITS)


@dataclass(frozen=True)
class LineItem:
    """One cart line, frozen into the invoice.

    ``product_name`` and ``image_url`` are snapshots taken when the
    cart was built; later catalog edits do not reach them.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    price: Money
    image_url: str = ""

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


def _sum_lines(items: tuple[LineItem, ...]) -> Money:
    result = Money.zero()
    for item in items:
        result = result + item.line_total
    return result


@dataclass(frozen=True)
class Invoice:
    """Aggregate root for issued invoices.

    Use ``Invoice.create()`` for new invoices; it enforces the
    invariants.  The plain constructor is left for the repository to
    reconstitute persisted invoices without re-validating.
    """

    id: str
    date: datetime
    items: tuple[LineItem, ...]
    total: Money

    @staticmethod
    def create(
        invoice_id: str,
        items: list[LineItem],
        date: datetime | None = None,
    ) -> Invoice:
        if not items:
            raise ValidationError("items required")
        for index, item in enumerate(items):
            if item.price.is_zero:
                raise ValidationError(f"items[{index}].price must be greater than 0")

        lines = tuple(items)
        total = _sum_lines(lines)
        if not total < MAX_INVOICE_TOTAL:
            raise ValidationError(f"total must be below {MAX_INVOICE_TOTAL}")
        return Invoice(
            id=invoice_id,
            date=date or datetime.now(timezone.utc),
            items=lines,
            total=total,
        )


@dataclass(frozen=True)
class SalesRecord:
    """Reporting copy of an invoice."""

    invoice_id: str
    date: datetime
    items: tuple[LineItem, ...] = field(default_factory=tuple)
    total: Money = field(default_factory=Money.zero)

    @staticmethod
    def from_invoice(invoice: Invoice) -> SalesRecord:
        return SalesRecord(
            invoice_id=invoice.id,
            date=invoice.date,
            items=invoice.items,
            total=invoice.total,
        )
