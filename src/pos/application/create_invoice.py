"""Application service: Create Invoice use case.

Turns a raw cart into an issued invoice.  All input checks happen
up front, outside the write lock; only the id assignment and the
append-and-save run inside it, so a rejected cart never touches the
store.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from decimal import Decimal

from pos.application.dto import InvoiceDTO, LineItemSpec
from pos.application.ids import new_invoice_id
from pos.application.mapping import invoice_to_dto
from pos.domain.exceptions import ValidationError
from pos.domain.model.invoice import Invoice, LineItem
from pos.domain.model.value_objects import MAX_AMOUNT_DIGITS, MAX_QUANTITY, Money, Quantity
from pos.domain.repository.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


_CENT = Decimal("0.01")


def _text(value: object, field_name: str) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} required")
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValidationError(f"{field_name} must be a string")
    return str(value).strip()


def _quantity(value: object, field_name: str) -> Quantity:
    try:
        return Quantity.of(value)  # type: ignore[arg-type]
    except ValidationError as exc:
        raise ValidationError(
            f"{field_name} must be a whole number between 1 and {MAX_QUANTITY}"
        ) from exc


def _price(value: object, field_name: str) -> Money:
    message = f"{field_name} must be a number greater than 0 and below 1{'0' * MAX_AMOUNT_DIGITS}"
    try:
        price = Money.of(value)  # type: ignore[arg-type]
    except ValidationError as exc:
        raise ValidationError(message) from exc
    if not price > Money.zero():
        raise ValidationError(message)
    if price.amount != price.amount.quantize(_CENT):
        raise ValidationError(f"{field_name} must have at most 2 decimal places")
    return price


def build_line_items(specs: Sequence[LineItemSpec]) -> list[LineItem]:
    """Validate raw cart lines and convert them into domain LineItems.

    Raises ValidationError naming the first offending field, e.g.
    ``items[2].quantity``.
    """
    if not specs:
        raise ValidationError("items required")

    items: list[LineItem] = []
    for index, spec in enumerate(specs):
        prefix = f"items[{index}]"
        image_url = spec.image_url if isinstance(spec.image_url, str) else ""
        items.append(
            LineItem(
                product_id=_text(spec.product_id, f"{prefix}.productId"),
                product_name=_text(spec.product_name, f"{prefix}.productName"),
                quantity=_quantity(spec.quantity, f"{prefix}.quantity"),
                price=_price(spec.price, f"{prefix}.price"),
                image_url=image_url,
            )
        )
    return items


class CreateInvoiceHandler:

    def __init__(
        self,
        document_repo: DocumentRepository,
        id_factory: Callable[[], str] = new_invoice_id,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._document_repo = document_repo
        self._id_factory = id_factory
        self._clock = clock

    def handle(self, item_specs: Sequence[LineItemSpec]) -> InvoiceDTO:
        """Issue a new invoice.

        Steps:
        1. Validate every cart line and build LineItems.
        2. Under the write lock: pick an id not already in the store,
           let the Invoice aggregate compute the total, append the
           invoice and its sales record, save.
        3. Return a DTO.
        """
        items = build_line_items(item_specs)

        with self._document_repo.write_lock():
            document = self._document_repo.load()

            invoice_id = self._id_factory()
            while document.has_invoice(invoice_id):
                invoice_id = self._id_factory()

            invoice = Invoice.create(invoice_id, items, date=self._clock())
            document.record_invoice(invoice)
            self._document_repo.save(document)

        logger.info(
            "Created invoice %s (%d lines, total %s)",
            invoice.id,
            len(invoice.items),
            invoice.total,
        )
        return invoice_to_dto(invoice)
