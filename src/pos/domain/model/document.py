"""Document: the single root aggregate that gets persisted.

Everything the shop knows lives in one Document.  Every mutation is a
read-modify-write of the whole thing; the repository serializes those
cycles and replaces the stored copy atomically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from pos.domain.exceptions import EntityNotFoundError, ValidationError
from pos.domain.model.invoice import Invoice, SalesRecord
from pos.domain.model.product import Product

DOCUMENT_VERSION = 1


@dataclass
class Document:
    products: list[Product] = field(default_factory=list)
    invoices: list[Invoice] = field(default_factory=list)
    sales: list[SalesRecord] = field(default_factory=list)
    version: int = DOCUMENT_VERSION
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Catalog --------------------------------------------------------------

    def find_product(self, product_id: str) -> Product:
        for product in self.products:
            if product.id == product_id:
                return product
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

    def add_product(self, product: Product) -> None:
        if any(p.id == product.id for p in self.products):
            raise ValidationError(f"Product with ID '{product.id}' already exists")
        self.products.append(product)

    def remove_product(self, product_id: str) -> Product:
        product = self.find_product(product_id)
        self.products.remove(product)
        return product

    # --- Invoices -------------------------------------------------------------

    def has_invoice(self, invoice_id: str) -> bool:
        return any(inv.id == invoice_id for inv in self.invoices)

    def record_invoice(self, invoice: Invoice) -> SalesRecord:
        """Append an invoice and the sales record derived from it."""
        if self.has_invoice(invoice.id):
            raise ValidationError(f"Invoice '{invoice.id}' already exists")
        record = SalesRecord.from_invoice(invoice)
        self.invoices.append(invoice)
        self.sales.append(record)
        return record
