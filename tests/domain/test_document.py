"""Unit tests for the Document root aggregate."""

import pytest

from pos.domain.exceptions import EntityNotFoundError, ValidationError
from pos.domain.model.document import Document
from pos.domain.model.invoice import Invoice, LineItem
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity


def _document() -> Document:
    return Document(products=[
        Product(id="1", name="Mobile", image_url="m"),
        Product(id="2", name="Remote", image_url="r"),
    ])


def _invoice(invoice_id: str = "INV-1") -> Invoice:
    item = LineItem("1", "Mobile", Quantity(1), Money.of("100"))
    return Invoice.create(invoice_id, [item])


class TestCatalog:

    def test_find_product(self):
        assert _document().find_product("2").name == "Remote"

    def test_find_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="'9' not found"):
            _document().find_product("9")

    def test_add_product(self):
        doc = _document()
        doc.add_product(Product(id="3", name="Pouch", image_url="p"))
        assert [p.id for p in doc.products] == ["1", "2", "3"]

    def test_add_duplicate_id_rejected(self):
        with pytest.raises(ValidationError, match="already exists"):
            _document().add_product(Product(id="1", name="Other", image_url="o"))

    def test_remove_product(self):
        doc = _document()
        removed = doc.remove_product("1")
        assert removed.name == "Mobile"
        assert [p.id for p in doc.products] == ["2"]

    def test_remove_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            _document().remove_product("9")


class TestInvoices:

    def test_record_invoice_appends_invoice_and_sale(self):
        doc = _document()
        record = doc.record_invoice(_invoice())
        assert len(doc.invoices) == 1
        assert doc.sales == [record]
        assert record.invoice_id == "INV-1"

    def test_duplicate_invoice_id_rejected(self):
        doc = _document()
        doc.record_invoice(_invoice())
        with pytest.raises(ValidationError, match="already exists"):
            doc.record_invoice(_invoice())
        assert len(doc.sales) == 1

    def test_removing_product_keeps_invoices(self):
        doc = _document()
        doc.record_invoice(_invoice())
        doc.remove_product("1")
        assert doc.invoices[0].items[0].product_name == "Mobile"
