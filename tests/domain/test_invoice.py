"""Unit tests for the Invoice aggregate and its sales record."""

from datetime import datetime, timezone

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.invoice import Invoice, LineItem, SalesRecord
from pos.domain.model.value_objects import Money, Quantity


def _make_item(name: str = "Charger", qty: int = 1, price: str = "199.50") -> LineItem:
    """Helper to build a valid line item."""
    return LineItem(
        product_id="5",
        product_name=name,
        quantity=Quantity(qty),
        price=Money.of(price),
    )


class TestInvoiceCreation:

    def test_total_is_sum_of_line_items(self):
        invoice = Invoice.create("INV-1", [
            _make_item("Charger", qty=2, price="199.50"),
            _make_item("Pouch", qty=3, price="49.99"),
        ])
        assert invoice.total == Money.of("548.97")

    def test_single_line_example(self):
        invoice = Invoice.create("INV-1", [_make_item(qty=2, price="199.50")])
        assert invoice.total.amount == Money.of("399.00").amount

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="items required"):
            Invoice.create("INV-1", [])

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match=r"items\[0\].price"):
            Invoice.create("INV-1", [_make_item(price="0")])

    def test_total_ceiling(self):
        with pytest.raises(ValidationError, match="total must be below"):
            Invoice.create("INV-1", [_make_item(qty=1000, price="1000000000")])

    def test_total_just_under_ceiling_accepted(self):
        invoice = Invoice.create("INV-1", [_make_item(qty=1, price="999999999999.99")])
        assert invoice.total == Money.of("999999999999.99")

    def test_default_date_is_utc_now(self):
        invoice = Invoice.create("INV-1", [_make_item()])
        assert invoice.date.tzinfo is not None
        assert invoice.date.utcoffset().total_seconds() == 0

    def test_explicit_date_kept(self):
        when = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
        invoice = Invoice.create("INV-1", [_make_item()], date=when)
        assert invoice.date == when

    def test_invoice_is_immutable(self):
        invoice = Invoice.create("INV-1", [_make_item()])
        with pytest.raises(AttributeError):
            invoice.total = Money.of("1")  # type: ignore[misc]


class TestLineItem:

    def test_line_total(self):
        assert _make_item(qty=3, price="15.00").line_total == Money.of("45.00")

    def test_line_total_has_no_float_drift(self):
        item = _make_item(qty=3, price="0.10")
        assert item.line_total.amount == Money.of("0.30").amount


class TestSalesRecord:

    def test_derived_one_to_one_from_invoice(self):
        invoice = Invoice.create("INV-7", [_make_item(qty=2)])
        record = SalesRecord.from_invoice(invoice)
        assert record.invoice_id == "INV-7"
        assert record.date == invoice.date
        assert record.items == invoice.items
        assert record.total == invoice.total
