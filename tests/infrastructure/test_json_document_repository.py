"""Tests for the JSON-file record store, on a temporary directory."""

import json
import threading
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from pos.application.create_invoice import CreateInvoiceHandler
from pos.application.dto import LineItemSpec
from pos.domain.exceptions import StorageError
from pos.infrastructure.persistence.json_document_repository import (
    DEFAULT_PRODUCTS,
    JsonDocumentRepository,
)


@pytest.fixture
def repo(tmp_path):
    return JsonDocumentRepository(tmp_path / "data" / "db.json")


def _raw(repo: JsonDocumentRepository) -> dict:
    return json.loads(repo.file_path.read_text(encoding="utf-8"))


class TestSeeding:

    def test_creates_seed_document(self, repo):
        raw = _raw(repo)
        assert set(raw) == {"version", "updatedAt", "products", "invoices", "sales"}
        assert raw["version"] == 1
        assert [p["name"] for p in raw["products"]][:2] == ["Wired Earphones", "Wired Earphones High Quality"]
        assert len(raw["products"]) == len(DEFAULT_PRODUCTS)
        assert raw["invoices"] == []
        assert raw["sales"] == []

    def test_existing_file_is_not_reseeded(self, tmp_path):
        path = tmp_path / "db.json"
        first = JsonDocumentRepository(path)
        doc = first.load()
        doc.remove_product("1")
        first.save(doc)

        second = JsonDocumentRepository(path)
        assert "1" not in [p.id for p in second.load().products]


class TestRoundTrip:

    def test_save_load_is_noop_except_updated_at(self, repo):
        CreateInvoiceHandler(repo).handle([
            LineItemSpec(product_id="5", product_name="Charger", quantity=2, price=199.50),
            LineItemSpec(product_id="7", product_name="Pouch", quantity=1, price="49.99"),
        ])
        before = _raw(repo)

        repo.save(repo.load())
        after = _raw(repo)

        before.pop("updatedAt")
        after.pop("updatedAt")
        assert before == after

    def test_save_refreshes_updated_at(self, repo):
        doc = repo.load()
        doc.updated_at = datetime(2000, 1, 1, tzinfo=timezone.utc)
        repo.save(doc)
        assert not _raw(repo)["updatedAt"].startswith("2000-")

    def test_amounts_stored_as_decimal_strings(self, repo):
        CreateInvoiceHandler(repo).handle([
            LineItemSpec(product_id="5", product_name="Charger", quantity=2, price="199.50"),
        ])
        invoice = _raw(repo)["invoices"][0]
        assert invoice["total"] == "399.00"
        assert invoice["items"][0]["price"] == "199.50"

    def test_reads_documents_with_numeric_amounts(self, tmp_path):
        path = tmp_path / "db.json"
        path.write_text(json.dumps({
            "version": 1,
            "updatedAt": "2024-05-01T10:00:00.000Z",
            "products": [{"id": "5", "name": "Charger", "imageUrl": "u"}],
            "invoices": [{
                "id": "INV-1",
                "date": "2024-05-01T10:00:00.000Z",
                "items": [{"productId": "5", "productName": "Charger", "quantity": 2, "price": 199.5, "imageUrl": "u"}],
                "total": 399,
            }],
            "sales": [{
                "invoiceId": "INV-1",
                "date": "2024-05-01T10:00:00.000Z",
                "items": [{"productId": "5", "productName": "Charger", "quantity": 2, "price": 199.5, "imageUrl": "u"}],
                "total": 399,
            }],
        }), encoding="utf-8")

        doc = JsonDocumentRepository(path).load()
        assert doc.invoices[0].total.amount == Decimal("399")
        assert doc.sales[0].items[0].price.amount == Decimal("199.5")
        assert doc.sales[0].date == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)


class TestAtomicity:

    def test_no_temp_files_left_behind(self, repo):
        repo.save(repo.load())
        leftovers = [p.name for p in repo.file_path.parent.iterdir() if p.name != "db.json"]
        assert leftovers == []

    def test_concurrent_writers_do_not_lose_updates(self, repo):
        handler = CreateInvoiceHandler(repo)
        spec = [LineItemSpec(product_id="1", product_name="Mobile", quantity=1, price=10)]
        threads = [threading.Thread(target=handler.handle, args=(spec,)) for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(repo.load().invoices) == 10


class TestStorageErrors:

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "db.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageError, match="not valid JSON"):
            JsonDocumentRepository(path).load()

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "db.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(StorageError, match="document object"):
            JsonDocumentRepository(path).load()

    def test_malformed_record(self, tmp_path):
        path = tmp_path / "db.json"
        path.write_text(json.dumps({"products": [{"id": "1"}]}), encoding="utf-8")
        with pytest.raises(StorageError, match="Malformed"):
            JsonDocumentRepository(path).load()

    def test_missing_file_after_start(self, repo):
        repo.file_path.unlink()
        with pytest.raises(StorageError, match="Cannot read"):
            repo.load()
