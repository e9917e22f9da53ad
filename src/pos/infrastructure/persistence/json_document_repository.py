"""JSON-file-backed implementation of DocumentRepository.

The whole Document lives in one file.  Saves go to a temp file in the
same directory which is then moved over the real one with
``os.replace``, so a reader sees either the previous document or the
new one and never a torn write.  Writers serialize on a per-instance
lock; reads are lock-free.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import AbstractContextManager
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from pos.domain.exceptions import DomainException, StorageError
from pos.domain.model.document import DOCUMENT_VERSION, Document
from pos.domain.model.invoice import Invoice, LineItem, SalesRecord
from pos.domain.model.product import Product
from pos.domain.model.timestamps import format_timestamp, parse_timestamp
from pos.domain.model.value_objects import Money, Quantity
from pos.domain.repository.document_repository import DocumentRepository

logger = logging.getLogger(__name__)

_UNSPLASH = "https://images.unsplash.com"

DEFAULT_PRODUCTS = [
    ("1", "Wired Earphones", f"{_UNSPLASH}/photo-1505740420928-5e560c06d30e?w=800&fit=crop"),
    ("2", "Wired Earphones High Quality", f"{_UNSPLASH}/photo-1590658268037-6bf12165a8df?w=800&fit=crop"),
    ("3", "Mobile", f"{_UNSPLASH}/photo-1511707171634-5f897ff02aa9?w=800&fit=crop"),
    ("4", "Remote", f"{_UNSPLASH}/photo-1587825140708-dfaf72ae4b04?w=800&fit=crop"),
    ("5", "Charger", f"{_UNSPLASH}/photo-1609091839311-d5365f5ff1f8?w=800&fit=crop"),
    ("6", "Temper", f"{_UNSPLASH}/photo-1616348436168-de43ad0db179?w=800&fit=crop"),
    ("7", "Pouch", f"{_UNSPLASH}/photo-1590874103328-eac38a683ce7?w=800&fit=crop"),
]


def seed_document() -> Document:
    """A fresh store: the default catalog, no invoices, no sales."""
    return Document(
        products=[Product(id=i, name=n, image_url=u) for i, n, u in DEFAULT_PRODUCTS],
    )


class JsonDocumentRepository(DocumentRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)
        self._lock = threading.RLock()
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- DocumentRepository interface -----------------------------------------

    def load(self) -> Document:
        return self._to_domain(self._load_raw())

    def save(self, document: Document) -> None:
        with self._lock:
            document.updated_at = datetime.now(timezone.utc)
            self._persist_raw(self._to_raw(document))

    def write_lock(self) -> AbstractContextManager:
        return self._lock

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _item_to_raw(item: LineItem) -> dict:
        return {
            "productId": item.product_id,
            "productName": item.product_name,
            "quantity": item.quantity.value,
            "price": str(item.price.amount),
            "imageUrl": item.image_url,
        }

    @classmethod
    def _to_raw(cls, document: Document) -> dict:
        return {
            "version": document.version,
            "updatedAt": format_timestamp(document.updated_at),
            "products": [
                {"id": p.id, "name": p.name, "imageUrl": p.image_url}
                for p in document.products
            ],
            "invoices": [
                {
                    "id": inv.id,
                    "date": format_timestamp(inv.date),
                    "items": [cls._item_to_raw(i) for i in inv.items],
                    "total": str(inv.total.amount),
                }
                for inv in document.invoices
            ],
            "sales": [
                {
                    "invoiceId": rec.invoice_id,
                    "date": format_timestamp(rec.date),
                    "items": [cls._item_to_raw(i) for i in rec.items],
                    "total": str(rec.total.amount),
                }
                for rec in document.sales
            ],
        }

    @staticmethod
    def _money(raw: Any) -> Money:
        # Amounts may be decimal strings or JSON numbers (older documents).
        return Money(Decimal(str(raw)))

    @classmethod
    def _item_to_domain(cls, raw: dict) -> LineItem:
        return LineItem(
            product_id=str(raw["productId"]),
            product_name=str(raw["productName"]),
            quantity=Quantity.of(raw["quantity"]),
            price=cls._money(raw["price"]),
            image_url=raw.get("imageUrl") or "",
        )

    @classmethod
    def _to_domain(cls, raw: dict) -> Document:
        try:
            products = [
                Product(id=str(p["id"]), name=p["name"], image_url=p["imageUrl"])
                for p in raw.get("products", [])
            ]
            invoices = [
                Invoice(
                    id=inv["id"],
                    date=parse_timestamp(inv["date"]),
                    items=tuple(cls._item_to_domain(i) for i in inv["items"]),
                    total=cls._money(inv["total"]),
                )
                for inv in raw.get("invoices", [])
            ]
            sales = [
                SalesRecord(
                    invoice_id=rec["invoiceId"],
                    date=parse_timestamp(rec["date"]),
                    items=tuple(cls._item_to_domain(i) for i in rec["items"]),
                    total=cls._money(rec["total"]),
                )
                for rec in raw.get("sales", [])
            ]
            updated_at = (
                parse_timestamp(raw["updatedAt"])
                if raw.get("updatedAt")
                else datetime.now(timezone.utc)
            )
        except (KeyError, TypeError, AttributeError, InvalidOperation, DomainException) as exc:
            raise StorageError(f"Malformed record store document: {exc}") from exc

        return Document(
            products=products,
            invoices=invoices,
            sales=sales,
            version=raw.get("version", DOCUMENT_VERSION),
            updated_at=updated_at,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise StorageError(f"{self._file_path} is not valid JSON: {exc}") from exc
        if not isinstance(raw, dict):
            raise StorageError(f"{self._file_path} does not hold a document object")
        return raw

    def _persist_raw(self, raw: dict) -> None:
        directory = self._file_path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=".tmp_", suffix=".json", dir=directory)
            tmp_path = Path(tmp_name)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(raw, fh, indent=2, ensure_ascii=False)
                    fh.write("\n")
                os.replace(tmp_path, self._file_path)
            finally:
                if tmp_path.exists():
                    tmp_path.unlink()
        except OSError as exc:
            logger.error("Saving %s failed: %s", self._file_path, exc)
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        with self._lock:
            if self._file_path.exists():
                return
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StorageError(
                    f"Cannot create data directory {self._file_path.parent}: {exc}"
                ) from exc
            logger.info("Seeding new record store at %s", self._file_path)
            self.save(seed_document())
