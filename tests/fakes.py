"""In-memory fake repository for testing.

Implements the same abstract interface as the JSON repository but
keeps the Document in memory.  ``load()`` hands out a deep copy, so a
use case that forgets to ``save()`` leaves no trace, just like with
the real file store.
"""

from __future__ import annotations

import copy
import threading
from contextlib import AbstractContextManager
from datetime import datetime, timezone

from pos.domain.model.document import Document
from pos.domain.model.product import Product
from pos.domain.repository.document_repository import DocumentRepository


class FakeDocumentRepository(DocumentRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._document = Document(products=list(products or []))
        self._lock = threading.RLock()
        self.save_count = 0

    def load(self) -> Document:
        return copy.deepcopy(self._document)

    def save(self, document: Document) -> None:
        document.updated_at = datetime.now(timezone.utc)
        self._document = copy.deepcopy(document)
        self.save_count += 1

    def write_lock(self) -> AbstractContextManager:
        return self._lock
