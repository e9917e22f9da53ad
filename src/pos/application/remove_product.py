"""Application service: Remove Product use case.

Removing a product only affects the catalog; past invoices and sales
records keep their line snapshots.
"""

from __future__ import annotations

import logging

from pos.domain.repository.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


class RemoveProductHandler:

    def __init__(self, document_repo: DocumentRepository) -> None:
        self._document_repo = document_repo

    def handle(self, product_id: str) -> None:
        with self._document_repo.write_lock():
            document = self._document_repo.load()
            removed = document.remove_product(product_id)
            self._document_repo.save(document)

        logger.info("Removed product %s '%s'", removed.id, removed.name)
