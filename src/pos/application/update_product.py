"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from pos.application.dto import ProductDTO
from pos.application.mapping import product_to_dto
from pos.domain.repository.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


def _given(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


class UpdateProductHandler:

    def __init__(self, document_repo: DocumentRepository) -> None:
        self._document_repo = document_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        image_url: str | None = None,
    ) -> ProductDTO:
        """Edit a product's name and/or image.

        Fields that are absent, blank or not strings are left unchanged.
        Invoices already issued keep their own snapshot of both.
        """
        with self._document_repo.write_lock():
            document = self._document_repo.load()
            product = document.find_product(product_id)

            if _given(name):
                product.rename(name)  # type: ignore[arg-type]
            if _given(image_url):
                product.change_image(image_url)  # type: ignore[arg-type]

            self._document_repo.save(document)

        logger.info("Updated product %s", product_id)
        return product_to_dto(product)
