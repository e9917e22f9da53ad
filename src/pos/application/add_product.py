"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from collections.abc import Callable

from pos.application.dto import ProductDTO
from pos.application.ids import new_product_id
from pos.application.mapping import product_to_dto
from pos.domain.model.product import Product
from pos.domain.repository.document_repository import DocumentRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        document_repo: DocumentRepository,
        id_factory: Callable[[], str] = new_product_id,
    ) -> None:
        self._document_repo = document_repo
        self._id_factory = id_factory

    def handle(self, name: str | None, image_url: str | None) -> ProductDTO:
        """Add a new product to the catalog.

        Both fields are required and stored trimmed.  Validation runs
        before the write lock is taken.
        """
        product = Product.create(self._id_factory(), name, image_url)

        with self._document_repo.write_lock():
            document = self._document_repo.load()
            document.add_product(product)
            self._document_repo.save(document)

        logger.info("Added product %s '%s'", product.id, product.name)
        return product_to_dto(product)
