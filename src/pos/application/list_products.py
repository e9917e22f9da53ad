"""Application service: List Products use case (query)."""

from __future__ import annotations

from pos.application.dto import ProductDTO
from pos.application.mapping import product_to_dto
from pos.domain.repository.document_repository import DocumentRepository


class ListProductsHandler:

    def __init__(self, document_repo: DocumentRepository) -> None:
        self._document_repo = document_repo

    def handle(self) -> list[ProductDTO]:
        document = self._document_repo.load()
        return [product_to_dto(p) for p in document.products]
