"""Abstract repository for the Document aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (JSON file, in-memory) live
in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from pos.domain.model.document import Document


class DocumentRepository(ABC):

    @abstractmethod
    def load(self) -> Document:
        """Return the most recently saved Document."""

    @abstractmethod
    def save(self, document: Document) -> None:
        """Persist the whole Document, refreshing ``updated_at``.

        Readers must never observe a half-written document.
        """

    @abstractmethod
    def write_lock(self) -> AbstractContextManager:
        """Serialize a load-modify-save cycle against other writers.

        Every mutating use case wraps its whole cycle in
        ``with repo.write_lock():`` so concurrent writes cannot lose
        each other's updates.
        """
