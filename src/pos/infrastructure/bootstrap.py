"""Composition root. Wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pos.infrastructure.persistence.json_document_repository import (
    JsonDocumentRepository,
)

DATA_DIR_ENV = "POS_DATA_DIR"
DOCUMENT_FILE_NAME = "db.json"


def data_dir() -> Path:
    """``$POS_DATA_DIR`` if set, else ``./data`` under the working directory."""
    configured = os.environ.get(DATA_DIR_ENV)
    if configured:
        return Path(configured).expanduser().resolve()
    return Path.cwd() / "data"


@lru_cache(maxsize=None)
def _repository_for(file_path: Path) -> JsonDocumentRepository:
    return JsonDocumentRepository(file_path)


def document_repository(directory: Path | None = None) -> JsonDocumentRepository:
    """Return the shared repository for ``directory``.

    One instance per file, so every caller in the process serializes
    its writes on the same lock.
    """
    base = Path(directory) if directory is not None else data_dir()
    return _repository_for(base.resolve() / DOCUMENT_FILE_NAME)
