"""JSON-file implementation of the vector-store abstraction.

File format::

    {"chunks": [{"id": ..., "fileId": ..., "filename": ..., "chunkIndex": 0,
                 "text": ..., "embedding": [0.01, ...]}, ...]}
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from clinic_rag.retrieval.base import VectorStoreBase
from clinic_rag.retrieval.models import Chunk, VectorStoreSnapshot

logger = logging.getLogger(__name__)


class VectorStoreCorruptError(RuntimeError):
    """A snapshot file exists but does not parse into chunks."""


class JsonVectorStore(VectorStoreBase):
    """Snapshot persisted as a single JSON document.

    Parameters
    ----------
    path:
        Location of the snapshot file.  A missing file is an empty store.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[Chunk]:
        if not self.path.exists():
            return []
        try:
            snapshot = VectorStoreSnapshot.model_validate_json(self.path.read_bytes())
        except ValidationError as exc:
            raise VectorStoreCorruptError(f"Unreadable vector store snapshot at {self.path}") from exc
        return snapshot.chunks

    def save(self, chunks: Sequence[Chunk]) -> None:
        """Overwrite the snapshot atomically.

        The payload goes to a sibling temp file which then replaces the
        target, so readers see either the old or the new generation.
        """
        payload = VectorStoreSnapshot(chunks=list(chunks)).model_dump_json(by_alias=True, indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.info("Wrote %d chunks to %s", len(chunks), self.path)
