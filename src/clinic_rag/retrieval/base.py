"""Abstract base class for vector-store backends.

The store is a snapshot: :meth:`VectorStoreBase.load` reads every chunk
and :meth:`VectorStoreBase.save` replaces every chunk.  There is no
partial update.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from clinic_rag.retrieval.models import Chunk


class VectorStoreBase(ABC):
    """Backend-agnostic snapshot store interface."""

    # -- required overrides ---------------------------------------------------

    @abstractmethod
    def load(self) -> list[Chunk]:
        """Return all chunks, or ``[]`` when no snapshot exists yet."""
        ...

    @abstractmethod
    def save(self, chunks: Sequence[Chunk]) -> None:
        """Replace the whole snapshot with *chunks*."""
        ...


class InMemoryVectorStore(VectorStoreBase):
    """Process-local store; handy for tests and notebooks."""

    def __init__(self, chunks: Sequence[Chunk] | None = None) -> None:
        self._chunks: list[Chunk] = list(chunks or [])
        self.save_count = 0

    def load(self) -> list[Chunk]:
        return list(self._chunks)

    def save(self, chunks: Sequence[Chunk]) -> None:
        self._chunks = list(chunks)
        self.save_count += 1
