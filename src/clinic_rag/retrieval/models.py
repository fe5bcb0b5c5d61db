"""Domain models for chunks, the persisted snapshot, and retrieval results."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SourceDocument(BaseModel):
    """A raw stored document as handed over by a document source.

    Attributes
    ----------
    file_id:
        Identifier assigned by the external document store.
    filename:
        Original upload name; its extension drives text extraction.
    content:
        The binary blob.
    """

    file_id: str
    filename: str
    content: bytes = b""


class Chunk(BaseModel):
    """A contiguous slice of one document's extracted text.

    Serialised with camelCase aliases (``fileId``, ``chunkIndex``) to
    match the snapshot file format; either spelling is accepted on input.
    A chunk is never mutated; embedding produces a copy.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    file_id: str = Field(alias="fileId")
    filename: str
    chunk_index: int = Field(alias="chunkIndex", ge=0)
    text: str
    embedding: list[float] = Field(default_factory=list)

    def with_embedding(self, embedding: list[float]) -> Chunk:
        return self.model_copy(update={"embedding": list(embedding)})


class VectorStoreSnapshot(BaseModel):
    """The whole vector store, persisted and loaded as one unit."""

    chunks: list[Chunk] = Field(default_factory=list)


class RetrievalResult(Chunk):
    """A :class:`Chunk` scored against a query (cosine similarity)."""

    score: float

    @classmethod
    def from_chunk(cls, chunk: Chunk, score: float) -> RetrievalResult:
        return cls(**chunk.model_dump(), score=score)

    def short_ref(self) -> str:
        """Return a compact ``[filename§chunk]`` reference string."""
        return f"[{self.filename}§{self.chunk_index}]"

    def to_source(self) -> dict[str, Any]:
        """Client-facing provenance record (no embedding)."""
        return {"id": self.id, "filename": self.filename, "text": self.text, "score": self.score}

    def __str__(self) -> str:  # noqa: D105
        return f"{self.short_ref()} {self.text[:120]}…"


class ChatAnswer(BaseModel):
    """Grounded answer plus the chunks it was grounded in."""

    answer: str
    sources: list[RetrievalResult] = Field(default_factory=list)
