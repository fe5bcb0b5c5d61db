"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import pytest
from langchain_core.embeddings import Embeddings

from clinic_rag.retrieval.models import Chunk


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


class FakeEmbeddings(Embeddings):
    """Canned embeddings keyed by exact text, with call recording."""

    def __init__(self, vectors: dict[str, list[float]] | None = None, default: list[float] | None = None) -> None:
        self.vectors = vectors or {}
        self.default = default if default is not None else [1.0, 0.0, 0.0]
        self.calls: list[str] = []

    def embed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        return self.vectors.get(text, self.default)

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self.embed_query(t) for t in texts]


class StatusError(Exception):
    """Stand-in for an HTTP client error carrying a status code."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


def make_chunk(
    text: str,
    embedding: list[float],
    *,
    filename: str = "a.pdf",
    chunk_index: int = 0,
    chunk_id: str | None = None,
) -> Chunk:
    return Chunk(
        id=chunk_id or f"{filename}-{chunk_index}",
        file_id=f"file-{filename}",
        filename=filename,
        chunk_index=chunk_index,
        text=text,
        embedding=embedding,
    )

