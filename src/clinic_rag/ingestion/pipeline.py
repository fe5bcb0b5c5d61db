"""Batch ingestion — extract → chunk → embed → snapshot.

The run is all-or-nothing: chunks are built for every document first,
then embedded one at a time in build order, and the snapshot is written
once at the very end.  Any failure before that write leaves the
previous snapshot untouched.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING
from uuid import uuid4

from clinic_rag.ingestion.chunker import chunk_text
from clinic_rag.ingestion.embedder import EmbeddingClient
from clinic_rag.ingestion.extractor import extract_text
from clinic_rag.ingestion.sources import DirectoryDocumentSource, DocumentSource, GridFSDocumentSource
from clinic_rag.retrieval.base import VectorStoreBase
from clinic_rag.retrieval.json_store import JsonVectorStore
from clinic_rag.retrieval.models import Chunk

if TYPE_CHECKING:
    from clinic_rag.config import Settings

logger = logging.getLogger(__name__)


class IngestionError(RuntimeError):
    """The run could not produce a complete snapshot."""


class IngestionPipeline:
    """Rebuild the vector store from every document in *source*.

    Parameters
    ----------
    source:
        Where raw documents come from.
    embedder:
        Embedding client (with its own retry policy).
    store:
        Snapshot backend; replaced wholesale on success.
    chunk_size:
        Words per chunk.
    extract:
        ``(content, filename) -> text``; defaults to :func:`extract_text`.
    """

    def __init__(
        self,
        source: DocumentSource,
        embedder: EmbeddingClient,
        store: VectorStoreBase,
        *,
        chunk_size: int = 800,
        extract: Callable[[bytes, str], str] = extract_text,
    ) -> None:
        self._source = source
        self._embedder = embedder
        self._store = store
        self.chunk_size = chunk_size
        self._extract = extract

    def build_chunks(self) -> list[Chunk]:
        """Extract and chunk every document; embeddings left empty."""
        chunks: list[Chunk] = []
        num_docs = 0
        for doc in self._source.iter_documents():
            num_docs += 1
            text = self._extract(doc.content, doc.filename)
            parts = chunk_text(text, self.chunk_size)
            if not parts:
                logger.warning("No text extracted from %s (%s)", doc.filename, doc.file_id)
                continue
            chunks.extend(
                Chunk(
                    id=uuid4().hex,
                    file_id=doc.file_id,
                    filename=doc.filename,
                    chunk_index=idx,
                    text=part,
                )
                for idx, part in enumerate(parts)
            )
            logger.info("  %s → %d chunks", doc.filename, len(parts))
        logger.info("Built %d chunks from %d documents", len(chunks), num_docs)
        return chunks

    def embed_chunks(self, chunks: list[Chunk]) -> list[Chunk]:
        """Embed *chunks* sequentially; any failure aborts the run."""
        embedded: list[Chunk] = []
        for i, chunk in enumerate(chunks, 1):
            vector = self._embedder.embed(chunk.text)
            if not vector:
                raise IngestionError(
                    f"No embedding returned for chunk {chunk.chunk_index} of {chunk.filename}"
                )
            embedded.append(chunk.with_embedding(vector))
            logger.debug("  embedded %d / %d", i, len(chunks))
        return embedded

    def run(self) -> int:
        """Run the full ingestion and return the number of chunks written."""
        t0 = time.monotonic()
        chunks = self.embed_chunks(self.build_chunks())
        self._store.save(chunks)
        logger.info("Ingestion complete: %d chunks in %.1fs", len(chunks), time.monotonic() - t0)
        return len(chunks)


def build_source(settings: Settings, kind: str = "gridfs", path: str | None = None) -> DocumentSource:
    """Return the document source named by *kind* (``gridfs`` | ``directory``)."""
    if kind == "gridfs":
        return GridFSDocumentSource(settings.mongo_uri, settings.mongo_database, settings.gridfs_bucket)
    if kind == "directory":
        if not path:
            raise ValueError("A directory source needs a path")
        return DirectoryDocumentSource(path)
    raise ValueError(f"Unsupported source {kind!r}. Choose from: gridfs, directory.")


def build_pipeline(
    settings: Settings,
    *,
    source: DocumentSource | None = None,
    store_path: str | None = None,
    chunk_size: int | None = None,
) -> IngestionPipeline:
    """Wire the production collaborators from *settings*."""
    return IngestionPipeline(
        source if source is not None else build_source(settings),
        EmbeddingClient.from_settings(settings),
        JsonVectorStore(store_path or settings.vector_store_path),
        chunk_size=chunk_size or settings.chunk_size,
    )
