"""Brute-force semantic retriever over the vector-store snapshot.

Usage::

    from clinic_rag.retrieval.retriever import Retriever

    retriever = Retriever(JsonVectorStore("data/vector_store.json"), EmbeddingClient.from_settings(settings))
    for r in retriever.retrieve("What does the CARS score measure?", k=4):
        print(r.short_ref(), r.score)
"""

from __future__ import annotations

import logging

from clinic_rag.ingestion.embedder import EmbeddingClient, EmbeddingRateLimitError
from clinic_rag.retrieval.base import VectorStoreBase
from clinic_rag.retrieval.models import RetrievalResult
from clinic_rag.retrieval.similarity import cosine_scores

logger = logging.getLogger(__name__)


class Retriever:
    """Rank every stored chunk by cosine similarity to the query.

    Parameters
    ----------
    store:
        Snapshot backend; read in full on every call.
    embedder:
        Client used to embed the query text.
    default_k:
        Number of results returned when *k* is not given.
    """

    def __init__(self, store: VectorStoreBase, embedder: EmbeddingClient, *, default_k: int = 4) -> None:
        self._store = store
        self._embedder = embedder
        self.default_k = default_k

    def retrieve(self, query: str, k: int | None = None, *, filename: str | None = None) -> list[RetrievalResult]:
        """Return up to *k* chunks, best first.

        When *filename* matches no stored chunk the search silently runs
        over the whole store instead of returning nothing.
        """
        k = self.default_k if k is None else k
        chunks = self._store.load()
        if not chunks or k < 1:
            return []

        pool = chunks
        if filename:
            pool = [c for c in chunks if c.filename == filename]
            if not pool:
                logger.info("No chunks for filename=%r, searching all %d chunks", filename, len(chunks))
                pool = chunks

        try:
            query_vec = self._embedder.embed(query)
        except EmbeddingRateLimitError:
            logger.warning("Query embedding rate-limited; returning no results", exc_info=True)
            return []
        if not query_vec:
            logger.warning("Embedding service returned no vector for query")
            return []

        scores = cosine_scores(query_vec, [c.embedding for c in pool])
        scored = [RetrievalResult.from_chunk(c, s) for c, s in zip(pool, scores)]
        # Stable sort: equal scores keep store order.
        scored.sort(key=lambda r: r.score, reverse=True)
        return scored[:k]
