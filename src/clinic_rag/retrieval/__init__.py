"""
Retrieval — snapshot vector store, similarity scoring, and ranking.

Public surface
--------------
- :class:`Retriever` — embeds a query and ranks stored chunks.
- :class:`VectorStoreBase` — abstract snapshot backend.
- :class:`JsonVectorStore` — default file-backed backend.
- :class:`Chunk`, :class:`RetrievalResult`, :class:`SourceDocument` — data models.
- :func:`cosine_scores`, :func:`cosine_similarity` — the ranking metric.
"""

from clinic_rag.retrieval.base import InMemoryVectorStore, VectorStoreBase
from clinic_rag.retrieval.json_store import JsonVectorStore, VectorStoreCorruptError
from clinic_rag.retrieval.models import ChatAnswer, Chunk, RetrievalResult, SourceDocument, VectorStoreSnapshot
from clinic_rag.retrieval.retriever import Retriever
from clinic_rag.retrieval.similarity import cosine_scores, cosine_similarity

__all__ = [
    "ChatAnswer",
    "Chunk",
    "InMemoryVectorStore",
    "JsonVectorStore",
    "RetrievalResult",
    "Retriever",
    "SourceDocument",
    "VectorStoreBase",
    "VectorStoreCorruptError",
    "VectorStoreSnapshot",
    "cosine_scores",
    "cosine_similarity",
]
