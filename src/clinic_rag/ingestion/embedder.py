"""Embedding client with bounded retry on rate limiting."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from langchain_openai import OpenAIEmbeddings

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

    from clinic_rag.config import Settings

logger = logging.getLogger(__name__)

RATE_LIMIT_STATUS = 429


class EmbeddingError(RuntimeError):
    """The embedding service did not produce a vector."""


class EmbeddingRateLimitError(EmbeddingError):
    """Every attempt in the retry budget was rate-limited."""


def is_rate_limited(exc: BaseException) -> bool:
    """Return ``True`` when *exc* carries an HTTP 429 status.

    Covers ``openai.RateLimitError`` (``status_code``) as well as raw
    ``httpx.HTTPStatusError`` (``response.status_code``).
    """
    if getattr(exc, "status_code", None) == RATE_LIMIT_STATUS:
        return True
    response = getattr(exc, "response", None)
    return getattr(response, "status_code", None) == RATE_LIMIT_STATUS


def get_embeddings(settings: Settings) -> OpenAIEmbeddings:
    """Return the configured OpenAI-compatible embedding function.

    SDK-level retries are disabled; :class:`EmbeddingClient` owns the
    retry policy.
    """
    return OpenAIEmbeddings(
        model=settings.embedding_model,
        api_key=settings.llm_api_key or "EMPTY",
        base_url=settings.llm_base_url or None,
        max_retries=0,
        timeout=settings.request_timeout,
        # Non-OpenAI models have no tiktoken encoding; send raw text.
        check_embedding_ctx_length=False,
    )


class EmbeddingClient:
    """Turn one text into one vector, retrying only on rate limits.

    Parameters
    ----------
    embeddings:
        Any LangChain ``Embeddings`` implementation.
    max_attempts:
        Total attempts per :meth:`embed` call.
    backoff_seconds:
        Attempt *n* (1-based) that hits a 429 sleeps ``n * backoff_seconds``
        before the next try.
    sleep:
        Injected so tests can observe backoff without waiting.
    """

    def __init__(
        self,
        embeddings: Embeddings,
        *,
        max_attempts: int = 5,
        backoff_seconds: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self._embeddings = embeddings
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Settings) -> EmbeddingClient:
        return cls(
            get_embeddings(settings),
            max_attempts=settings.embedding_max_attempts,
            backoff_seconds=settings.embedding_backoff_seconds,
        )

    def embed(self, text: str) -> list[float]:
        """Embed *text*.

        Returns an empty list when the service answers without a vector;
        callers must treat that as "no embedding", not as a zero vector.

        Raises
        ------
        EmbeddingRateLimitError
            When all ``max_attempts`` were rate-limited.
        Exception
            Any non-429 error from the service, unchanged and unretried.
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                vector = self._embeddings.embed_query(text)
            except Exception as exc:
                if not is_rate_limited(exc):
                    raise
                if attempt == self.max_attempts:
                    raise EmbeddingRateLimitError(
                        f"Embedding rate-limited on all {self.max_attempts} attempts"
                    ) from exc
                delay = self.backoff_seconds * attempt
                logger.warning(
                    "Embedding rate-limited (attempt %d/%d), retrying in %.1fs",
                    attempt,
                    self.max_attempts,
                    delay,
                )
                self._sleep(delay)
                continue
            return list(vector or [])
        return []  # pragma: no cover
