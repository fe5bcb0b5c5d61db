"""Word-count chunking."""

from __future__ import annotations


def chunk_text(text: str, size: int = 800) -> list[str]:
    """Split *text* into consecutive chunks of *size* whitespace-separated words.

    Parameters
    ----------
    text:
        Plain text produced by the extractor.
    size:
        Number of words per chunk.  The final chunk holds the remainder.

    Returns
    -------
    list[str]
        Chunks in document order, words re-joined with a single space.
        Empty (or whitespace-only) input yields an empty list.
    """
    if size < 1:
        raise ValueError(f"chunk size must be >= 1, got {size}")

    words = text.split()
    return [" ".join(words[start : start + size]) for start in range(0, len(words), size)]
