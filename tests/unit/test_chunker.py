"""Unit tests for the chunker module."""

import math

import pytest

from clinic_rag.ingestion.chunker import chunk_text


def _words(n: int) -> str:
    return " ".join(f"w{i}" for i in range(n))


@pytest.mark.parametrize("n_words,size", [(1, 800), (799, 800), (800, 800), (801, 800), (1600, 800), (17, 5)])
def test_chunk_count_is_ceiling(n_words: int, size: int) -> None:
    """Number of chunks equals ceil(words / size); last chunk holds 1..size words."""
    chunks = chunk_text(_words(n_words), size)
    assert len(chunks) == math.ceil(n_words / size)
    assert 1 <= len(chunks[-1].split()) <= size
    assert all(len(c.split()) == size for c in chunks[:-1])


def test_chunks_preserve_word_order() -> None:
    """Chunk i holds words [i*size, (i+1)*size) in order."""
    text = _words(12)
    chunks = chunk_text(text, 5)
    assert chunks == ["w0 w1 w2 w3 w4", "w5 w6 w7 w8 w9", "w10 w11"]
    assert " ".join(chunks).split() == text.split()


def test_chunk_text_collapses_whitespace() -> None:
    """Newlines, tabs, and runs of spaces all separate words."""
    assert chunk_text("alpha\n\nbeta\tgamma   delta", 3) == ["alpha beta gamma", "delta"]


def test_chunk_text_empty_input() -> None:
    """Empty or whitespace-only text yields no chunks."""
    assert chunk_text("") == []
    assert chunk_text(" \n\t ") == []


def test_chunk_text_default_size_is_800() -> None:
    assert [len(c.split()) for c in chunk_text(_words(1000))] == [800, 200]


def test_chunk_text_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError, match="chunk size"):
        chunk_text("some words", 0)
