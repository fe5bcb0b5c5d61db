"""Text extraction — thin wrappers around LangChain document loaders.

Stored documents arrive as raw bytes.  The loaders only accept file
paths, so each blob is spilled to a temporary file that is removed
again before :func:`extract_text` returns.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from langchain_community.document_loaders import Docx2txtLoader, PyPDFLoader

if TYPE_CHECKING:
    from langchain_core.documents import Document

logger = logging.getLogger(__name__)


@contextmanager
def _temporary_copy(content: bytes, suffix: str) -> Iterator[str]:
    """Write *content* to a temp file and yield its path; always delete it."""
    fd, tmp_path = tempfile.mkstemp(suffix=suffix, prefix="clinic_rag_")
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(content)
        yield tmp_path
    finally:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)


def _join_pages(documents: list[Document]) -> str:
    return "\n".join(doc.page_content for doc in documents)


def load_pdf(path: str | Path) -> str:
    """Load a single PDF file as plain text."""
    return _join_pages(PyPDFLoader(str(path)).load())


def load_docx(path: str | Path) -> str:
    """Load a single DOCX file as plain text."""
    return _join_pages(Docx2txtLoader(str(path)).load())


_LOADERS = {
    ".pdf": load_pdf,
    ".docx": load_docx,
}


def extract_text(content: bytes, filename: str) -> str:
    """Convert a stored document blob into plain text.

    Dispatch is purely by the extension of *filename*.  PDF and DOCX
    blobs go through their LangChain loader; anything else is decoded
    as UTF-8 verbatim.

    A loader failure is logged and degrades to ``""`` so one corrupt
    upload never aborts an ingestion run.
    """
    suffix = Path(filename or "").suffix.lower()
    loader = _LOADERS.get(suffix)
    if loader is None:
        return content.decode("utf-8", errors="replace")

    with _temporary_copy(content, suffix) as tmp_path:
        try:
            return loader(tmp_path)
        except Exception:
            logger.warning("Failed to extract text from %s", filename, exc_info=True)
            return ""
