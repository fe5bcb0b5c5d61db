"""Unit tests for text extraction and temp-file handling."""

from __future__ import annotations

import os
from unittest.mock import MagicMock, patch

from langchain_core.documents import Document

from clinic_rag.ingestion.extractor import extract_text


def _loader_recording_path(seen: list[str], pages: list[str]) -> MagicMock:
    """A loader class mock that records the path it was opened with."""

    def factory(path: str) -> MagicMock:
        seen.append(path)
        assert os.path.exists(path)
        loader = MagicMock()
        loader.load.return_value = [Document(page_content=p) for p in pages]
        return loader

    return MagicMock(side_effect=factory)


class TestPlainText:
    def test_unknown_extension_is_utf8(self) -> None:
        assert extract_text("Héllo clinic".encode("utf-8"), "notes.txt") == "Héllo clinic"

    def test_missing_extension_is_utf8(self) -> None:
        assert extract_text(b"raw bytes", "README") == "raw bytes"

    def test_invalid_utf8_is_replaced(self) -> None:
        assert extract_text(b"ok \xff", "notes.md") == "ok \ufffd"


class TestPdf:
    def test_pdf_pages_joined(self) -> None:
        seen: list[str] = []
        with patch(
            "clinic_rag.ingestion.extractor.PyPDFLoader",
            _loader_recording_path(seen, ["page one", "page two"]),
        ):
            text = extract_text(b"%PDF-1.4 ...", "Report.PDF")

        assert text == "page one\npage two"
        assert seen[0].endswith(".pdf")
        assert not os.path.exists(seen[0])

    def test_pdf_parse_failure_returns_empty_and_cleans_up(self) -> None:
        seen: list[str] = []

        def broken(path: str) -> MagicMock:
            seen.append(path)
            loader = MagicMock()
            loader.load.side_effect = ValueError("EOF marker not found")
            return loader

        with patch("clinic_rag.ingestion.extractor.PyPDFLoader", side_effect=broken):
            assert extract_text(b"not a pdf", "broken.pdf") == ""

        assert len(seen) == 1
        assert not os.path.exists(seen[0])

    def test_temp_file_holds_content(self) -> None:
        captured: dict[str, bytes] = {}

        def reader(path: str) -> MagicMock:
            with open(path, "rb") as fh:
                captured["bytes"] = fh.read()
            loader = MagicMock()
            loader.load.return_value = []
            return loader

        with patch("clinic_rag.ingestion.extractor.PyPDFLoader", side_effect=reader):
            assert extract_text(b"%PDF-blob", "x.pdf") == ""

        assert captured["bytes"] == b"%PDF-blob"

    def test_temp_copy_keeps_extension_and_is_removed(self) -> None:
        seen: list[str] = []
        with patch("clinic_rag.ingestion.extractor.PyPDFLoader", _loader_recording_path(seen, ["ok"])):
            assert extract_text(b"%PDF-1.4", "Report.PDF") == "ok"

        assert os.path.basename(seen[0]).startswith("clinic_rag_")
        assert seen[0].endswith(".pdf")
        assert not os.path.exists(seen[0])


class TestDocx:
    def test_docx_uses_docx_loader(self) -> None:
        seen: list[str] = []
        with patch(
            "clinic_rag.ingestion.extractor.Docx2txtLoader",
            _loader_recording_path(seen, ["Therapy plan"]),
        ):
            assert extract_text(b"PK\x03\x04", "plan.docx") == "Therapy plan"

        assert seen[0].endswith(".docx")
        assert not os.path.exists(seen[0])

    def test_docx_failure_returns_empty(self) -> None:
        with patch("clinic_rag.ingestion.extractor.Docx2txtLoader", side_effect=KeyError("word/document.xml")):
            assert extract_text(b"garbage", "plan.docx") == ""
