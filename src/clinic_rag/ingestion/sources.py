"""Document sources — enumerate raw stored documents for ingestion.

Every source yields :class:`SourceDocument` records in a stable order.
Entries that do not fit that shape are logged and skipped rather than
patched up.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from gridfs import GridFSBucket
from pymongo import MongoClient

from clinic_rag.retrieval.models import SourceDocument

logger = logging.getLogger(__name__)


class DocumentSource(ABC):
    """Enumerable store of raw documents."""

    @abstractmethod
    def iter_documents(self) -> Iterator[SourceDocument]:
        """Yield every stored document with its bytes loaded."""
        ...


class GridFSDocumentSource(DocumentSource):
    """Documents uploaded to a MongoDB GridFS bucket.

    Parameters
    ----------
    mongo_uri:
        MongoDB connection string.
    database:
        Database holding the bucket.
    bucket:
        GridFS bucket name (``<bucket>.files`` / ``<bucket>.chunks``).
    """

    def __init__(self, mongo_uri: str, database: str, bucket: str = "documents") -> None:
        self.mongo_uri = mongo_uri
        self.database = database
        self.bucket = bucket

    def iter_documents(self) -> Iterator[SourceDocument]:
        client: MongoClient = MongoClient(self.mongo_uri)
        try:
            fs = GridFSBucket(client[self.database], bucket_name=self.bucket)
            for grid_out in fs.find({}):
                if not grid_out.filename:
                    logger.warning("Skipping GridFS file %s without a filename", grid_out._id)
                    continue
                yield SourceDocument(
                    file_id=str(grid_out._id),
                    filename=grid_out.filename,
                    content=grid_out.read(),
                )
        finally:
            client.close()


class DirectoryDocumentSource(DocumentSource):
    """Regular files under a local directory, in sorted path order."""

    def __init__(self, root: str | Path, glob: str = "**/*") -> None:
        self.root = Path(root)
        self.glob = glob

    def iter_documents(self) -> Iterator[SourceDocument]:
        if not self.root.is_dir():
            raise FileNotFoundError(f"Directory not found: {self.root}")
        for fpath in sorted(self.root.glob(self.glob)):
            if not fpath.is_file():
                continue
            yield SourceDocument(
                file_id=fpath.relative_to(self.root).as_posix(),
                filename=fpath.name,
                content=fpath.read_bytes(),
            )
