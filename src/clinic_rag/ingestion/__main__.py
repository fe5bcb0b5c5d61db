"""CLI — rebuild the vector-store snapshot.

    python -m clinic_rag.ingestion                      # GridFS bucket from settings
    python -m clinic_rag.ingestion --source directory --path ./docs
"""

from __future__ import annotations

import argparse
import logging
import sys

from clinic_rag.config import Settings, settings
from clinic_rag.ingestion.pipeline import build_pipeline, build_source

logger = logging.getLogger("clinic_rag.ingestion")


def main(argv: list[str] | None = None, config: Settings = settings) -> int:
    parser = argparse.ArgumentParser(description="Rebuild the RAG vector store from stored documents")
    parser.add_argument("--source", choices=["gridfs", "directory"], default="gridfs")
    parser.add_argument("--path", help="Root directory (directory source only)")
    parser.add_argument("--store", help="Snapshot path (defaults to VECTOR_STORE_PATH)")
    parser.add_argument("--chunk-size", type=int, help="Words per chunk")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.log_level)

    try:
        pipeline = build_pipeline(
            config,
            source=build_source(config, args.source, args.path),
            store_path=args.store,
            chunk_size=args.chunk_size,
        )
        count = pipeline.run()
    except Exception:
        logger.exception("Ingestion failed; previous snapshot left in place")
        return 1

    print(f"Ingestion complete. Chunks: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
