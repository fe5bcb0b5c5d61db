"""
Ingestion — text extraction, chunking, and embedding into the vector store.

This module is responsible for the batch job that converts stored
documents (PDF, DOCX, plain text) into embedded chunks persisted as a
single vector-store snapshot.  Run it with ``python -m clinic_rag.ingestion``.
"""
