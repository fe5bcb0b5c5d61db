"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file."""

    # LLM / embeddings (any OpenAI-compatible endpoint)
    llm_api_key: str = Field(default="", description="API key for the completion and embedding endpoint")
    llm_base_url: str = Field(
        default="https://api.mistral.ai/v1",
        description="Base URL of the OpenAI-compatible API serving both chat and embeddings.",
    )
    llm_model_name: str = Field(default="mistral-small-latest", description="Chat completion model identifier")
    embedding_model: str = Field(default="mistral-embed", description="Embedding model identifier")
    embedding_max_attempts: int = Field(default=5, ge=1)
    embedding_backoff_seconds: float = Field(
        default=0.5,
        ge=0.0,
        description="Linear backoff step; attempt n waits n * this value after a 429.",
    )
    request_timeout: float = Field(default=60.0, description="Per-request timeout in seconds")

    # Vector store
    vector_store_path: str = "data/vector_store.json"

    # Chunking / retrieval
    chunk_size: int = Field(default=800, ge=1, description="Words per chunk")
    retrieval_k: int = Field(default=4, ge=1, description="Chunks passed to the model per question")

    # Document store (GridFS)
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str = "clinic"
    gridfs_bucket: str = "documents"

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Read by entry points only; components take explicit arguments.
settings = Settings()
