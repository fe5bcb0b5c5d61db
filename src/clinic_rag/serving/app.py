"""FastAPI application exposing grounded document chat as a REST API."""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from clinic_rag.chat.controller import GroundedChatController, InvalidChatRequest
from clinic_rag.chat.llm import get_llm
from clinic_rag.config import settings
from clinic_rag.ingestion.embedder import EmbeddingClient
from clinic_rag.retrieval.json_store import JsonVectorStore
from clinic_rag.retrieval.retriever import Retriever

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Clinic RAG API",
    version="0.1.0",
    description="Question answering grounded in the clinic's uploaded documents.",
)


# ── Request / Response schemas ────────────────────────────────────────
class ChatRequest(BaseModel):
    """Incoming question, optionally scoped to one document."""

    message: str | None = None
    filename: str | None = None


class Source(BaseModel):
    """One chunk the answer was grounded in."""

    id: str
    filename: str
    text: str
    score: float


class ChatResponse(BaseModel):
    """Answer plus provenance."""

    answer: str
    sources: list[Source] = []


# ── Dependencies ──────────────────────────────────────────────────────
@lru_cache(maxsize=1)
def get_controller() -> GroundedChatController:
    """Build the production controller once from settings."""
    retriever = Retriever(
        JsonVectorStore(settings.vector_store_path),
        EmbeddingClient.from_settings(settings),
        default_k=settings.retrieval_k,
    )
    return GroundedChatController(retriever, get_llm(settings), k=settings.retrieval_k)


@app.exception_handler(RequestValidationError)
async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "invalid request body"})


@app.exception_handler(Exception)
async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "server error"})


# ── Routes ────────────────────────────────────────────────────────────
@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@app.post("/chat", response_model=ChatResponse)
def chat(
    request: ChatRequest,
    controller: GroundedChatController = Depends(get_controller),
) -> ChatResponse | JSONResponse:
    """Answer *message* from the stored documents."""
    try:
        result = controller.answer(request.message, request.filename)
    except InvalidChatRequest as exc:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})
    except Exception:
        logger.exception("RAG chat error")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "server error"})

    return ChatResponse(
        answer=result.answer,
        sources=[Source(**r.to_source()) for r in result.sources],
    )
