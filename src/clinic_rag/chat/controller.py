"""Grounded chat — retrieve, prompt, complete."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from clinic_rag.chat.prompts import NO_CONTEXT_ANSWER, build_grounded_prompt
from clinic_rag.retrieval.models import ChatAnswer

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel

    from clinic_rag.retrieval.retriever import Retriever

logger = logging.getLogger(__name__)


class InvalidChatRequest(ValueError):
    """The caller sent a request the controller cannot act on."""


class GroundedChatController:
    """Answer questions strictly from retrieved document chunks.

    Parameters
    ----------
    retriever:
        Source of context chunks.
    llm:
        LangChain chat model; called at most once per question.
    k:
        Number of chunks placed in the prompt.
    """

    def __init__(self, retriever: Retriever, llm: BaseChatModel, *, k: int = 4) -> None:
        self._retriever = retriever
        self._llm = llm
        self.k = k

    def answer(self, message: str | None, filename: str | None = None) -> ChatAnswer:
        if not message or not message.strip():
            raise InvalidChatRequest("message required")

        results = self._retriever.retrieve(message, self.k, filename=filename)
        if not results:
            logger.info("No relevant chunks for question; skipping completion")
            return ChatAnswer(answer=NO_CONTEXT_ANSWER, sources=[])

        logger.info("Answering from %s", ", ".join(r.short_ref() for r in results))
        response = self._llm.invoke(build_grounded_prompt(message, results))
        return ChatAnswer(answer=_content_text(response), sources=results)


def _content_text(response: Any) -> str:
    content = getattr(response, "content", None)
    return content if isinstance(content, str) else ""
