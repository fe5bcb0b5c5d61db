"""Prompt templates for grounded question answering.

Keeping prompts in one place makes them easy to audit and version.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from langchain_core.messages import HumanMessage, SystemMessage

if TYPE_CHECKING:
    from langchain_core.messages import BaseMessage

    from clinic_rag.retrieval.models import RetrievalResult

CONTEXT_DELIMITER = "\n---\n"

GROUNDED_SYSTEM = (
    "Answer only using the provided context. If the context is empty or doesn't "
    "contain the answer, say you don't know and cite filenames when you do answer."
)

NO_CONTEXT_ANSWER = "I couldn't find anything relevant in the uploaded documents."


def format_context(results: Sequence[RetrievalResult]) -> str:
    """Render each chunk as ``Source: <filename>`` followed by its text."""
    return CONTEXT_DELIMITER.join(f"Source: {r.filename}\n{r.text}" for r in results)


def build_grounded_prompt(question: str, results: Sequence[RetrievalResult]) -> list[BaseMessage]:
    """Assemble the messages for one grounded completion call.

    Parameters
    ----------
    question:
        The user's message.
    results:
        Retrieved chunks, best first.

    Returns
    -------
    list[BaseMessage]
        A list of LangChain message objects ready for ``.invoke()``.
    """
    return [
        SystemMessage(content=GROUNDED_SYSTEM),
        HumanMessage(content=f"Context:\n{format_context(results)}\n\nQuestion: {question}"),
    ]
