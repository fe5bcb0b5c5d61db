"""LLM initialisation — single place to swap providers.

The completion service is reached through its OpenAI-compatible
``/v1/chat/completions`` endpoint, so ``ChatOpenAI`` works for Mistral
(the default), OpenAI itself, or a self-hosted vLLM server alike.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from langchain_openai import ChatOpenAI

if TYPE_CHECKING:
    from clinic_rag.config import Settings

logger = logging.getLogger(__name__)


def get_llm(settings: Settings, temperature: float = 0.0) -> ChatOpenAI:
    """Return the configured chat model.

    An empty ``settings.llm_base_url`` means the OpenAI cloud API.  Local
    servers that ignore authentication still need a non-empty key, so
    ``"EMPTY"`` is sent when none is configured.
    """
    kwargs: dict = {
        "model": settings.llm_model_name,
        "temperature": temperature,
        "api_key": settings.llm_api_key or "EMPTY",
        "timeout": settings.request_timeout,
    }

    if settings.llm_base_url:
        logger.info("Using chat completion endpoint: %s", settings.llm_base_url)
        kwargs["base_url"] = settings.llm_base_url

    return ChatOpenAI(**kwargs)
