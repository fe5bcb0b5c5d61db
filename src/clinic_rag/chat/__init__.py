"""
Chat — grounded question answering over the vector store.

Public API
----------
- :class:`GroundedChatController` — retrieve → prompt → complete.
- :func:`get_llm` — the configured completion model.
"""

from clinic_rag.chat.controller import GroundedChatController, InvalidChatRequest
from clinic_rag.chat.llm import get_llm

__all__ = ["GroundedChatController", "InvalidChatRequest", "get_llm"]
