"""Public interface for the Anthropic adapter."""

from __future__ import annotations

from .client import MessagesClient
from .producer import AnthropicDeltaProducer, search_budget
from .schema import MessagesResponse

__all__ = [
    "AnthropicDeltaProducer",
    "MessagesClient",
    "MessagesResponse",
    "search_budget",
]
