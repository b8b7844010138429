from __future__ import annotations

import random
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Sequence

from unfold_india.core.config import get_settings

CANNED_RESPONSES = (
    "That's a great question about traveling in India! Based on your query, I'd recommend exploring the cultural heritage sites and trying the local cuisine.",
    "India offers incredible diversity in destinations. Would you like me to suggest some routes based on your interests?",
    "For safety while traveling, I always recommend staying connected with local guides and keeping emergency contacts handy.",
    "The best time to visit varies by region. Northern India is great in winter, while the south is pleasant year-round.",
    "I can help you with language translations, local customs, and finding the best authentic experiences!",
)


class ResponseSource(ABC):
    """Interface for whatever produces the chatbot's answers."""

    @abstractmethod
    def respond(self, message: str) -> str:
        """Return the answer text for a user message."""


class CannedResponseSource(ResponseSource):
    """Picks one of a fixed set of answers uniformly at random."""

    def __init__(
        self,
        responses: Sequence[str] = CANNED_RESPONSES,
        rng: random.Random | None = None,
    ) -> None:
        if not responses:
            raise ValueError("At least one canned response is required")
        self._responses = tuple(responses)
        self._rng = rng or random.Random()

    @property
    def responses(self) -> tuple[str, ...]:
        return self._responses

    def respond(self, message: str) -> str:
        return self._rng.choice(self._responses)


@lru_cache
def get_response_source() -> ResponseSource:
    settings = get_settings()
    if settings.chat_responder == "canned":
        return CannedResponseSource()
    raise ValueError(f"Unknown chat responder: {settings.chat_responder}")
