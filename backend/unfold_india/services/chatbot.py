import logging
from datetime import datetime, timezone

from fastapi.concurrency import run_in_threadpool

from unfold_india.core.exceptions import RemoteFailure, Unauthenticated, ValidationError
from unfold_india.repositories.chat_repository import ChatRepository
from unfold_india.schemas.chatbot import ChatTurn
from unfold_india.services.latency import deferred
from unfold_india.services.responders import ResponseSource

logger = logging.getLogger(__name__)

GREETING = "Hello! I'm your AI travel companion for India. How can I help you plan your journey today?"


class ChatbotService:
    def __init__(
        self,
        responder: ResponseSource,
        chats: ChatRepository,
        reply_delay: float = 0.0,
    ):
        self.responder = responder
        self.chats = chats
        self.reply_delay = reply_delay

    def greeting(self) -> str:
        return GREETING

    async def reply(self, message: str) -> ChatTurn:
        question = message.strip()
        if not question:
            raise ValidationError("Message cannot be empty", field="message")

        answer = await deferred(lambda: self.responder.respond(question), self.reply_delay)

        # The answer is shown even when persisting it fails
        try:
            record = await run_in_threadpool(self.chats.append, question, answer)
        except (Unauthenticated, RemoteFailure) as exc:
            logger.warning(f"Chat turn not saved: {exc}")
            return ChatTurn(
                question=question,
                answer=answer,
                saved=False,
                created_at=datetime.now(timezone.utc),
                notice="Failed to save chat history",
            )
        return ChatTurn(
            question=question,
            answer=answer,
            saved=True,
            created_at=record.created_at,
        )
