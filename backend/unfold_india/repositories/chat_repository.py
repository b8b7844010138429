"""
Chat history repository.

Append-only writer and offset-paginated reader over ``chat_history``.
Every query is scoped to the session principal.
"""

import logging
import math
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from unfold_india.core.exceptions import RemoteFailure, ValidationError
from unfold_india.core.session_context import SessionContext
from unfold_india.models.chat_record import ChatRecord

logger = logging.getLogger(__name__)


@dataclass
class ChatPage:
    items: list[ChatRecord]
    total_count: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)


def page_range(page: int, page_size: int) -> tuple[int, int]:
    """Zero-based inclusive row range for a 1-based page."""
    if page < 1:
        raise ValidationError("Page must be at least 1", field="page")
    if page_size < 1:
        raise ValidationError("Page size must be at least 1", field="page_size")
    start = (page - 1) * page_size
    return start, start + page_size - 1


class ChatRepository:
    def __init__(self, db: Session, context: SessionContext):
        self.db = db
        self.context = context

    def append(self, question: str, answer: str) -> ChatRecord:
        principal = self.context.require_principal()
        record = ChatRecord(user_id=principal.id, question=question, answer=answer)
        try:
            self.db.add(record)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception(f"Error saving chat for user {principal.id}")
            raise RemoteFailure("Failed to save chat history") from exc
        self.db.refresh(record)
        return record

    def list(self, page: int = 1, page_size: int = 10) -> ChatPage:
        principal = self.context.require_principal()
        start, end = page_range(page, page_size)
        query = self.db.query(ChatRecord).filter(ChatRecord.user_id == principal.id)
        try:
            total_count = query.count()
            items = (
                query.order_by(ChatRecord.created_at.desc(), ChatRecord.id.desc())
                .offset(start)
                .limit(end - start + 1)
                .all()
            )
        except SQLAlchemyError as exc:
            logger.exception(f"Error fetching chat history for user {principal.id}")
            raise RemoteFailure("Failed to load chat history") from exc
        return ChatPage(items=items, total_count=total_count, page=page, page_size=page_size)
