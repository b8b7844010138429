from datetime import datetime, timezone
import math

from pydantic import BaseModel, Field, computed_field


def relative_date_label(value: datetime, now: datetime | None = None) -> str:
    """Label a timestamp the way the chat history screen shows it."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    diff_days = math.ceil(abs((now - value).total_seconds()) / 86400)
    if diff_days == 0 or value.date() == now.date():
        return "Today"
    if diff_days == 1:
        return "Yesterday"
    if diff_days <= 7:
        return f"{diff_days} days ago"
    return value.date().isoformat()


class ChatRecordCreate(BaseModel):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)


class ChatRecordPublic(BaseModel):
    id: int
    user_id: str
    question: str
    answer: str
    created_at: datetime

    class Config:
        from_attributes = True

    @computed_field
    @property
    def created_label(self) -> str:
        return relative_date_label(self.created_at)


class ChatPagePublic(BaseModel):
    items: list[ChatRecordPublic]
    total_count: int
    page: int
    page_size: int
    total_pages: int
