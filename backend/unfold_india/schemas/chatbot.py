from datetime import datetime

from pydantic import BaseModel, Field


class ChatbotMessageRequest(BaseModel):
    message: str = Field(max_length=4000)


class ChatTurn(BaseModel):
    question: str
    answer: str
    saved: bool
    created_at: datetime
    notice: str | None = None


class ChatbotGreeting(BaseModel):
    text: str
