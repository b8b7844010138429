from fastapi import APIRouter, Depends

from unfold_india.api import deps
from unfold_india.schemas.chatbot import ChatbotGreeting, ChatbotMessageRequest, ChatTurn
from unfold_india.services.chatbot import ChatbotService

router = APIRouter()


@router.get("/greeting", response_model=ChatbotGreeting)
def chatbot_greeting(
    chatbot: ChatbotService = Depends(deps.get_chatbot_service),
) -> ChatbotGreeting:
    return ChatbotGreeting(text=chatbot.greeting())


@router.post("/messages", response_model=ChatTurn)
async def send_message(
    payload: ChatbotMessageRequest,
    chatbot: ChatbotService = Depends(deps.get_chatbot_service),
) -> ChatTurn:
    return await chatbot.reply(payload.message)
