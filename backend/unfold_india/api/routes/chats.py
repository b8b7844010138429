from fastapi import APIRouter, Depends, Query, status

from unfold_india.api import deps
from unfold_india.core.config import Settings, get_settings
from unfold_india.repositories.chat_repository import ChatRepository
from unfold_india.schemas.chat import ChatPagePublic, ChatRecordCreate, ChatRecordPublic

router = APIRouter()


@router.get("/", response_model=ChatPagePublic)
def list_chats(
    page: int = 1,
    page_size: int | None = Query(default=None, le=100),
    chats: ChatRepository = Depends(deps.get_chat_repository),
    settings: Settings = Depends(get_settings),
) -> ChatPagePublic:
    result = chats.list(
        page, page_size if page_size is not None else settings.chat_page_size
    )
    return ChatPagePublic(
        items=[ChatRecordPublic.model_validate(item) for item in result.items],
        total_count=result.total_count,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )


@router.post("/", response_model=ChatRecordPublic, status_code=status.HTTP_201_CREATED)
def create_chat(
    payload: ChatRecordCreate,
    chats: ChatRepository = Depends(deps.get_chat_repository),
) -> ChatRecordPublic:
    return chats.append(payload.question, payload.answer)
