from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from unfold_india.core.config import Settings, get_settings
from unfold_india.core.session_context import Principal, SessionContext
from unfold_india.db.session import get_db
from unfold_india.repositories.chat_repository import ChatRepository
from unfold_india.repositories.profile_repository import ProfileRepository
from unfold_india.services.chatbot import ChatbotService
from unfold_india.services.identity import IdentityProvider
from unfold_india.services.responders import ResponseSource, get_response_source
from unfold_india.services.route_planner import RoutePlanner
from unfold_india.services.translator import Translator
from unfold_india.storage.base import ObjectStore
from unfold_india.storage.factory import get_object_store

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


def get_identity_provider(db: Session = Depends(get_db)) -> IdentityProvider:
    return IdentityProvider(db)


def get_session_context(
    token: str | None = Depends(oauth2_scheme),
    identity: IdentityProvider = Depends(get_identity_provider),
) -> SessionContext:
    return identity.resolve_session(token)


def get_current_principal(
    context: SessionContext = Depends(get_session_context),
) -> Principal:
    if not context.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return context.principal


def get_chat_repository(
    db: Session = Depends(get_db),
    context: SessionContext = Depends(get_session_context),
) -> ChatRepository:
    return ChatRepository(db, context)


def get_profile_repository(
    db: Session = Depends(get_db),
    context: SessionContext = Depends(get_session_context),
    identity: IdentityProvider = Depends(get_identity_provider),
    object_store: ObjectStore = Depends(get_object_store),
    settings: Settings = Depends(get_settings),
) -> ProfileRepository:
    return ProfileRepository(
        db,
        context,
        identity,
        object_store=object_store,
        avatar_bucket=settings.avatar_bucket,
    )


def get_chatbot_service(
    responder: ResponseSource = Depends(get_response_source),
    chats: ChatRepository = Depends(get_chat_repository),
    settings: Settings = Depends(get_settings),
) -> ChatbotService:
    return ChatbotService(responder, chats, reply_delay=settings.chat_reply_delay_seconds)


def get_route_planner(settings: Settings = Depends(get_settings)) -> RoutePlanner:
    return RoutePlanner(search_delay=settings.route_search_delay_seconds)


def get_translator(settings: Settings = Depends(get_settings)) -> Translator:
    return Translator(translation_delay=settings.translation_delay_seconds)
