from fastapi import APIRouter, Depends

from unfold_india.api import deps
from unfold_india.api.routes import (
    auth,
    chatbot,
    chats,
    directions,
    home,
    profile,
    translator,
)

protected = [Depends(deps.get_current_principal)]

api_router = APIRouter()
api_router.include_router(home.router, tags=["home"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(chatbot.router, prefix="/chatbot", tags=["chatbot"], dependencies=protected)
api_router.include_router(directions.router, prefix="/routes", tags=["routes"], dependencies=protected)
api_router.include_router(translator.router, prefix="/translator", tags=["translator"], dependencies=protected)
api_router.include_router(chats.router, prefix="/chats", tags=["chats"], dependencies=protected)
api_router.include_router(profile.router, prefix="/profile", tags=["profile"], dependencies=protected)
