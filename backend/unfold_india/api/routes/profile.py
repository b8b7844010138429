import logging
from pathlib import PurePath

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from unfold_india.api import deps
from unfold_india.core.exceptions import NotFound
from unfold_india.core.session_context import Principal
from unfold_india.repositories.profile_repository import ProfileRepository
from unfold_india.schemas.profile import AvatarUploadResponse, ProfileData, ProfilePublic

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/me", response_model=ProfilePublic)
def get_profile(
    principal: Principal = Depends(deps.get_current_principal),
    profiles: ProfileRepository = Depends(deps.get_profile_repository),
) -> ProfilePublic:
    try:
        return ProfilePublic.model_validate(profiles.fetch())
    except NotFound:
        # First visit: nothing saved yet
        return ProfilePublic(id=principal.id, **profiles.default_profile().model_dump())


@router.put("/me", response_model=ProfilePublic)
def save_profile(
    payload: ProfileData,
    profiles: ProfileRepository = Depends(deps.get_profile_repository),
) -> ProfilePublic:
    return ProfilePublic.model_validate(profiles.save(payload))


@router.post("/me/avatar", response_model=AvatarUploadResponse)
async def upload_avatar(
    file: UploadFile = File(...),
    principal: Principal = Depends(deps.get_current_principal),
    profiles: ProfileRepository = Depends(deps.get_profile_repository),
) -> AvatarUploadResponse:
    content = await file.read()
    extension = PurePath(file.filename or "").suffix
    url = profiles.upload_avatar(principal.id, content, extension)
    logger.info(f"Avatar uploaded for user {principal.id}")
    return AvatarUploadResponse(avatar_url=url)


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
def delete_account(
    principal: Principal = Depends(deps.get_current_principal),
    profiles: ProfileRepository = Depends(deps.get_profile_repository),
) -> Response:
    profiles.delete_account(principal.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
