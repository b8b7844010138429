from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr

Gender = Literal["male", "female", "other", "prefer-not-to-say"]


class ProfileData(BaseModel):
    """Every mutable profile field; a save replaces all of them."""

    full_name: str | None = None
    username: str | None = None
    gender: Gender | None = None
    email: EmailStr | None = None
    phone: str | None = None
    avatar_url: str | None = None

    class Config:
        from_attributes = True


class ProfilePublic(ProfileData):
    id: str
    updated_at: datetime | None = None


class AvatarUploadResponse(BaseModel):
    avatar_url: str
