"""
Profile repository.

One ``profiles`` row per principal, avatar uploads to the object store,
and the account operations that hang off the profile screen.
"""

import logging
import mimetypes
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from unfold_india.core.exceptions import (
    NotFound,
    RemoteFailure,
    Unauthenticated,
    ValidationError,
)
from unfold_india.core.session_context import SessionContext
from unfold_india.models.chat_record import ChatRecord
from unfold_india.models.profile import PROFILE_FIELDS, Profile
from unfold_india.schemas.profile import ProfileData
from unfold_india.services.identity import IdentityProvider
from unfold_india.storage.base import ObjectStore

logger = logging.getLogger(__name__)

AVATAR_BUCKET = "avatars"
MIN_PASSWORD_LENGTH = 6


class ProfileRepository:
    def __init__(
        self,
        db: Session,
        context: SessionContext,
        identity: IdentityProvider,
        object_store: ObjectStore | None = None,
        avatar_bucket: str = AVATAR_BUCKET,
    ):
        self.db = db
        self.context = context
        self.identity = identity
        self.object_store = object_store
        self.avatar_bucket = avatar_bucket

    def fetch(self) -> Profile:
        """Return the principal's profile; raises NotFound when none was saved yet."""
        principal = self.context.require_principal()
        try:
            profile = self.db.get(Profile, principal.id)
        except SQLAlchemyError as exc:
            logger.exception(f"Error fetching profile for user {principal.id}")
            raise RemoteFailure("Failed to load profile data") from exc
        if profile is None:
            raise NotFound("Profile not found", {"user_id": principal.id})
        return profile

    def default_profile(self) -> ProfileData:
        principal = self.context.require_principal()
        return ProfileData(email=principal.email)

    def save(self, data: ProfileData) -> Profile:
        """Insert or fully replace the principal's profile."""
        principal = self.context.require_principal()
        values = data.model_dump(include=set(PROFILE_FIELDS))
        try:
            profile = self.db.get(Profile, principal.id)
            if profile is None:
                profile = Profile(id=principal.id)
                self.db.add(profile)
            for field in PROFILE_FIELDS:
                setattr(profile, field, values.get(field))
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception(f"Error saving profile for user {principal.id}")
            raise RemoteFailure("Failed to save profile") from exc
        self.db.refresh(profile)
        logger.info(f"Profile saved: {principal.id}")
        return profile

    def upload_avatar(self, principal_id: str, content: bytes, file_extension: str) -> str:
        """Store an avatar image and return its public URL.

        Earlier avatars of the principal stay in the bucket.
        """
        principal = self.context.require_principal()
        if principal.id != principal_id:
            raise Unauthenticated("Cannot upload an avatar for another user")
        if not content:
            raise ValidationError("Avatar file is empty", field="file")
        if self.object_store is None:
            raise RemoteFailure("No object store configured")
        extension = file_extension.lstrip(".").lower() or "bin"
        if not extension.isalnum():
            raise ValidationError("Invalid file extension", field="file")
        path = f"{principal_id}/{uuid.uuid4().hex}.{extension}"
        content_type = mimetypes.guess_type(path)[0] or "application/octet-stream"
        self.object_store.upload(self.avatar_bucket, path, content, content_type=content_type)
        return self.object_store.public_url(self.avatar_bucket, path)

    def change_password(self, new_password: str, confirmation: str) -> None:
        if new_password != confirmation:
            raise ValidationError("Passwords do not match.", field="confirm_password")
        if len(new_password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                "Password must be at least 6 characters long.", field="new_password"
            )
        principal = self.context.require_principal()
        self.identity.update_password(principal.id, new_password)

    def delete_account(self, principal_id: str) -> None:
        """Remove chats, profile and identity in one transaction, then sign out."""
        principal = self.context.require_principal()
        if principal.id != principal_id:
            raise Unauthenticated("Cannot delete another user's account")
        try:
            self.db.query(ChatRecord).filter(ChatRecord.user_id == principal_id).delete(
                synchronize_session=False
            )
            self.db.query(Profile).filter(Profile.id == principal_id).delete(
                synchronize_session=False
            )
            self.identity.delete_user(principal_id, commit=False)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception(f"Error deleting account {principal_id}")
            raise RemoteFailure("Failed to delete account. Please try again.") from exc
        logger.info(f"Account deleted: {principal_id}")
        self.context.sign_out()
