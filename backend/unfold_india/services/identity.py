"""
Identity provider: accounts, credentials and bearer tokens.

Access and refresh tokens carry the user's ``token_version``; bumping the
version on sign-out revokes every token issued before it.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from unfold_india.core.exceptions import RemoteFailure, Unauthenticated, ValidationError
from unfold_india.core.security import (
    ACCESS_TOKEN,
    REFRESH_TOKEN,
    create_access_token,
    create_refresh_token,
    decode_token,
    get_password_hash,
    verify_password,
)
from unfold_india.core.session_context import Principal, SessionContext
from unfold_india.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthSession:
    principal: Principal
    access_token: str
    refresh_token: str


class IdentityProvider:
    def __init__(self, db: Session):
        self.db = db

    def sign_up(self, email: str, password: str) -> AuthSession:
        email = email.strip().lower()
        if self.db.query(User).filter(User.email == email).first():
            raise ValidationError("Email already registered", field="email")
        user = User(email=email, hashed_password=get_password_hash(password))
        self.db.add(user)
        self._commit("sign up")
        self.db.refresh(user)
        logger.info(f"User registered: {user.id}")
        return self._issue(user)

    def sign_in(self, email: str, password: str) -> AuthSession:
        user = self.db.query(User).filter(User.email == email.strip().lower()).first()
        if not user or not verify_password(password, user.hashed_password):
            logger.warning(f"Failed sign-in for {email}")
            raise Unauthenticated("Incorrect email or password")
        return self._issue(user)

    def refresh(self, refresh_token: str) -> AuthSession:
        user = self._user_from_token(refresh_token, REFRESH_TOKEN)
        if user is None:
            raise Unauthenticated("Invalid refresh token")
        return self._issue(user)

    def get_current_user(self, access_token: str | None) -> Principal | None:
        """Return the token's principal, or None when absent, invalid or revoked."""
        if not access_token:
            return None
        user = self._user_from_token(access_token, ACCESS_TOKEN)
        if user is None:
            return None
        return Principal(id=user.id, email=user.email)

    def resolve_session(self, access_token: str | None) -> SessionContext:
        context = SessionContext()
        context.resolve(self.get_current_user(access_token))
        return context

    def sign_out(self, principal_id: str) -> None:
        user = self.db.get(User, principal_id)
        if user is None:
            return
        user.token_version = (user.token_version or 0) + 1
        self._commit("sign out")
        logger.info(f"Tokens revoked for user {principal_id}")

    def update_password(self, principal_id: str, new_password: str) -> None:
        user = self.db.get(User, principal_id)
        if user is None:
            raise Unauthenticated("User not found")
        user.hashed_password = get_password_hash(new_password)
        self._commit("password update")
        logger.info(f"Password updated for user {principal_id}")

    def delete_user(self, principal_id: str, commit: bool = True) -> None:
        """Delete the identity row; with ``commit=False`` the caller owns the transaction."""
        deleted = (
            self.db.query(User)
            .filter(User.id == principal_id)
            .delete(synchronize_session=False)
        )
        if not deleted:
            logger.warning(f"Identity not found for delete: user_id={principal_id}")
        if commit:
            self._commit("delete user")

    def _user_from_token(self, token: str, expected_type: str) -> User | None:
        try:
            data = decode_token(token)
            if data.get("type") != expected_type:
                raise ValueError(f"Expected {expected_type} token")
            user_id = str(data["sub"])
            version = int(data.get("ver", 0))
        except (ValueError, KeyError, TypeError) as exc:
            logger.debug(f"Rejected {expected_type} token: {exc}")
            return None
        user = self.db.get(User, user_id)
        if user is None or (user.token_version or 0) != version:
            return None
        return user

    def _issue(self, user: User) -> AuthSession:
        version = user.token_version or 0
        return AuthSession(
            principal=Principal(id=user.id, email=user.email),
            access_token=create_access_token(user.id, version),
            refresh_token=create_refresh_token(user.id, version),
        )

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception(f"Database error during {action}")
            raise RemoteFailure(f"Failed to complete {action}") from exc
