import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from unfold_india.db.base import Base

CASCADE_ALL_DELETE_ORPHAN = "all, delete-orphan"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """Identity record; one per principal."""

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), nullable=False)
    hashed_password = Column(String(255), nullable=False)
    # Bumped to revoke every token issued before it
    token_version = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    profile = relationship(
        "Profile",
        back_populates="user",
        uselist=False,
        cascade=CASCADE_ALL_DELETE_ORPHAN,
        passive_deletes=True,
    )
    chats = relationship(
        "ChatRecord",
        back_populates="user",
        cascade=CASCADE_ALL_DELETE_ORPHAN,
        passive_deletes=True,
    )
