from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from unfold_india.db.base import Base

PROFILE_FIELDS = ("full_name", "username", "gender", "email", "phone", "avatar_url")


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    full_name = Column(String(255), nullable=True)
    username = Column(String(64), nullable=True)
    gender = Column(String(32), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(32), nullable=True)
    avatar_url = Column(String(1024), nullable=True)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    user = relationship("User", back_populates="profile")
