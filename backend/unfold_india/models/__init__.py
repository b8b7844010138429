from unfold_india.models.user import User
from unfold_india.models.profile import Profile
from unfold_india.models.chat_record import ChatRecord

__all__ = [
    "User",
    "Profile",
    "ChatRecord",
]
