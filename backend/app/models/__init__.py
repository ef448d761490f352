from .property import Property
from .user import EmailVerification, User, UserSession
from .comment import Comment
from .favorite import Favorite

__all__ = [
    "Property",
    "User",
    "EmailVerification",
    "UserSession",
    "Comment",
    "Favorite",
]
