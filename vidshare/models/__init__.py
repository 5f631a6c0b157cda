"""
This file serves as a central point for importing all SQLAlchemy models.

By importing all models here, we ensure that they are all registered with the
SQLAlchemy Base metadata before any part of the application tries to use them.
"""
from .base import Base
from .user import User
from .video import Video
from .like import Like
from .comment import Comment


__all__ = [
    "Base",
    "User",
    "Video",
    "Like",
    "Comment",
]
