"""
This file makes the 'schemas' directory a Python package and exposes key schemas
for easier importing.
"""
from .user import UserCreate, UserLogin, UserRead, UserEnvelope, ROLES
from .token import TokenData, AuthResponse
from .video import (
    VideoRead, LikedVideoRead, UploadedVideoRead,
    VideoListResponse, LikedVideoListResponse, VideoResponse, VideoUploadResponse,
)
from .interaction import (
    LikeToggleResponse, LikeCountResponse, LikeStatusResponse,
    CommentCreate, CommentRead, CommentListResponse, CommentResponse,
)
from .common import MessageResponse, HealthResponse
