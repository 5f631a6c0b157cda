import uuid
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


# --- Likes ---
class LikeToggleResponse(BaseModel):
    message: str
    liked: bool


class LikeCountResponse(BaseModel):
    count: int


class LikeStatusResponse(BaseModel):
    liked: bool


# --- Comments ---
class CommentCreate(BaseModel):
    text: Optional[str] = None


class CommentRead(BaseModel):
    id: uuid.UUID
    text: str
    author: str
    timestamp: datetime


class CommentListResponse(BaseModel):
    comments: List[CommentRead]


class CommentResponse(BaseModel):
    message: str
    comment: CommentRead
