import uuid
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


# --- Response Schemas ---
class VideoRead(BaseModel):
    id: uuid.UUID
    title: str
    description: str = ""
    genre: str = ""
    author: str = Field(..., description="Owner's email.")
    url: str = Field(..., description="Playback URL under the /uploads static mount.")
    thumbnail: Optional[str] = None
    views: int = 0
    likes: int = Field(0, description="Computed at read time, never stored.")
    comments: int = Field(0, description="Computed at read time, never stored.")
    upload_date: datetime = Field(..., alias="uploadDate")

    class Config:
        populate_by_name = True


class LikedVideoRead(VideoRead):
    liked_at: datetime = Field(..., alias="likedAt")


class UploadedVideoRead(VideoRead):
    filename: str


# --- Envelopes ---
class VideoListResponse(BaseModel):
    videos: List[VideoRead]


class LikedVideoListResponse(BaseModel):
    videos: List[LikedVideoRead]


class VideoResponse(BaseModel):
    video: VideoRead


class VideoUploadResponse(BaseModel):
    message: str
    video: UploadedVideoRead
