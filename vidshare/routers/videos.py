from typing import Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from ..dependencies import get_current_user, get_video_service
from ..schemas.common import MessageResponse
from ..schemas.token import TokenData
from ..schemas.video import VideoListResponse, VideoResponse, VideoUploadResponse
from ..services.video_service import VideoService

router = APIRouter()


@router.post("", response_model=VideoUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_video(
    video: Optional[UploadFile] = File(None, description="The video file (video/* content type)."),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    genre: Optional[str] = Form(None),
    thumbnail: Optional[str] = Form(None, description="Free-form thumbnail string (color or path)."),
    current_user: TokenData = Depends(get_current_user),
    service: VideoService = Depends(get_video_service),
):
    """
    Upload a video file with its metadata.
    """
    uploaded = await service.upload(
        owner=current_user,
        file=video,
        title=title,
        description=description,
        genre=genre,
        thumbnail=thumbnail,
    )
    return VideoUploadResponse(message="Video uploaded successfully", video=uploaded)


@router.get("", response_model=VideoListResponse)
def list_videos(service: VideoService = Depends(get_video_service)):
    """All videos, newest first, with computed like and comment counts."""
    return VideoListResponse(videos=service.list_videos())


@router.get("/{video_id}", response_model=VideoResponse)
def get_video(video_id: str, service: VideoService = Depends(get_video_service)):
    """
    Fetch a single video. Every call counts as one view.
    """
    return VideoResponse(video=service.get_by_id(video_id))


@router.delete("/{video_id}", response_model=MessageResponse)
def delete_video(
    video_id: str,
    current_user: TokenData = Depends(get_current_user),
    service: VideoService = Depends(get_video_service),
):
    service.delete(video_id, requester_id=current_user.id)
    return MessageResponse(message="Video deleted successfully")
