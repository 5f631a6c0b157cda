from fastapi import APIRouter, Depends

from ..dependencies import get_video_service
from ..schemas.video import LikedVideoListResponse, VideoListResponse
from ..services.video_service import VideoService

router = APIRouter()


@router.get("/{user_id}/videos", response_model=VideoListResponse)
def list_user_videos(user_id: str, service: VideoService = Depends(get_video_service)):
    """
    Videos uploaded by a user, newest first.
    """
    return VideoListResponse(videos=service.list_by_owner(user_id))


@router.get("/{user_id}/liked-videos", response_model=LikedVideoListResponse)
def list_liked_videos(user_id: str, service: VideoService = Depends(get_video_service)):
    """
    Videos a user has liked, most recently liked first, each with `likedAt`.
    """
    return LikedVideoListResponse(videos=service.list_liked_by(user_id))
