from fastapi import APIRouter, Depends, status

from ..dependencies import get_current_user, get_interaction_service
from ..schemas.interaction import (
    CommentCreate, CommentListResponse, CommentResponse,
    LikeCountResponse, LikeStatusResponse, LikeToggleResponse,
)
from ..schemas.token import TokenData
from ..services.interaction_service import InteractionService

router = APIRouter()

# --- Likes ---

@router.post("/{video_id}/like", response_model=LikeToggleResponse)
def toggle_like(
    video_id: str,
    current_user: TokenData = Depends(get_current_user),
    service: InteractionService = Depends(get_interaction_service),
):
    """
    Like the video, or remove the like if the caller already liked it.
    """
    liked = service.toggle_like(video_id, current_user.id)
    return LikeToggleResponse(message="Video liked" if liked else "Video unliked", liked=liked)

@router.get("/{video_id}/likes", response_model=LikeCountResponse)
def get_like_count(video_id: str, service: InteractionService = Depends(get_interaction_service)):
    return LikeCountResponse(count=service.like_count(video_id))

@router.get("/{video_id}/likes/me", response_model=LikeStatusResponse)
def get_my_like(
    video_id: str,
    current_user: TokenData = Depends(get_current_user),
    service: InteractionService = Depends(get_interaction_service),
):
    return LikeStatusResponse(liked=service.has_liked(video_id, current_user.id))

# --- Comments ---

@router.get("/{video_id}/comments", response_model=CommentListResponse)
def list_comments(video_id: str, service: InteractionService = Depends(get_interaction_service)):
    """Comments in posting order (oldest first)."""
    return CommentListResponse(comments=service.list_comments(video_id))

@router.post("/{video_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def add_comment(
    video_id: str,
    comment_in: CommentCreate,
    current_user: TokenData = Depends(get_current_user),
    service: InteractionService = Depends(get_interaction_service),
):
    comment = service.add_comment(video_id, author=current_user, text=comment_in.text)
    return CommentResponse(message="Comment added successfully", comment=comment)
