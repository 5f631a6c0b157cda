import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.exceptions import NotFound, ValidationError
from ..models.comment import Comment
from ..models.like import Like
from ..models.user import User
from ..models.video import Video
from ..schemas.interaction import CommentRead
from ..schemas.token import TokenData
from ..utils.id_utils import normalize_id

logger = logging.getLogger(__name__)


class InteractionService:
    """Likes and comments attached to videos."""

    def __init__(self, db: Session):
        self.db = db

    def _ensure_video_exists(self, video_id: str) -> None:
        if self.db.query(Video.id).filter(Video.id == video_id).first() is None:
            raise NotFound("Video not found")

    # --- Likes ---

    def toggle_like(self, video_id: str, user_id: str) -> bool:
        """
        Flips the caller's like on a video and returns the new state.

        The unlike path is a single DELETE; the like path is a single INSERT
        guarded by the (video_id, user_id) unique constraint, so two racing
        requests cannot produce a duplicate row.
        """
        video_id, user_id = normalize_id(video_id), normalize_id(user_id)
        self._ensure_video_exists(video_id)

        try:
            removed = (
                self.db.query(Like)
                .filter(Like.video_id == video_id, Like.user_id == user_id)
                .delete(synchronize_session=False)
            )
            if removed:
                self.db.commit()
                logger.info("User %s unliked video %s", user_id, video_id)
                return False
        except Exception:
            self.db.rollback()
            raise

        return self._insert_like(video_id, user_id)

    def _insert_like(self, video_id: str, user_id: str) -> bool:
        self.db.add(Like(video_id=video_id, user_id=user_id))
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # A concurrent request inserted the same like first.
            if self.has_liked(video_id, user_id):
                logger.info("User %s already liked video %s", user_id, video_id)
                return True
            raise
        except Exception:
            self.db.rollback()
            raise

        logger.info("User %s liked video %s", user_id, video_id)
        return True

    def like_count(self, video_id: str) -> int:
        """Number of likes on a video; 0 for unknown videos."""
        return (
            self.db.query(func.count(Like.id))
            .filter(Like.video_id == normalize_id(video_id))
            .scalar()
            or 0
        )

    def has_liked(self, video_id: str, user_id: str) -> bool:
        like = (
            self.db.query(Like.id)
            .filter(Like.video_id == normalize_id(video_id), Like.user_id == normalize_id(user_id))
            .first()
        )
        return like is not None

    # --- Comments ---

    def add_comment(self, video_id: str, author: TokenData, text: Optional[str]) -> CommentRead:
        """
        Appends a comment with the trimmed text. The author shown in the
        response is the caller's identity at the time of posting.
        """
        trimmed = (text or "").strip()
        if not trimmed:
            raise ValidationError("Comment text is required")

        video_id = normalize_id(video_id)
        self._ensure_video_exists(video_id)

        comment = Comment(video_id=video_id, user_id=normalize_id(author.id), text=trimmed)
        self.db.add(comment)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(comment)

        logger.info("User %s commented on video %s", author.id, video_id)
        return CommentRead(
            id=comment.id,
            text=comment.text,
            author=author.email,
            timestamp=comment.created_at,
        )

    def list_comments(self, video_id: str) -> List[CommentRead]:
        """Comments on a video, oldest first."""
        rows = (
            self.db.query(Comment, User.email.label("author"))
            .join(User, Comment.user_id == User.id)
            .filter(Comment.video_id == normalize_id(video_id))
            .order_by(Comment.created_at.asc(), Comment.id.asc())
            .all()
        )
        return [
            CommentRead(
                id=row.Comment.id,
                text=row.Comment.text,
                author=row.author,
                timestamp=row.Comment.created_at,
            )
            for row in rows
        ]
