import logging
from typing import List, Optional

from fastapi import UploadFile
from sqlalchemy import and_, func, update
from sqlalchemy.orm import Session, Query

from ..core.exceptions import NotFound, UnsupportedMediaType, ValidationError
from ..core.media_storage import MediaStore
from ..models.comment import Comment
from ..models.like import Like
from ..models.user import User
from ..models.video import Video
from ..schemas.token import TokenData
from ..schemas.video import LikedVideoRead, UploadedVideoRead, VideoRead
from ..utils.file_utils import is_video_content_type
from ..utils.id_utils import normalize_id

logger = logging.getLogger(__name__)


class VideoService:
    def __init__(self, db: Session, media_store: MediaStore):
        self.db = db
        self.media_store = media_store

    # --- Queries ---

    def _summary_query(self, *extra_columns) -> Query:
        """
        Videos joined with their owner's email and like/comment counts.

        Counts come from grouped subqueries over the likes and comments tables,
        so they are always derived from the rows themselves.
        """
        like_counts = (
            self.db.query(Like.video_id.label("video_id"), func.count(Like.id).label("like_count"))
            .group_by(Like.video_id)
            .subquery()
        )
        comment_counts = (
            self.db.query(Comment.video_id.label("video_id"), func.count(Comment.id).label("comment_count"))
            .group_by(Comment.video_id)
            .subquery()
        )
        return (
            self.db.query(
                Video,
                User.email.label("author"),
                func.coalesce(like_counts.c.like_count, 0).label("likes"),
                func.coalesce(comment_counts.c.comment_count, 0).label("comments"),
                *extra_columns,
            )
            .join(User, Video.user_id == User.id)
            .outerjoin(like_counts, like_counts.c.video_id == Video.id)
            .outerjoin(comment_counts, comment_counts.c.video_id == Video.id)
        )

    @staticmethod
    def _to_read(row, schema=VideoRead, **extra):
        video = row.Video
        return schema(
            id=video.id,
            title=video.title,
            description=video.description or "",
            genre=video.genre or "",
            author=row.author,
            url=MediaStore.url_for(video.filename),
            thumbnail=video.thumbnail,
            views=video.views,
            likes=row.likes,
            comments=row.comments,
            upload_date=video.created_at,
            **extra,
        )

    def list_videos(self) -> List[VideoRead]:
        """All videos, newest first."""
        rows = self._summary_query().order_by(Video.created_at.desc(), Video.id.desc()).all()
        return [self._to_read(row) for row in rows]

    def list_by_owner(self, user_id: str) -> List[VideoRead]:
        rows = (
            self._summary_query()
            .filter(Video.user_id == normalize_id(user_id))
            .order_by(Video.created_at.desc(), Video.id.desc())
            .all()
        )
        return [self._to_read(row) for row in rows]

    def list_liked_by(self, user_id: str) -> List[LikedVideoRead]:
        """Videos the user has liked, most recently liked first."""
        user_id = normalize_id(user_id)
        rows = (
            self._summary_query(Like.created_at.label("liked_at"))
            .join(Like, and_(Like.video_id == Video.id, Like.user_id == user_id))
            .order_by(Like.created_at.desc(), Like.id.desc())
            .all()
        )
        return [self._to_read(row, LikedVideoRead, liked_at=row.liked_at) for row in rows]

    def get_by_id(self, video_id: str) -> VideoRead:
        """
        Returns a video and counts the call as one view.

        The increment is a single "views = views + 1" statement in the store
        whose RETURNING value is reported back, so concurrent viewers never
        lose updates and each caller sees its own post-increment count.
        """
        video_id = normalize_id(video_id)
        stmt = (
            update(Video)
            .where(Video.id == video_id)
            .values(views=Video.views + 1)
            .returning(Video.views)
            .execution_options(synchronize_session=False)
        )
        try:
            views = self.db.execute(stmt).scalar_one_or_none()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        if views is None:
            raise NotFound("Video not found")

        row = self._summary_query().filter(Video.id == video_id).first()
        if row is None:
            # Deleted between the increment and the read.
            raise NotFound("Video not found")

        video = self._to_read(row)
        video.views = views
        return video

    # --- Mutations ---

    async def upload(
        self,
        owner: TokenData,
        file: Optional[UploadFile],
        title: Optional[str],
        description: Optional[str] = None,
        genre: Optional[str] = None,
        thumbnail: Optional[str] = None,
    ) -> UploadedVideoRead:
        """
        Validates the upload, streams the file into the media store and
        records its metadata. Nothing is written unless validation passes.
        """
        if file is None or not file.filename:
            raise ValidationError("Video file is required")
        if not is_video_content_type(file.content_type):
            raise UnsupportedMediaType()
        if not title or not title.strip():
            raise ValidationError("Title is required")

        filename = await self.media_store.save(file)

        db_video = Video(
            title=title.strip(),
            description=description or "",
            genre=genre or "",
            filename=filename,
            thumbnail=thumbnail or None,
            user_id=normalize_id(owner.id),
            views=0,
        )
        self.db.add(db_video)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            self.media_store.delete(filename)
            raise
        self.db.refresh(db_video)

        logger.info("User %s uploaded video %s (%s)", owner.id, db_video.id, filename)
        return UploadedVideoRead(
            id=db_video.id,
            title=db_video.title,
            description=db_video.description,
            genre=db_video.genre,
            author=owner.email,
            url=MediaStore.url_for(filename),
            thumbnail=db_video.thumbnail,
            views=db_video.views,
            likes=0,
            comments=0,
            upload_date=db_video.created_at,
            filename=filename,
        )

    def delete(self, video_id: str, requester_id: str) -> None:
        """
        Deletes a video owned by the requester together with its likes and
        comments, then removes the backing file.

        A missing video and someone else's video both raise the same NotFound.
        File removal is best-effort and never undoes the metadata deletion.
        """
        video_id = normalize_id(video_id)
        video = (
            self.db.query(Video)
            .filter(Video.id == video_id, Video.user_id == normalize_id(requester_id))
            .first()
        )
        if not video:
            raise NotFound("Video not found or unauthorized")

        filename = video.filename
        try:
            self.db.query(Like).filter(Like.video_id == video_id).delete(synchronize_session=False)
            self.db.query(Comment).filter(Comment.video_id == video_id).delete(synchronize_session=False)
            self.db.delete(video)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        if not self.media_store.delete(filename):
            logger.warning("Video %s deleted but its file %s was not removed", video_id, filename)
        logger.info("User %s deleted video %s", requester_id, video_id)
