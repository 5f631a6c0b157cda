import uuid
from datetime import datetime
from sqlalchemy import DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import Base, UUIDChar

class Like(Base):
    __tablename__ = "likes"
    __table_args__ = (
        UniqueConstraint("video_id", "user_id", name="uq_likes_video_user"),
    )

    id: Mapped[uuid.UUID] = mapped_column(UUIDChar, primary_key=True, default=uuid.uuid4)
    video_id: Mapped[uuid.UUID] = mapped_column(UUIDChar, ForeignKey("videos.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id: Mapped[uuid.UUID] = mapped_column(UUIDChar, ForeignKey("users.id"), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    video = relationship("Video", back_populates="likes")
    user = relationship("User")
