import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import Base, UUIDChar

class Video(Base):
    __tablename__ = "videos"

    id: Mapped[uuid.UUID] = mapped_column(UUIDChar, primary_key=True, default=uuid.uuid4)

    # --- Core Attributes ---
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    genre: Mapped[str] = mapped_column(String, nullable=False, default="", server_default="")
    filename: Mapped[str] = mapped_column(String, nullable=False)
    thumbnail: Mapped[str] = mapped_column(String, nullable=True)

    # --- Ownership ---
    user_id: Mapped[uuid.UUID] = mapped_column(UUIDChar, ForeignKey("users.id"), nullable=False, index=True)

    # --- Counters ---
    # Only ever changed by an in-store "views = views + 1" update.
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    # --- Timestamps ---
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    # --- Relationships ---
    owner = relationship("User", back_populates="videos")
    likes = relationship("Like", back_populates="video", passive_deletes=True)
    comments = relationship("Comment", back_populates="video", passive_deletes=True)
