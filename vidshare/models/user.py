import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from ..models.base import Base, UUIDChar

class User(Base):
    __tablename__ = "users"

    id = Column(UUIDChar, primary_key=True, default=uuid.uuid4)
    # Stored exactly as given; lookups are case-sensitive.
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, default="consumer", nullable=False) # "creator" or "consumer", advisory only
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    videos = relationship("Video", back_populates="owner")
