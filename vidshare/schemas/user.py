import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

ROLES = ("creator", "consumer")

# Properties to receive via API on signup.
# Fields are optional here so the service can answer with its own 400 message.
class UserCreate(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = "consumer"

# Properties to receive via API on signin
class UserLogin(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

# Properties to return to client (never the hash)
class UserRead(BaseModel):
    id: uuid.UUID
    email: str
    role: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class UserEnvelope(BaseModel):
    user: UserRead
