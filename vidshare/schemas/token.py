from pydantic import BaseModel

from .user import UserRead


class TokenData(BaseModel):
    """Claims carried by a verified access token."""
    id: str
    email: str
    role: str


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserRead
