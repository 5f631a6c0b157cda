from typing import Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from .core.config import Settings
from .core.db import get_db
from .core.media_storage import MediaStore, get_media_store
from .schemas.token import TokenData
from .services import AuthService, InteractionService, VideoService

# Missing or non-bearer headers yield None so the auth service can answer 401 itself.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/signin", auto_error=False)

# --- Service Dependencies ---

def get_settings(request: Request) -> Settings:
    """Dependency to get the settings the application was built with."""
    return request.app.state.settings

def get_auth_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(db=db, settings=settings)

def get_video_service(
    db: Session = Depends(get_db),
    media_store: MediaStore = Depends(get_media_store),
) -> VideoService:
    """Dependency to get an instance of VideoService."""
    return VideoService(db=db, media_store=media_store)

def get_interaction_service(db: Session = Depends(get_db)) -> InteractionService:
    """Dependency to get an instance of InteractionService."""
    return InteractionService(db=db)

# --- Authentication Dependencies ---

def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenData:
    """
    Dependency that verifies the bearer token and returns its claims.
    Raises Unauthenticated (401) without a token and InvalidOrExpiredToken (403)
    for a bad or expired one.
    """
    return auth_service.verify(token)
