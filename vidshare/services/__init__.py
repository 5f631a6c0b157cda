"""Service layer: exposes the service classes used by the routers."""
from .auth_service import AuthService
from .video_service import VideoService
from .interaction_service import InteractionService

__all__ = ['AuthService', 'VideoService', 'InteractionService']
