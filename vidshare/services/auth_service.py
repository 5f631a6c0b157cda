import logging
from typing import Optional, Tuple
from sqlalchemy.orm import Session

from ..core import security
from ..core.config import Settings
from ..core.exceptions import (
    Conflict, InvalidCredentials, NotFound, Unauthenticated, ValidationError,
)
from ..models.user import User
from ..schemas.token import TokenData
from ..schemas.user import ROLES, UserCreate, UserLogin
from . import user_service

logger = logging.getLogger(__name__)


class AuthService:
    """
    Issues and verifies stateless bearer tokens on top of the user store.
    """

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def signup(self, user_in: UserCreate) -> Tuple[str, User]:
        """Registers a user and returns (token, user)."""
        if not user_in.email or not user_in.password:
            raise ValidationError("Email and password are required")

        role = user_in.role or "consumer"
        if role not in ROLES:
            raise ValidationError(f"Role must be one of: {', '.join(ROLES)}")

        if user_service.get_user_by_email(self.db, email=user_in.email):
            raise Conflict("User already exists")

        hashed_password = security.get_password_hash(user_in.password, rounds=self.settings.BCRYPT_ROUNDS)
        user = user_service.create_user(
            self.db, email=user_in.email, hashed_password=hashed_password, role=role
        )
        return security.create_access_token(user, self.settings), user

    def signin(self, credentials: UserLogin) -> Tuple[str, User]:
        """
        Verifies credentials and returns (token, user). Unknown email and wrong
        password produce the same InvalidCredentials error.
        """
        if not credentials.email or not credentials.password:
            raise ValidationError("Email and password are required")

        user = user_service.get_user_by_email(self.db, email=credentials.email)
        if not user:
            raise InvalidCredentials()
        if not security.verify_password(credentials.password, user.hashed_password, rounds=self.settings.BCRYPT_ROUNDS):
            raise InvalidCredentials()

        logger.info("User %s signed in", user.id)
        return security.create_access_token(user, self.settings), user

    def verify(self, token: Optional[str]) -> TokenData:
        if not token:
            raise Unauthenticated()
        return security.decode_access_token(token, self.settings)

    def who_am_i(self, user_id: str) -> User:
        user = user_service.get_user_by_id(self.db, user_id)
        if not user:
            raise NotFound("User not found")
        return user
