from datetime import datetime, timedelta, timezone
from functools import lru_cache

from jose import jwt, JWTError
from passlib.context import CryptContext
from pydantic import ValidationError as PydanticValidationError

from ..core.config import Settings
from ..core.exceptions import InvalidOrExpiredToken
from ..models.user import User
from ..schemas.token import TokenData

# --- Password Hashing ---
@lru_cache(maxsize=None)
def get_password_context(rounds: int) -> CryptContext:
    """Returns a bcrypt context for the given cost factor, built once per cost."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

def verify_password(plain_password: str, hashed_password: str, rounds: int = 10) -> bool:
    """Checks a plain password against its bcrypt hash."""
    return get_password_context(rounds).verify(plain_password, hashed_password)

def get_password_hash(password: str, rounds: int = 10) -> str:
    """Hashes a password with a fresh salt."""
    return get_password_context(rounds).hash(password)

# --- JWT Access Token Creation ---
def create_access_token(user: User, settings: Settings) -> str:
    """
    Issues a signed access token carrying the user's id, email and role.
    """
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "sub": str(user.id),
        "id": str(user.id),
        "email": user.email,
        "role": user.role,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def decode_access_token(token: str, settings: Settings) -> TokenData:
    """
    Verifies the signature and expiry of an access token and returns its claims.
    Raises InvalidOrExpiredToken for anything that does not check out.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        raise InvalidOrExpiredToken() from e

    try:
        return TokenData(
            id=payload.get("id") or payload.get("sub"),
            email=payload.get("email"),
            role=payload.get("role"),
        )
    except PydanticValidationError as e:
        raise InvalidOrExpiredToken() from e
