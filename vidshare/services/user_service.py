import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from ..core.exceptions import Conflict
from ..models.user import User
from ..utils.id_utils import normalize_id

logger = logging.getLogger(__name__)

def get_user_by_email(db: Session, email: str) -> User | None:
    """Exact, case-sensitive email lookup."""
    return db.query(User).filter(User.email == email).first()

def get_user_by_id(db: Session, user_id) -> User | None:
    return db.query(User).filter(User.id == normalize_id(user_id)).first()

def create_user(db: Session, email: str, hashed_password: str, role: str) -> User:
    """
    Persists a new user. The unique index on email is the final arbiter, so a
    concurrent signup with the same address still ends in Conflict.
    """
    db_user = User(email=email, hashed_password=hashed_password, role=role)
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise Conflict("User already exists") from e
    db.refresh(db_user)
    logger.info("Created user %s with role %s", db_user.id, role)
    return db_user
