from fastapi import APIRouter, Depends, status

from ..dependencies import get_auth_service, get_current_user
from ..schemas.token import AuthResponse, TokenData
from ..schemas.user import UserCreate, UserEnvelope, UserLogin, UserRead
from ..services.auth_service import AuthService

router = APIRouter(
    tags=["Authentication"]
)

# Plain `def` endpoints: FastAPI runs them in its thread pool, which keeps
# bcrypt hashing off the event loop.

@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    user_in: UserCreate,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user and return an access token.
    """
    token, user = auth_service.signup(user_in)
    return AuthResponse(
        message="User created successfully",
        token=token,
        user=UserRead.model_validate(user),
    )

@router.post("/signin", response_model=AuthResponse)
def signin(
    credentials: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Exchange email and password for an access token.
    """
    token, user = auth_service.signin(credentials)
    return AuthResponse(
        message="Signed in successfully",
        token=token,
        user=UserRead.model_validate(user),
    )

@router.get("/me", response_model=UserEnvelope)
def read_current_user(
    current_user: TokenData = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Get the details of the currently logged-in user.
    """
    user = auth_service.who_am_i(current_user.id)
    return UserEnvelope(user=UserRead.model_validate(user))
