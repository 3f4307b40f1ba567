"""Authentication API endpoints and dependencies."""

import logging

__all__ = [
    "CurrentUser",
    "get_current_user",
    "get_optional_user",
    "router",
    "users_router",
]

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, EmailStr, Field
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from travelplanner.app.db.models.role import Role
from travelplanner.app.db.models.user import User
from travelplanner.app.db.session import get_session
from travelplanner.app.security import (
    AuthenticationError,
    create_access_token,
    hash_password,
    verify_access_token,
    verify_password,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["authentication"])
users_router = APIRouter(prefix="/api/users", tags=["users"])

DEFAULT_ROLE_TYPE = "authenticated"


# Pydantic models
class RoleInfo(BaseModel):
    """Role summary attached to user payloads."""
    id: int
    name: str
    type: str


class CurrentUser(BaseModel):
    """Current authenticated user context."""
    id: int
    username: str
    email: str
    role: RoleInfo | None = None


class RegisterRequest(BaseModel):
    """Registration payload."""
    username: str = Field(min_length=3, max_length=100)
    email: EmailStr
    password: str


class LoginRequest(BaseModel):
    """Login payload; identifier may be an email or a username."""
    identifier: str
    password: str


class AuthResponse(BaseModel):
    """Authentication response."""
    jwt: str
    user: CurrentUser


# Missing credentials are handled here so they surface as 401 rather than 403
bearer_scheme = HTTPBearer(auto_error=False)


def _to_current_user(user: User) -> CurrentUser:
    role = None
    if user.role is not None:
        role = RoleInfo(id=user.role.id, name=user.role.name, type=user.role.type)
    return CurrentUser(id=user.id, username=user.username, email=user.email, role=role)


def _resolve_user(token: str, db: Session) -> User:
    """Resolve a bearer token to a stored user.

    Raises:
        AuthenticationError: If the token is invalid or the user is gone
    """
    payload = verify_access_token(token)
    user = db.get(User, payload.user_id)
    if user is None:
        raise AuthenticationError("Invalid token: User not found")
    return user


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_session),
) -> CurrentUser:
    """Get current authenticated user from JWT token.

    Args:
        credentials: HTTP Authorization header with Bearer token
        db: Database session

    Returns:
        CurrentUser with id, username, email and role

    Raises:
        HTTPException: 401 if token is missing, invalid, or user not found
    """
    if not credentials or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided or invalid format",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user = _resolve_user(credentials.credentials, db)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )

    return _to_current_user(user)


def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_session),
) -> CurrentUser | None:
    """Like get_current_user, but anonymous or invalid tokens yield None."""
    if not credentials or not credentials.credentials:
        return None

    try:
        user = _resolve_user(credentials.credentials, db)
    except AuthenticationError as e:
        logger.info("optional_auth_rejected", extra={"reason": str(e)})
        return None

    return _to_current_user(user)


def get_default_role(db: Session) -> Role:
    """Return the role given to self-registered users, creating it if needed."""
    role = db.execute(
        select(Role).where(Role.type == DEFAULT_ROLE_TYPE)
    ).scalar_one_or_none()
    if role is None:
        role = Role(
            name="Authenticated",
            type=DEFAULT_ROLE_TYPE,
            description="Default role given to authenticated user.",
        )
        db.add(role)
        db.flush()
    return role


@router.post("/local/register", response_model=AuthResponse)
def register(
    request: RegisterRequest,
    db: Session = Depends(get_session),
) -> AuthResponse:
    """Create a new user account and return a JWT.

    Raises:
        HTTPException: 400 if email/username is taken or the password is rejected
    """
    existing = db.execute(
        select(User).where(
            or_(User.email == request.email.lower(), User.username == request.username)
        )
    ).scalar_one_or_none()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email or Username are already taken",
        )

    try:
        password_hash = hash_password(request.password)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    user = User(
        username=request.username,
        email=request.email.lower(),
        password_hash=password_hash,
        role=get_default_role(db),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email or Username are already taken",
        )
    db.refresh(user)

    logger.info("user_registered", extra={"user_id": user.id})
    return AuthResponse(jwt=create_access_token(user.id), user=_to_current_user(user))


@router.post("/local", response_model=AuthResponse)
def login(
    request: LoginRequest,
    db: Session = Depends(get_session),
) -> AuthResponse:
    """Authenticate by email or username and return a JWT with the user's role.

    Raises:
        HTTPException: 400 if the identifier or password is wrong
    """
    identifier = request.identifier.strip()
    user = db.execute(
        select(User).where(
            or_(User.email == identifier.lower(), User.username == identifier)
        )
    ).scalar_one_or_none()

    # Same message for unknown user and wrong password
    if user is None or not verify_password(request.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid identifier or password",
        )

    return AuthResponse(jwt=create_access_token(user.id), user=_to_current_user(user))


@users_router.get("/me", response_model=CurrentUser)
def get_current_user_info(
    current_user: CurrentUser = Depends(get_current_user),
) -> CurrentUser:
    """Get current user information, role included."""
    return current_user
