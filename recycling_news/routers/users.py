"""Users router for registration, login and the current-user lookup."""

import logging
import uuid
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from recycling_news.auth import get_current_user, hash_password, verify_password
from recycling_news.database import get_db
from recycling_news.models import User
from recycling_news.schemas import UserLogin, UserOut, UserRegister

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("/login", response_model=UserOut)
def login(user_data: UserLogin, db: Session = Depends(get_db)):
    """
    Check a username/password pair.

    No session or token is issued; the caller keeps the returned identity
    and sends its id back in the X-User-Id header.

    Returns:
        UserOut: The user without its password

    Raises:
        HTTPException: If credentials are invalid
    """
    logger.info(f"Login attempt for username: {user_data.username}")

    user = db.query(User).filter(User.username == user_data.username).first()
    if not user or not verify_password(user_data.password, user.password_hash):
        logger.warning(f"Login failed for username: {user_data.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )

    logger.info(f"User logged in successfully: {user.username}")
    return user


@router.post("/register", response_model=UserOut)
def register(user_data: UserRegister, db: Session = Depends(get_db)):
    """
    Register a new user with role "user".

    Raises:
        HTTPException: 409 if the username or email is already taken
    """
    logger.info(f"Registration attempt for username: {user_data.username}")

    new_user = User(
        id=uuid.uuid4().hex,
        username=user_data.username,
        email=user_data.email,
        password_hash=hash_password(user_data.password),
        role="user",
    )

    try:
        db.add(new_user)
        db.commit()
        db.refresh(new_user)
    except IntegrityError as e:
        logger.warning(f"Registration failed, duplicate username or email: {e.orig}")
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username or email already exists"
        )
    except SQLAlchemyError as e:
        logger.error(f"Registration failed for {user_data.username}: {e}")
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Registration failed"
        )

    logger.info(f"User registered successfully: {new_user.username}")
    return new_user


@router.get("/me", response_model=UserOut)
def read_current_user(current_user: User = Depends(get_current_user)):
    """Return the user named by the X-User-Id header."""
    return current_user
