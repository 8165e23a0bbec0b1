"""
Authentication endpoints for admin registration and login.

Login is a stateless credential check: no token or cookie is issued, the
frontend keeps its own session.

- POST /register: Create new user account
- POST /login: Check email/password
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sitecms.core.database import get_db
from sitecms.core.errors import AuthenticationFailed, Conflict
from sitecms.crud import user as user_crud
from sitecms.schemas.user import UserAuthResponse, UserLoginRequest, UserPublic, UserRegisterRequest

router = APIRouter(tags=["Authentication"])
logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "User with this email already exists"


@router.post("/register", status_code=201, response_model=UserAuthResponse)
def register(request: UserRegisterRequest, db: Session = Depends(get_db)):
    """
    Register a new user account.

    The password is stored only as a salted bcrypt hash. The response never
    contains the password or the hash.
    """
    # Check if email already exists
    if user_crud.get_by_email(db, request.email):
        raise Conflict(DUPLICATE_EMAIL_MESSAGE)

    try:
        new_user = user_crud.create(db, request.email, request.password)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        db.rollback()
        raise Conflict(DUPLICATE_EMAIL_MESSAGE)

    logger.info(f"New user registered: {new_user.email}")

    return UserAuthResponse(
        message="User registered successfully",
        user=UserPublic.model_validate(new_user)
    )


@router.post("/login", response_model=UserAuthResponse)
def login(request: UserLoginRequest, db: Session = Depends(get_db)):
    """
    Check credentials.

    Unknown email and wrong password produce the same 401 response.
    """
    user = user_crud.authenticate(db, request.email, request.password)
    if not user:
        logger.info("Failed login attempt")
        raise AuthenticationFailed()

    logger.info(f"User logged in: {user.email}")

    return UserAuthResponse(
        message="Login successful",
        user=UserPublic.model_validate(user)
    )
