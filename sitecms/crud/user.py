"""
CRUD operations for User model.

Every write that includes a password goes through
security.prepare_password_for_write, so plaintext is never persisted.
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sitecms.core.security import prepare_password_for_write, verify_password
from sitecms.models.user import User


def get_by_id(db: Session, user_id: UUID) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.strip().lower()).first()


def create(db: Session, email: str, password: str) -> User:
    """
    Create a user with a freshly hashed password.

    Raises:
        sqlalchemy.exc.IntegrityError: If the email is already taken
    """
    user = User(
        email=email.strip().lower(),
        hashed_password=prepare_password_for_write(password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    return user


def update(db: Session, user: User, email: Optional[str] = None, password: Optional[str] = None) -> User:
    """
    Update email and/or password.

    Passing the currently stored hash back as password leaves it unchanged.
    """
    if email is not None:
        user.email = email.strip().lower()
    if password is not None:
        user.hashed_password = prepare_password_for_write(password, user.hashed_password)

    db.commit()
    db.refresh(user)

    return user


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    """
    Return the user if the credentials match, None otherwise.

    Unknown email and wrong password are indistinguishable to the caller.
    """
    user = get_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user
