"""
User model for admin authentication.

Passwords are never stored in plaintext; crud.user routes every write of
the password field through security.prepare_password_for_write.
"""

from sqlalchemy import Column, String
from sitecms.core.database import Base
from sitecms.models.base import TimestampedMixin


class User(TimestampedMixin, Base):
    __tablename__ = "users"

    # Stored trimmed and lowercased
    email = Column(String, unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
