"""
Create the admin account used to log into the site's admin panel.

Credentials come from ADMIN_EMAIL / ADMIN_PASSWORD. If the account already
exists nothing is changed.

Run this script from the project root:
    python scripts/create_admin.py

Exit codes: 0 created or already present, 1 on failure.
"""

import os
import sys

# Add project root to Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sitecms.core.config import settings
from sitecms.core.database import Database
from sitecms.core.security import MIN_PASSWORD_LENGTH
from sitecms.crud import user as user_crud
from sitecms.schemas.common import normalize_email


def create_admin(database: Database, email: str, password: str) -> int:
    """Create the admin user; returns the process exit code."""
    try:
        email = normalize_email(email)
    except ValueError as e:
        print(f"❌ Invalid ADMIN_EMAIL '{email}': {e}")
        return 1

    if len(password) < MIN_PASSWORD_LENGTH:
        print(f"❌ ADMIN_PASSWORD must be at least {MIN_PASSWORD_LENGTH} characters")
        return 1

    database.init_db()
    db = database.session()

    try:
        if user_crud.get_by_email(db, email):
            print(f"⚠️  Admin user with email \"{email}\" already exists!")
            print("   If you want to update the password, delete the existing user first.")
            return 0

        print(f"Creating admin user: {email}")
        user_crud.create(db, email, password)
        print("✅ Admin user created successfully!")
        return 0

    except Exception as e:
        db.rollback()
        print(f"❌ Error creating admin user: {e}")
        return 1

    finally:
        db.close()


if __name__ == "__main__":
    database = Database(settings.SQLALCHEMY_DATABASE_URI)
    if not database.ping():
        print("❌ Cannot connect to the database")
        sys.exit(1)
    try:
        exit_code = create_admin(database, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
    finally:
        database.dispose()
    sys.exit(exit_code)
