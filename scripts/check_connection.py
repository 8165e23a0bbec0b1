"""
Check that the configured database is reachable and list its tables.

Run this script from the project root:
    python scripts/check_connection.py
"""

import os
import re
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import inspect

from sitecms.core.config import settings
from sitecms.core.database import Database


def mask_password(url: str) -> str:
    return re.sub(r":[^:@/]+@", ":****@", url)


def check_connection(database: Database) -> int:
    print(f"🔍 Testing connection to {mask_password(database.url)}")

    if not database.ping():
        print("❌ Database connection failed!")
        return 1

    print("✅ Database connection successful!")
    tables = inspect(database.engine).get_table_names()
    print("📚 Tables in database:")
    if not tables:
        print("   (No tables yet - database is empty)")
    for table in tables:
        print(f"   - {table}")
    return 0


if __name__ == "__main__":
    database = Database(settings.SQLALCHEMY_DATABASE_URI)
    try:
        exit_code = check_connection(database)
    finally:
        database.dispose()
    sys.exit(exit_code)
