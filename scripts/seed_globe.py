"""
Seed the images shown on the careers page globe (category "career-globe").

Skipped when the category already has images.

Run this script from the project root:
    python scripts/seed_globe.py
"""

import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sitecms.core.config import settings
from sitecms.core.database import Database
from sitecms.models.image import Image, ImageCategory

GLOBE_IMAGES = [
    {"src": "https://images.unsplash.com/photo-1755331039789-7e5680e26e8f?q=80&w=774&auto=format&fit=crop", "alt": "Abstract art"},
    {"src": "https://images.unsplash.com/photo-1755569309049-98410b94f66d?q=80&w=772&auto=format&fit=crop", "alt": "Modern sculpture"},
    {"src": "https://images.unsplash.com/photo-1755497595318-7e5e3523854f?q=80&w=774&auto=format&fit=crop", "alt": "Digital artwork"},
    {"src": "https://images.unsplash.com/photo-1755353985163-c2a0fe5ac3d8?q=80&w=774&auto=format&fit=crop", "alt": "Contemporary art"},
    {"src": "https://images.unsplash.com/photo-1745965976680-d00be7dc0377?q=80&w=774&auto=format&fit=crop", "alt": "Geometric pattern"},
    {"src": "https://images.unsplash.com/photo-1752588975228-21f44630bb3c?q=80&w=774&auto=format&fit=crop", "alt": "Textured surface"},
]


def seed_globe(database: Database) -> int:
    database.init_db()
    db = database.session()
    category = ImageCategory.CAREER_GLOBE.value

    try:
        count = db.query(Image).filter(Image.category == category).count()
        if count > 0:
            print(f"Found {count} existing images in '{category}'. Skipping seed.")
            return 0

        print("Seeding sample images...")
        db.add_all([Image(category=category, **image) for image in GLOBE_IMAGES])
        db.commit()
        print(f"Successfully seeded {len(GLOBE_IMAGES)} images!")
        return 0

    except Exception as e:
        db.rollback()
        print(f"Error seeding database: {e}")
        return 1

    finally:
        db.close()


if __name__ == "__main__":
    database = Database(settings.SQLALCHEMY_DATABASE_URI)
    try:
        exit_code = seed_globe(database)
    finally:
        database.dispose()
    sys.exit(exit_code)
