"""
Replace jobs and images with a small set of demo records.

WARNING: deletes every existing job and image first.

Run this script from the project root:
    python scripts/seed_data.py
"""

import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sitecms.core.config import settings
from sitecms.core.database import Database
from sitecms.models.image import Image, ImageCategory
from sitecms.models.job import Job

SAMPLE_JOBS = [
    {
        "title": "Senior Editor",
        "location": "Remote / New York",
        "description": "We are looking for an experienced editor to lead our content team. You will be responsible for overseeing the quality and consistency of all our publications.",
    },
    {
        "title": "Digital Publishing Specialist",
        "location": "London, UK",
        "description": "Join our technical team to help transform traditional manuscripts into digital formats. Experience with XML and ePub is required.",
    },
    {
        "title": "Graphic Designer",
        "location": "Remote",
        "description": "Create stunning visuals for our e-books and marketing materials. Proficiency in Adobe Creative Suite is a must.",
    },
]

SAMPLE_IMAGES = [
    {"src": "https://images.unsplash.com/photo-1497366216548-37526070297c?auto=format&fit=crop&w=800&q=80", "alt": "Office Workspace"},
    {"src": "https://images.unsplash.com/photo-1522071820081-009f0129c71c?auto=format&fit=crop&w=800&q=80", "alt": "Team Collaboration"},
    {"src": "https://images.unsplash.com/photo-1556761175-5973dc0f32e7?auto=format&fit=crop&w=800&q=80", "alt": "Meeting"},
    {"src": "https://images.unsplash.com/photo-1531482615713-2afd69097998?auto=format&fit=crop&w=800&q=80", "alt": "Presentation"},
    {"src": "https://images.unsplash.com/photo-1600880292203-757bb62b4baf?auto=format&fit=crop&w=800&q=80", "alt": "Coworking"},
]


def seed_data(database: Database) -> int:
    """Clear and re-insert the demo jobs and home page images."""
    database.init_db()
    db = database.session()

    try:
        print("🌱 Seeding database...")
        db.query(Job).delete()
        db.query(Image).delete()
        print("🧹 Cleared existing jobs and images")

        db.add_all([Job(**job) for job in SAMPLE_JOBS])
        db.add_all([Image(category=ImageCategory.HOME.value, **image) for image in SAMPLE_IMAGES])
        db.commit()

        print(f"✅ Added {len(SAMPLE_JOBS)} sample jobs")
        print(f"✅ Added {len(SAMPLE_IMAGES)} sample images")
        return 0

    except Exception as e:
        db.rollback()
        print(f"❌ Error seeding database: {e}")
        return 1

    finally:
        db.close()


if __name__ == "__main__":
    database = Database(settings.SQLALCHEMY_DATABASE_URI)
    try:
        exit_code = seed_data(database)
    finally:
        database.dispose()
    sys.exit(exit_code)
