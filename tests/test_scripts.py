"""
Tests for the maintenance scripts (admin creation and seeding).
"""

from scripts.check_connection import check_connection, mask_password
from scripts.create_admin import create_admin
from scripts.seed_data import SAMPLE_IMAGES, SAMPLE_JOBS, seed_data
from scripts.seed_globe import GLOBE_IMAGES, seed_globe
from sitecms.crud import user as user_crud
from sitecms.models.image import Image
from sitecms.models.job import Job
from sitecms.models.user import User


class TestCreateAdmin:

    def test_creates_admin(self, database, db_session):
        assert create_admin(database, "Admin@Example.com", "password") == 0

        assert user_crud.authenticate(db_session, "admin@example.com", "password")

    def test_existing_admin_is_noop(self, database, db_session):
        create_admin(database, "admin@example.com", "password")

        assert create_admin(database, "admin@example.com", "different") == 0
        assert db_session.query(User).count() == 1
        assert user_crud.authenticate(db_session, "admin@example.com", "password")

    def test_invalid_credentials_fail(self, database):
        assert create_admin(database, "not-an-email", "password") == 1
        assert create_admin(database, "admin@example.com", "123") == 1


class TestSeeding:

    def test_seed_data_replaces_jobs_and_images(self, database, db_session):
        db_session.add(Job(title="Old", location="Nowhere", description="Stale"))
        db_session.commit()

        assert seed_data(database) == 0

        assert db_session.query(Job).count() == len(SAMPLE_JOBS)
        assert db_session.query(Job).filter(Job.title == "Old").count() == 0
        assert db_session.query(Image).count() == len(SAMPLE_IMAGES)

    def test_seed_globe_only_once(self, database, db_session):
        assert seed_globe(database) == 0
        assert seed_globe(database) == 0

        count = db_session.query(Image).filter(Image.category == "career-globe").count()
        assert count == len(GLOBE_IMAGES)


class TestCheckConnection:

    def test_reachable_database(self, database, capsys):
        assert check_connection(database) == 0
        assert "jobs" in capsys.readouterr().out

    def test_mask_password(self):
        masked = mask_password("postgresql://user:secret@db:5432/sitecms")

        assert "secret" not in masked
        assert masked == "postgresql://user:****@db:5432/sitecms"
