"""
Tests for password hashing and the password write-path transform.
"""

from sitecms.core.security import get_password_hash, prepare_password_for_write, verify_password
from sitecms.crud import user as user_crud


class TestPasswordHashing:

    def test_hash_is_salted(self):
        first = get_password_hash("secret123")
        second = get_password_hash("secret123")

        assert first != second
        assert verify_password("secret123", first)
        assert verify_password("secret123", second)

    def test_wrong_password_rejected(self):
        assert not verify_password("wrong", get_password_hash("secret123"))

    def test_non_hash_stored_value_never_matches(self):
        assert not verify_password("secret123", "secret123")


class TestPasswordWriteTransform:

    def test_new_value_is_hashed(self):
        stored = prepare_password_for_write("secret123")

        assert stored != "secret123"
        assert verify_password("secret123", stored)

    def test_resubmitted_hash_is_kept(self):
        current = get_password_hash("secret123")

        assert prepare_password_for_write(current, current) == current

    def test_changed_value_is_rehashed(self):
        current = get_password_hash("secret123")

        stored = prepare_password_for_write("newsecret", current)

        assert stored != current
        assert verify_password("newsecret", stored)

    def test_user_update_keeps_unchanged_hash(self, db_session):
        user = user_crud.create(db_session, "a@example.com", "secret123")
        original_hash = user.hashed_password

        user_crud.update(db_session, user, password=original_hash)
        assert user.hashed_password == original_hash
        assert user_crud.authenticate(db_session, "a@example.com", "secret123")

        user_crud.update(db_session, user, password="changed99")
        assert user.hashed_password != original_hash
        assert user_crud.authenticate(db_session, "a@example.com", "changed99")
        assert user_crud.authenticate(db_session, "a@example.com", "secret123") is None
