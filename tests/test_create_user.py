"""Tests for the create_user CLI against an in-memory SQLite SessionLocal."""

import unittest
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.core.security import verify_password
from storefront.models import Base, User
from storefront.scripts import create_user


class TestCreateUserCli(unittest.TestCase):
    def setUp(self) -> None:
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(engine)
        self.SessionTesting = sessionmaker(bind=engine, autoflush=False)
        patcher = patch.object(create_user, "SessionLocal", self.SessionTesting)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _stored(self, email: str) -> User | None:
        db = self.SessionTesting()
        try:
            return db.query(User).filter(User.email == email).first()
        finally:
            db.close()

    def test_creates_user_with_hashed_password(self) -> None:
        self.assertEqual(create_user.main(["shopper@mail.com", "s3cret", "Shopper"]), 0)
        user = self._stored("shopper@mail.com")
        self.assertIsNotNone(user)
        self.assertNotEqual(user.password_hash, "s3cret")
        self.assertTrue(verify_password("s3cret", user.password_hash))
        self.assertEqual(user.role, "user")
        self.assertEqual(user.nickname, "Shopper")

    def test_duplicate_email_returns_1(self) -> None:
        self.assertEqual(create_user.main(["shopper@mail.com", "s3cret", "Shopper"]), 0)
        self.assertEqual(create_user.main(["shopper@MAIL.com", "other", "Again"]), 1)
        db = self.SessionTesting()
        try:
            self.assertEqual(db.query(User).count(), 1)
        finally:
            db.close()

    def test_admin_role_and_nickname_persisted(self) -> None:
        code = create_user.main(
            ["Admin@Shop.COM", "adminpw", "Admin", "--nickname", "boss", "--role", "admin"]
        )
        self.assertEqual(code, 0)
        user = self._stored("Admin@shop.com")
        self.assertEqual(user.role, "admin")
        self.assertEqual(user.nickname, "boss")

    def test_invalid_email_returns_1(self) -> None:
        self.assertEqual(create_user.main(["not-an-email", "pw", "Nobody"]), 1)
        db = self.SessionTesting()
        try:
            self.assertEqual(db.query(User).count(), 0)
        finally:
            db.close()


if __name__ == "__main__":
    unittest.main()
