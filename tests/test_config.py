"""Settings validation for database URL, JWT and token lifetimes."""

import unittest

from pydantic import ValidationError

from storefront.core.config import Settings


class TestSettingsValidation(unittest.TestCase):
    def test_sqlite_and_postgres_urls_accepted(self) -> None:
        self.assertEqual(Settings(DATABASE_URL=" sqlite:// ").DATABASE_URL, "sqlite://")
        s = Settings(DATABASE_URL="postgresql://u:p@localhost:5432/shop")
        self.assertTrue(s.DATABASE_URL.startswith("postgresql://"))

    def test_unsupported_database_url_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="mysql://root@localhost/shop")

    def test_blank_jwt_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(JWT_SECRET="   ")

    def test_refresh_lifetime_must_exceed_access(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(ACCESS_TOKEN_EXPIRE_MINUTES=60, REFRESH_TOKEN_EXPIRE_MINUTES=60)

    def test_bcrypt_rounds_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(BCRYPT_ROUNDS=3)
        self.assertEqual(Settings(BCRYPT_ROUNDS=10).BCRYPT_ROUNDS, 10)


if __name__ == "__main__":
    unittest.main()
