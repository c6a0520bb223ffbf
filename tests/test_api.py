"""HTTP-level tests: FastAPI app with get_db overridden to an in-memory SQLite database."""

import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.core.database import get_db
from storefront.core.security import hash_password
from storefront.main import app
from storefront.models import Base, User

PREFIX = "/api/v1"


class ApiTestCase(unittest.TestCase):
    def setUp(self) -> None:
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(engine)
        self.SessionTesting = sessionmaker(bind=engine, autoflush=False)

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def _signup(self, email: str = "a@b.com", password: str = "pw1") -> int:
        resp = self.client.post(
            f"{PREFIX}/users",
            json={"email": email, "password": password, "name": "A", "nickname": "a"},
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["id"]

    def _login(self, email: str = "a@b.com", password: str = "pw1") -> dict:
        resp = self.client.post(
            f"{PREFIX}/auth/login", json={"email": email, "password": password}
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()

    def _auth(self, token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}


class TestAccountFlow(ApiTestCase):
    def test_signup_login_profile_delete(self) -> None:
        user_id = self._signup()
        tokens = self._login()
        self.assertTrue(tokens["access_token"])
        self.assertTrue(tokens["refresh_token"])
        headers = self._auth(tokens["access_token"])

        me = self.client.get(f"{PREFIX}/users/me", headers=headers)
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.json()["id"], user_id)
        self.assertEqual(me.json()["email"], "a@b.com")
        self.assertNotIn("password_hash", me.json())

        bad = self.client.patch(
            f"{PREFIX}/users/me", headers=headers, json={"password": "wrong", "name": "B"}
        )
        self.assertEqual(bad.status_code, 400)

        ok = self.client.patch(
            f"{PREFIX}/users/me", headers=headers, json={"password": "pw1", "name": "B"}
        )
        self.assertEqual(ok.status_code, 200)
        self.assertEqual(ok.json()["name"], "B")

        deleted = self.client.delete(f"{PREFIX}/users/me", headers=headers)
        self.assertEqual(deleted.status_code, 204)
        gone = self.client.get(f"{PREFIX}/users/me", headers=headers)
        self.assertEqual(gone.status_code, 404)
        self.assertEqual(gone.json()["detail"], "User not found.")

    def test_duplicate_signup_returns_409(self) -> None:
        self._signup()
        resp = self.client.post(
            f"{PREFIX}/users",
            json={"email": "a@b.com", "password": "x", "name": "A", "nickname": "a"},
        )
        self.assertEqual(resp.status_code, 409)

    def test_login_with_mixed_case_email(self) -> None:
        self._signup(email="Jo@Example.COM")
        tokens = self._login(email="Jo@Example.COM")
        me = self.client.get(f"{PREFIX}/users/me", headers=self._auth(tokens["access_token"]))
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.json()["email"], "Jo@example.com")

    def test_wrong_password_returns_401(self) -> None:
        self._signup()
        resp = self.client.post(
            f"{PREFIX}/auth/login", json={"email": "a@b.com", "password": "wrong"}
        )
        self.assertEqual(resp.status_code, 401)

    def test_addresses_and_checkouts(self) -> None:
        self._signup()
        headers = self._auth(self._login()["access_token"])
        created = self.client.post(
            f"{PREFIX}/users/me/addresses",
            headers=headers,
            json={
                "recipient_name": "A",
                "phone_number": "010-0000-0000",
                "postal_code": "04524",
                "address_line1": "1 Main St",
            },
        )
        self.assertEqual(created.status_code, 201, created.text)
        listed = self.client.get(f"{PREFIX}/users/me/addresses", headers=headers)
        self.assertEqual(listed.status_code, 200)
        self.assertEqual(len(listed.json()), 1)
        self.assertEqual(listed.json()[0]["postal_code"], "04524")

        checkouts = self.client.get(f"{PREFIX}/checkouts", headers=headers)
        self.assertEqual(checkouts.status_code, 200)
        self.assertEqual(checkouts.json(), {"checkouts": []})


class TestBearerAuth(ApiTestCase):
    def test_missing_token_returns_401(self) -> None:
        resp = self.client.get(f"{PREFIX}/users/me")
        self.assertEqual(resp.status_code, 401)

    def test_refresh_token_is_not_a_bearer_credential(self) -> None:
        self._signup()
        tokens = self._login()
        resp = self.client.get(
            f"{PREFIX}/users/me", headers=self._auth(tokens["refresh_token"])
        )
        self.assertEqual(resp.status_code, 401)

    def test_garbage_token_returns_401(self) -> None:
        resp = self.client.get(f"{PREFIX}/users/me", headers=self._auth("not.a.jwt"))
        self.assertEqual(resp.status_code, 401)


class TestCategoryEndpoints(ApiTestCase):
    def _admin_headers(self) -> dict[str, str]:
        db = self.SessionTesting()
        try:
            db.add(
                User(
                    email="admin@b.com",
                    password_hash=hash_password("adminpw"),
                    name="Admin",
                    nickname="admin",
                    role="admin",
                )
            )
            db.commit()
        finally:
            db.close()
        return self._auth(self._login("admin@b.com", "adminpw")["access_token"])

    def test_non_admin_cannot_create(self) -> None:
        self._signup()
        headers = self._auth(self._login()["access_token"])
        resp = self.client.post(f"{PREFIX}/categories", headers=headers, json={"name": "Shoes"})
        self.assertEqual(resp.status_code, 403)

    def test_admin_can_look_up_user_by_id(self) -> None:
        user_id = self._signup()
        user_headers = self._auth(self._login()["access_token"])
        forbidden = self.client.get(f"{PREFIX}/users/{user_id}", headers=user_headers)
        self.assertEqual(forbidden.status_code, 403)

        headers = self._admin_headers()
        found = self.client.get(f"{PREFIX}/users/{user_id}", headers=headers)
        self.assertEqual(found.status_code, 200)
        self.assertEqual(found.json()["email"], "a@b.com")
        missing = self.client.get(f"{PREFIX}/users/{user_id + 100}", headers=headers)
        self.assertEqual(missing.status_code, 404)

    def test_admin_crud(self) -> None:
        headers = self._admin_headers()
        created = self.client.post(
            f"{PREFIX}/categories", headers=headers, json={"name": "Shoes"}
        )
        self.assertEqual(created.status_code, 201)
        category_id = created.json()["id"]

        dup = self.client.post(f"{PREFIX}/categories", headers=headers, json={"name": "Shoes"})
        self.assertEqual(dup.status_code, 409)

        renamed = self.client.put(
            f"{PREFIX}/categories/{category_id}", headers=headers, json={"name": "Sneakers"}
        )
        self.assertEqual(renamed.json()["name"], "Sneakers")
        self.assertEqual(
            self.client.get(f"{PREFIX}/categories").json(),
            [{"id": category_id, "name": "Sneakers"}],
        )

        self.assertEqual(
            self.client.delete(f"{PREFIX}/categories/{category_id}", headers=headers).status_code,
            204,
        )
        self.assertEqual(
            self.client.delete(f"{PREFIX}/categories/{category_id}", headers=headers).status_code,
            404,
        )
        self.assertEqual(self.client.get(f"{PREFIX}/categories/{category_id}").status_code, 404)


class TestHealth(ApiTestCase):
    def test_health_reports_database(self) -> None:
        resp = self.client.get(f"{PREFIX}/health")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["database"], "connected")
        self.assertEqual(body["environment"], "dev")


if __name__ == "__main__":
    unittest.main()
