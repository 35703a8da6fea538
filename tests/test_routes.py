"""HTTP tests for the welcome, register and login endpoints."""

import unittest

from fastapi.testclient import TestClient

from authapi.core.store import InMemoryUserStore, get_user_store
from authapi.main import WELCOME_MESSAGE, app

BOB = {"username": "bob", "email": "bob@x.com", "type": "user", "password": "Abcde!"}


class RoutesTestCase(unittest.TestCase):
    """Each test gets a fresh store injected through the dependency override."""

    def setUp(self) -> None:
        self.store = InMemoryUserStore()
        app.dependency_overrides[get_user_store] = lambda: self.store
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()


class TestWelcome(RoutesTestCase):
    def test_fixed_message(self) -> None:
        first = self.client.get("/")
        self.client.post("/register", json=BOB)
        second = self.client.get("/")
        self.assertEqual(first.status_code, 200)
        self.assertEqual(first.json(), {"message": WELCOME_MESSAGE})
        self.assertEqual(second.json(), first.json())

    def test_cors_open_to_any_origin(self) -> None:
        response = self.client.get("/", headers={"Origin": "https://example.org"})
        self.assertEqual(response.headers.get("access-control-allow-origin"), "*")


class TestRegister(RoutesTestCase):
    def test_success(self) -> None:
        response = self.client.post("/register", json=BOB)
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json(), {"message": "User registered successfully!"})
        self.assertTrue(self.store.exists("bob@x.com"))

    def test_password_without_uppercase_is_400(self) -> None:
        response = self.client.post("/register", json={**BOB, "password": "abcde!"})
        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.json()["message"].startswith("password:"))

    def test_same_email_twice_is_201_then_409(self) -> None:
        self.assertEqual(self.client.post("/register", json=BOB).status_code, 201)
        response = self.client.post("/register", json=BOB)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json(), {"message": "User exists!"})

    def test_missing_field_is_400(self) -> None:
        response = self.client.post("/register", json={"username": "bob"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "email: Field required"})

    def test_invalid_json_is_400(self) -> None:
        response = self.client.post(
            "/register",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("message", response.json())

    def test_non_object_body_is_400(self) -> None:
        response = self.client.post("/register", json=["bob"])
        self.assertEqual(response.status_code, 400)

    def test_padded_email_is_400_and_not_stored(self) -> None:
        response = self.client.post("/register", json={**BOB, "email": " bob@x.com"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(len(self.store), 0)

    def test_non_ascii_special_character_password_is_201(self) -> None:
        response = self.client.post("/register", json={**BOB, "password": "Abcdé"})
        self.assertEqual(response.status_code, 201)


class TestLogin(RoutesTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.client.post("/register", json=BOB)

    def test_success_after_registration(self) -> None:
        response = self.client.post("/login", json={"username": "bob@x.com", "password": "Abcde!"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Login successful"})

    def test_wrong_password_matches_unknown_email(self) -> None:
        wrong = self.client.post("/login", json={"username": "bob@x.com", "password": "wrong"})
        unknown = self.client.post("/login", json={"username": "nobody@x.com", "password": "Abcde!"})
        self.assertEqual(wrong.status_code, 401)
        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(wrong.json(), {"message": "Invalid credentials"})
        self.assertEqual(unknown.json(), wrong.json())

    def test_empty_body_object_is_401(self) -> None:
        response = self.client.post("/login", json={})
        self.assertEqual(response.status_code, 401)

    def test_empty_body_is_401(self) -> None:
        response = self.client.post("/login")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"message": "Invalid credentials"})

    def test_form_encoded_body_is_401(self) -> None:
        response = self.client.post("/login", data={"username": "bob@x.com", "password": "Abcde!"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"message": "Invalid credentials"})

    def test_non_object_body_is_401(self) -> None:
        response = self.client.post("/login", json=["bob@x.com", "Abcde!"])
        self.assertEqual(response.status_code, 401)

    def test_store_is_isolated_per_test(self) -> None:
        self.assertEqual(len(self.store), 1)
