# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock
from uuid import uuid4

from fastapi.testclient import TestClient

from wellness.api import app
from wellness.app_db import init_app_db
from wellness.auth import security
from wellness.config import settings


class TestAuthApi(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="wellness-test-"))
        cls._patches = [
            mock.patch.object(settings, "db_path", cls._tmp / "wellness.db"),
            mock.patch.object(settings, "jwt_secret", "test-secret"),
        ]
        for patcher in cls._patches:
            patcher.start()
        init_app_db(settings.db_path)
        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls) -> None:
        cls.client.close()
        for patcher in reversed(cls._patches):
            patcher.stop()
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _email(self) -> str:
        return f"user-{uuid4().hex[:8]}@example.com"

    def test_signup_returns_user_and_token(self) -> None:
        email = self._email()
        resp = self.client.post("/api/auth/signup", json={"email": f"  {email.upper()} ", "password": "password123"})
        self.assertEqual(resp.status_code, 201)
        data = resp.json()
        self.assertTrue(data["success"])
        self.assertEqual(data["user"]["email"], email)
        self.assertTrue(data["token"])

    def test_duplicate_signup_is_rejected(self) -> None:
        email = self._email()
        self.client.post("/api/auth/signup", json={"email": email, "password": "password123"})
        resp = self.client.post("/api/auth/signup", json={"email": email, "password": "password456"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["code"], "conflict")
        self.assertFalse(resp.json()["success"])

    def test_signup_requires_fields(self) -> None:
        resp = self.client.post("/api/auth/signup", json={"email": self._email()})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("password", resp.json()["error"])

        resp = self.client.post("/api/auth/signup", json={"email": self._email(), "password": "short"})
        self.assertEqual(resp.status_code, 400)

    def test_login_checks_password(self) -> None:
        email = self._email()
        self.client.post("/api/auth/signup", json={"email": email, "password": "password123"})

        resp = self.client.post("/api/auth/login", json={"email": email, "password": "password123"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["user"]["email"], email)

        wrong = self.client.post("/api/auth/login", json={"email": email, "password": "not-it-at-all"})
        self.assertEqual(wrong.status_code, 401)
        unknown = self.client.post("/api/auth/login", json={"email": self._email(), "password": "password123"})
        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(wrong.json()["error"], unknown.json()["error"])

    def test_login_without_password_is_rejected(self) -> None:
        resp = self.client.post("/api/auth/login", json={"email": self._email()})
        self.assertEqual(resp.status_code, 400)

    def test_verify_and_me(self) -> None:
        resp = self.client.post("/api/auth/signup", json={"email": self._email(), "password": "password123"})
        user = resp.json()["user"]
        token = resp.json()["token"]

        verified = self.client.post("/api/auth/verify", json={"token": token})
        self.assertEqual(verified.status_code, 200)
        self.assertEqual(verified.json()["user"]["sub"], user["id"])

        me = self.client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(me.status_code, 200)
        self.assertEqual(me.json()["user"]["id"], user["id"])

    def test_verify_rejects_bad_tokens(self) -> None:
        resp = self.client.post("/api/auth/verify", json={"token": "not.a.token"})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["code"], "auth_error")

        forged = security._jwt_encode({"sub": "someone", "exp": 9999999999}, "other-secret")
        self.assertEqual(self.client.post("/api/auth/verify", json={"token": forged}).status_code, 401)

        resp = self.client.post("/api/auth/verify", json={})
        self.assertEqual(resp.status_code, 400)

    def test_token_with_other_algorithm_is_rejected(self) -> None:
        resp = self.client.post("/api/auth/signup", json={"email": self._email(), "password": "password123"})
        user_id = resp.json()["user"]["id"]
        signing_input = ".".join([
            security._json_segment({"alg": "none", "typ": "JWT"}),
            security._json_segment({"sub": user_id, "exp": 9999999999}),
        ])
        token = f"{signing_input}.{security._b64url_encode(security._signature(signing_input, settings.jwt_secret))}"

        resp = self.client.post("/api/auth/verify", json={"token": token})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["error"], "Invalid token")

    def test_password_hash(self) -> None:
        stored = security.hash_password("password123")
        self.assertTrue(stored.startswith("pbkdf2_sha256$200000$"))
        self.assertTrue(security.verify_password("password123", stored))
        self.assertFalse(security.verify_password("password124", stored))
        for broken in ("", "plain", "bcrypt$1$a$b", "pbkdf2_sha256$many$a$b", "pbkdf2_nope$10$AAAA$AAAA"):
            with self.subTest(stored=broken):
                self.assertFalse(security.verify_password("password123", broken))

    def test_expired_token(self) -> None:
        resp = self.client.post("/api/auth/signup", json={"email": self._email(), "password": "password123"})
        user_id = resp.json()["user"]["id"]
        expired = security._jwt_encode({"sub": user_id, "exp": 1}, settings.jwt_secret)

        resp = self.client.post("/api/auth/verify", json={"token": expired})
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["error"], "Token expired")

    def test_health_and_unknown_route(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")

        resp = self.client.get("/api/nope")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Route not found"})


if __name__ == "__main__":
    unittest.main()
