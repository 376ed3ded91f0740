# -*- coding: utf-8 -*-

from __future__ import annotations

import io
import shutil
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

from wellness import cli
from wellness.auth.security import decode_token
from wellness.auth.service import signup
from wellness.config import settings


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="wellness-cli-"))
        self._patches = [
            mock.patch.object(settings, "db_path", self._tmp / "nested" / "wellness.db"),
            mock.patch.object(settings, "jwt_secret", "test-secret"),
        ]
        for patcher in self._patches:
            patcher.start()

    def tearDown(self) -> None:
        for patcher in reversed(self._patches):
            patcher.stop()
        shutil.rmtree(self._tmp, ignore_errors=True)

    def _run(self, *argv: str):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = cli.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_no_command_prints_help(self) -> None:
        code, out, _ = self._run()
        self.assertEqual(code, 1)
        self.assertIn("init-db", out)

    def test_init_db_creates_file(self) -> None:
        code, out, _ = self._run("init-db")
        self.assertEqual(code, 0)
        self.assertTrue(settings.db_path.exists())
        self.assertIn("Database ready", out)

    def test_token_for_existing_user(self) -> None:
        self._run("init-db")
        user, _ = signup("cli@example.com", "password123")
        code, out, err = self._run("token", "cli@example.com", "--password", "password123")
        self.assertEqual(code, 0)
        self.assertEqual(decode_token(out.strip())["sub"], user["id"])
        self.assertIn(user["id"], err)

    def test_token_with_bad_password(self) -> None:
        self._run("init-db")
        signup("cli@example.com", "password123")
        code, out, err = self._run("token", "cli@example.com", "--password", "wrong-password")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Invalid email or password", err)


if __name__ == "__main__":
    unittest.main()
