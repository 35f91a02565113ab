import os
import sqlite3
import tempfile
import unittest

from fastapi.testclient import TestClient

from lesson_ledger_api.app.core.config import Settings
from lesson_ledger_api.app.core.db import Database
from lesson_ledger_api.app.main import create_app


class ApiTestCase(unittest.TestCase):
    """Runs each test against a fresh SQLite file through the HTTP API."""

    settings_overrides: dict = {}

    def setUp(self):
        tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(tmpdir.cleanup)
        self.db_path = os.path.join(tmpdir.name, "ledger.db")
        self.settings = Settings(database_url=self.db_path, **self.settings_overrides)
        self.store = Database(self.settings.database_url)
        self.app = create_app(self.settings, self.store)
        # Entering the client runs the lifespan hook, which creates the schema.
        self.client = TestClient(self.app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

    def execute(self, sql, params=()):
        """Run raw SQL against the test database, bypassing the services."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            rows = conn.execute(sql, params).fetchall()
            conn.commit()
            return [dict(row) for row in rows]
        finally:
            conn.close()

    def register(self, name="Kim", user_id="u1", phone="010", lesson=4):
        response = self.client.post(
            "/api/member",
            json={"userId": user_id, "name": name, "phone": phone, "lesson": lesson},
        )
        self.assertEqual(response.status_code, 200)
        return response

    def member(self, name="Kim", user_id="u1"):
        response = self.client.get(f"/api/member/detail/{name}", params={"userId": user_id})
        self.assertEqual(response.status_code, 200)
        return response.json()
