import os
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

from sqlalchemy import create_engine, inspect


class MigrationTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.project_root = Path(__file__).resolve().parents[1]
        cls.tmpdir = tempfile.TemporaryDirectory()
        cls.db_url = f"sqlite+pysqlite:///{os.path.join(cls.tmpdir.name, 'migrations.db')}"

        env = os.environ.copy()
        env["DATABASE_URL"] = cls.db_url
        env["PYTHONPATH"] = str(cls.project_root)
        subprocess.run(
            [sys.executable, "-m", "alembic", "upgrade", "head"],
            cwd=cls.project_root,
            env=env,
            check=True,
            capture_output=True,
            text=True,
        )

        cls.engine = create_engine(cls.db_url)
        cls.inspector = inspect(cls.engine)

    @classmethod
    def tearDownClass(cls):
        if hasattr(cls, "engine"):
            cls.engine.dispose()
        if hasattr(cls, "tmpdir"):
            cls.tmpdir.cleanup()

    def test_upgrade_head_creates_expected_tables(self):
        tables = set(self.inspector.get_table_names())
        self.assertTrue({"users", "topics", "comments", "user_collects"}.issubset(tables))

    def test_topics_table_has_moderation_and_counter_columns(self):
        columns = {c["name"] for c in self.inspector.get_columns("topics")}
        for name in ("is_delete", "recommend", "top", "lock", "visit_count", "reply_count", "last_reply_user_id"):
            self.assertIn(name, columns)
