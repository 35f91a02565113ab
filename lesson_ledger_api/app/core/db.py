"""
SQLite store client and schema setup.

``Database`` is the single object through which the application talks
to its relational store.  It is constructed once by ``create_app`` (or
by a test) and handed to the services through FastAPI dependencies;
nothing in this module holds a process‑wide connection.

Every unit of work opens a short‑lived connection, runs its statements
inside one transaction and commits on exit.  Any ``sqlite3.Error``
raised along the way rolls the transaction back and is re‑raised as
``StoreError`` so the API layer can answer with an opaque 500.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


SCHEMA = """
CREATE TABLE IF NOT EXISTS user (
    id TEXT PRIMARY KEY,
    pw TEXT NOT NULL,
    name TEXT,
    phone TEXT,
    pwCon TEXT
);

CREATE TABLE IF NOT EXISTS login (
    id TEXT PRIMARY KEY,
    loginAt TIMESTAMP DEFAULT (datetime('now', 'localtime'))
);

CREATE TABLE IF NOT EXISTS member (
    memberId INTEGER PRIMARY KEY AUTOINCREMENT,
    userId TEXT NOT NULL,
    name TEXT NOT NULL,
    phone TEXT,
    lesson INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS lessonList (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    userId TEXT NOT NULL,
    name TEXT NOT NULL,
    phone TEXT,
    lessonDay TIMESTAMP NOT NULL DEFAULT (datetime('now', 'localtime'))
);

CREATE TABLE IF NOT EXISTS payList (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    userId TEXT NOT NULL,
    name TEXT NOT NULL,
    pay INTEGER NOT NULL,
    payDay TIMESTAMP NOT NULL DEFAULT (datetime('now', 'localtime'))
);

CREATE TABLE IF NOT EXISTS posts (
    postId INTEGER PRIMARY KEY AUTOINCREMENT,
    id TEXT,
    title TEXT NOT NULL,
    content TEXT
);

CREATE INDEX IF NOT EXISTS idx_member_owner ON member (userId, name);
CREATE INDEX IF NOT EXISTS idx_lesson_owner ON lessonList (userId, name, lessonDay);
CREATE INDEX IF NOT EXISTS idx_pay_owner ON payList (userId, name, payDay);
"""

# Timestamps are stored the way SQLite's datetime() renders them so
# that explicit values sort and filter alongside store defaults.
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class StoreError(Exception):
    """Raised when the relational store fails to execute a statement."""


class Database:
    """Store client bound to one SQLite database file."""

    def __init__(self, database_url: str) -> None:
        self.path = self.resolve_path(database_url)

    @staticmethod
    def resolve_path(database_url: str) -> str:
        """Compute the path to the SQLite database file.

        Absolute paths are used as is.  Relative paths are resolved
        against the project root (the directory containing the
        ``lesson_ledger_api`` package).
        """
        if os.path.isabs(database_url):
            return database_url
        base_dir = Path(__file__).resolve().parent.parent.parent.parent
        return str((base_dir / database_url).resolve())

    def get_connection(self) -> sqlite3.Connection:
        """Open a new connection whose rows are addressable by column name."""
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def get_cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor inside one transaction.

        The transaction commits when the block exits normally and rolls
        back otherwise.  Driver errors surface as ``StoreError``; other
        exceptions (e.g. ``ValueError`` raised by a service to abort a
        workflow) propagate unchanged after the rollback.
        """
        try:
            conn = self.get_connection()
        except sqlite3.Error as exc:
            raise StoreError(f"cannot open database {self.path}: {exc}") from exc
        try:
            yield conn.cursor()
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StoreError(str(exc)) from exc
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_db(self) -> None:
        """Create all tables and indexes that do not exist yet."""
        with self.get_cursor() as cursor:
            cursor.executescript(SCHEMA)
