import re
import sqlite3
import logging
import threading
from contextlib import closing, contextmanager
from typing import Iterator, List

from database.models import InsertResult


logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

MEMORY_PATH = ":memory:"


class RegistrationDatabase:
    """
    Local SQLite record store for development and tests.

    Speaks the same ``insert(table, record)`` contract as the hosted store,
    so the registration controller cannot tell the two apart. For a file
    path a connection is opened per call because Flask may serve requests
    from several threads and sqlite3 connections are bound to the thread
    that made them. An in-memory database only lives as long as its
    connection, so ``:memory:`` keeps one shared connection behind a lock.
    """

    def __init__(self, db_path: str = "registrations.db"):
        self.db_path = db_path
        self._lock = threading.Lock()
        self._shared = None
        if db_path == MEMORY_PATH:
            self._shared = sqlite3.connect(db_path, check_same_thread=False)
        logger.info(f"Using SQLite record store: {self.db_path}")

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        if self._shared is not None:
            with self._lock:
                yield self._shared
            return
        with closing(sqlite3.connect(self.db_path)) as con:
            yield con

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    @staticmethod
    def _check_table(table: str) -> None:
        if not _IDENTIFIER.match(table or ""):
            raise ValueError(f"Invalid table name: {table!r}")

    @staticmethod
    def _create_table(con: sqlite3.Connection, table: str) -> None:
        """Create the applicant table if this database does not have it yet."""
        con.execute(f"""
            CREATE TABLE IF NOT EXISTS "{table}" (
                user_id     TEXT PRIMARY KEY,
                name        TEXT,
                email       TEXT,
                created_at  TEXT DEFAULT CURRENT_TIMESTAMP
            )
        """)
        con.commit()

    # ------------------------------------------------------------------
    # Write side
    # ------------------------------------------------------------------

    def insert(self, table: str, record: dict) -> InsertResult:
        """
        Insert one applicant row.

        Parameters
        ----------
        table : str
            Target table, must be a plain SQL identifier.
        record : dict
            ``{user_id, name, email}``.

        Returns
        -------
        InsertResult with ``error`` set when SQLite rejected the row.
        """
        self._check_table(table)
        try:
            with self._connect() as con:
                self._create_table(con, table)
                with con:
                    con.execute(
                        f'INSERT INTO "{table}" (user_id, name, email) VALUES (?, ?, ?)',
                        (record.get("user_id"), record.get("name"), record.get("email")),
                    )
        except sqlite3.Error as e:
            return InsertResult(error=str(e), details={"type": type(e).__name__})

        logger.info(f"Stored registration {record.get('user_id')} in {table}")
        return InsertResult()

    # ------------------------------------------------------------------
    # Read side (maintenance only, the web app never reads registrations)
    # ------------------------------------------------------------------

    def count(self, table: str) -> int:
        self._check_table(table)
        with self._connect() as con:
            self._create_table(con, table)
            return con.execute(f'SELECT COUNT(*) FROM "{table}"').fetchone()[0]

    def all_user_ids(self, table: str) -> List[str]:
        """Return every stored anonymous identifier, oldest first."""
        self._check_table(table)
        with self._connect() as con:
            self._create_table(con, table)
            rows = con.execute(f'SELECT user_id FROM "{table}" ORDER BY rowid').fetchall()
        return [r[0] for r in rows]

    def close(self) -> None:
        """Close the shared in-memory connection, if any."""
        if self._shared is not None:
            self._shared.close()
            self._shared = None
            logger.info("Database connection closed")
