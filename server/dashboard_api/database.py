"""Read-only SQLite access to the lab and wearable databases."""
import os
import sqlite3
from contextlib import contextmanager
from typing import Generator, Optional
import logging

from .config import Settings, get_settings

log = logging.getLogger(__name__)


class DatabaseUnavailableError(RuntimeError):
    """Raised when a configured database file does not exist."""

    def __init__(self, db_path: str):
        super().__init__(f"Database not found: {db_path}")
        self.db_path = db_path


class DatabaseManager:
    """
    Opens read-only connections to biomarker.db and fitness.db.

    The dashboard never writes; both files are produced by
    scripts/populate_databases.py. A missing file raises
    DatabaseUnavailableError instead of letting SQLite create an empty one.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @contextmanager
    def get_biomarker_conn(self) -> Generator[sqlite3.Connection, None, None]:
        """Lab results and body composition scans."""
        yield from self._open_readonly(self.settings.biomarker_db_path)

    @contextmanager
    def get_fitness_conn(self) -> Generator[sqlite3.Connection, None, None]:
        """Daily wearable activity."""
        yield from self._open_readonly(self.settings.fitness_db_path)

    @staticmethod
    def has_table(conn: sqlite3.Connection, table: str) -> bool:
        """True if `table` exists in the connected database."""
        row = conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?", (table,)
        ).fetchone()
        return row is not None

    def _open_readonly(self, db_path: str) -> Generator[sqlite3.Connection, None, None]:
        if not os.path.exists(db_path):
            log.warning(f"[DB] Missing database file {db_path}")
            raise DatabaseUnavailableError(db_path)

        conn = sqlite3.connect(f"file:{db_path}?mode=ro", uri=True, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        log.debug(f"[DB] Opened {os.path.basename(db_path)} read-only")
        try:
            yield conn
        finally:
            conn.close()


# Shared by get_health_data(); tests build their own managers
db_manager = DatabaseManager()
