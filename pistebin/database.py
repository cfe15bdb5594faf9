"""
Database layer for SQLite operations.
Handles schema setup, paste inserts, point lookups, history listing and health checks.
"""
import logging
import sqlite3
import threading
from typing import List, Optional

from pistebin.models import Paste, PasteSummary

logger = logging.getLogger(__name__)


class PasteDatabase:
    """Wrapper for SQLite operations on pastes."""

    def __init__(self, path: str):
        self.path = path
        self.conn: Optional[sqlite3.Connection] = None
        # sqlite3 connections are not safe for concurrent use
        self._lock = threading.Lock()

    def open(self) -> None:
        """Open the connection and make sure the schema exists."""
        logger.info(f"Opening SQLite database at {self.path}")
        self.conn = sqlite3.connect(self.path, check_same_thread=False)
        self.create_table()

    def close(self) -> None:
        """Close the connection if it is open."""
        if self.conn is not None:
            with self._lock:
                self.conn.close()
                self.conn = None
            logger.info("SQLite database closed")

    def create_table(self) -> None:
        """Create the pastes table. Safe to call on every start."""
        with self._lock:
            self.conn.execute(
                """
                CREATE TABLE IF NOT EXISTS pastes (
                    id TEXT PRIMARY KEY,
                    content TEXT,
                    ip_address TEXT
                )
                """
            )
            self.conn.commit()

    def is_healthy(self) -> bool:
        """Check if database connection is alive."""
        try:
            with self._lock:
                self.conn.execute("SELECT 1").fetchone()
            return True
        except (sqlite3.Error, AttributeError) as e:
            logger.error(f"Health check failed: {e}")
        return False

    def insert(self, paste_id: str, content: str, creator_address: str) -> bool:
        """
        Insert a new paste.

        Args:
            paste_id: Unique paste identifier
            content: Text content of the paste
            creator_address: Network address of the client creating it

        Returns:
            True if successful, False if the id is taken, the content cannot be
            stored as UTF-8, or the store failed
        """
        try:
            with self._lock:
                with self.conn:
                    self.conn.execute(
                        "INSERT INTO pastes (id, content, ip_address) VALUES (?, ?, ?)",
                        (paste_id, content, creator_address),
                    )
            logger.info(f"Paste {paste_id} saved successfully")
            return True
        except (sqlite3.Error, UnicodeEncodeError) as e:
            logger.error(f"Error saving paste {paste_id}: {e}")
            return False

    def get_by_id(self, paste_id: str) -> Optional[Paste]:
        """
        Fetch a paste by id.

        Returns:
            The paste, or None if not found/unavailable
        """
        try:
            with self._lock:
                row = self.conn.execute(
                    "SELECT id, content, ip_address FROM pastes WHERE id = ?",
                    (paste_id,),
                ).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Error fetching paste {paste_id}: {e}")
            return None

        if row is None:
            logger.warning(f"Paste {paste_id} not found")
            return None

        return Paste(id=row[0], content=row[1], creator_address=row[2])

    def list_by_creator_address(self, address: str) -> Optional[List[PasteSummary]]:
        """
        List pastes created from a network address, in insertion order.

        Returns:
            Possibly empty list, or None if the store failed
        """
        try:
            with self._lock:
                rows = self.conn.execute(
                    "SELECT id, content FROM pastes WHERE ip_address = ? ORDER BY rowid",
                    (address,),
                ).fetchall()
        except sqlite3.Error as e:
            logger.error(f"Error listing pastes for {address}: {e}")
            return None

        return [PasteSummary(id=row[0], content=row[1]) for row in rows]
