# ledger_backend/db.py
import logging
import os
import sqlite3
import threading

from flask import current_app

logger = logging.getLogger("ledger-backend")

SCHEMA_PATH = os.path.join(os.path.dirname(__file__), "init_db.sql")


class Store:
    """
    Thin client over a single SQLite connection.

    Opened once at process start and handed to the app; statements are
    serialized through an internal lock since the connection is shared
    between request threads.
    """

    def __init__(self, db_path):
        self.db_path = db_path
        if db_path != ":memory:":
            os.makedirs(os.path.dirname(os.path.abspath(db_path)), exist_ok=True)
        self._conn = sqlite3.connect(db_path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.Lock()
        self.closed = False
        logger.info(f"Opened store at {db_path}")

    def query_db(self, query, args=(), one=False):
        with self._lock:
            cur = self._conn.execute(query, args)
            rv = cur.fetchall()
            cur.close()
        return (rv[0] if rv else None) if one else rv

    def execute_db(self, query, args=()):
        """Run a mutating statement and return the new row id."""
        last, _ = self._execute(query, args)
        return last

    def update_db(self, query, args=()):
        """Run a mutating statement and return the number of rows it touched."""
        _, changes = self._execute(query, args)
        return changes

    def _execute(self, query, args):
        with self._lock:
            cur = self._conn.cursor()
            try:
                cur.execute(query, args)
                self._conn.commit()
                result = (cur.lastrowid, cur.rowcount)
            except sqlite3.Error:
                self._conn.rollback()
                raise
            finally:
                cur.close()
        return result

    def init_db(self, sql_file=SCHEMA_PATH):
        """
        Apply init_db.sql to this store.
        Idempotent (the script uses IF NOT EXISTS), so safe at every startup.
        """
        if not os.path.exists(sql_file):
            raise FileNotFoundError(f"init_db.sql not found at expected path: {sql_file}")

        with open(sql_file, "r", encoding="utf-8") as f:
            sql = f.read()
        with self._lock:
            self._conn.executescript(sql)
            self._conn.commit()

    def close(self):
        with self._lock:
            if not self.closed:
                self._conn.close()
                self.closed = True
                logger.info(f"Closed store at {self.db_path}")


def get_store():
    return current_app.extensions["store"]

