# ledger_backend/init_db.py

import os

from .config import DEFAULT_DB_PATH
from .db import Store


def init_db(db_path=None):
    db_path = db_path or os.environ.get("DB_PATH", DEFAULT_DB_PATH)
    store = Store(db_path)
    try:
        print(f"Connected to database at {db_path}")
        store.init_db()
        print("Database initialized successfully!")
    finally:
        store.close()
    return db_path


def main():
    print("=" * 50)
    print("Initializing ledger database")
    print("=" * 50)
    init_db()


if __name__ == "__main__":
    main()
