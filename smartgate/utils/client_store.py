"""
Persistent key/value storage for dashboard state
"""

import json
import logging
import sqlite3
import threading
from pathlib import Path

logger = logging.getLogger(__name__)


class ClientStateStore:
    """Thread-safe SQLite key/value store with localStorage-like semantics"""

    def __init__(self, db_path):
        self.db_path = str(db_path)
        if self.db_path != ':memory:':
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        # Streamlit reruns the script on different threads
        self.conn = sqlite3.connect(self.db_path, check_same_thread=False)
        self.write_lock = threading.Lock()
        with self.write_lock:
            self.conn.execute('''
                CREATE TABLE IF NOT EXISTS client_state (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            ''')
            self.conn.commit()

    def get_item(self, key):
        with self.write_lock:
            row = self.conn.execute(
                'SELECT value FROM client_state WHERE key = ?', (key,)
            ).fetchone()
        return row[0] if row else None

    def set_item(self, key, value):
        with self.write_lock:
            self.conn.execute('''
                INSERT INTO client_state (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
            ''', (key, str(value)))
            self.conn.commit()

    def remove_item(self, key):
        with self.write_lock:
            self.conn.execute('DELETE FROM client_state WHERE key = ?', (key,))
            self.conn.commit()

    def clear(self):
        with self.write_lock:
            self.conn.execute('DELETE FROM client_state')
            self.conn.commit()

    def keys(self):
        with self.write_lock:
            rows = self.conn.execute('SELECT key FROM client_state ORDER BY key').fetchall()
        return [r[0] for r in rows]

    def get_json(self, key, default=None):
        """Decode a JSON value; raises ValueError when the stored text is corrupt"""
        raw = self.get_item(key)
        if raw is None:
            return default
        return json.loads(raw)

    def set_json(self, key, value):
        self.set_item(key, json.dumps(value, default=str))

    def close(self):
        with self.write_lock:
            self.conn.close()
