"""
Device identity store probe.

The session database is created and owned by the messaging client
(whatsmeow's sqlstore). The relay only asks one question of it: is there
already a paired device? Read-only; never writes.
"""

import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

DEVICE_TABLE = "whatsmeow_device"


class DeviceStoreError(Exception):
    """The identity store could not be opened or queried."""
    pass


class DeviceStore:
    """
    Read-only view of the client's session database.

    Design:
    - Missing file or missing device table means nothing has been paired yet
    - Any other sqlite failure is an error
    """

    def __init__(self, db_path: str):
        self.db_path = Path(db_path)

    def has_device(self) -> bool:
        """
        Check whether a device identity is stored.

        Raises:
            DeviceStoreError: store exists but cannot be opened or queried
        """
        if not self.db_path.exists():
            logger.debug(f"Session store {self.db_path} does not exist yet")
            return False

        try:
            conn = sqlite3.connect(f"{self.db_path.resolve().as_uri()}?mode=ro", uri=True)
        except sqlite3.Error as e:
            raise DeviceStoreError(f"Cannot open session store {self.db_path}: {e}") from e

        try:
            table = conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?",
                (DEVICE_TABLE,),
            ).fetchone()
            if table is None:
                return False
            (count,) = conn.execute(f"SELECT COUNT(*) FROM {DEVICE_TABLE}").fetchone()
        except sqlite3.Error as e:
            raise DeviceStoreError(f"Cannot query session store {self.db_path}: {e}") from e
        finally:
            conn.close()

        logger.debug(f"Session store {self.db_path} holds {count} device(s)")
        return count > 0
