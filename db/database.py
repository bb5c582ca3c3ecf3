# db/database.py
import json
import logging
import os
from abc import ABC, abstractmethod
from typing import List, Optional


class RecordStore(ABC):
    """Storage contract the user controller depends on."""

    @abstractmethod
    def load(self) -> List[dict]:
        ...

    @abstractmethod
    def append(self, record: dict) -> None:
        ...

    @abstractmethod
    def check(self) -> int:
        """Return the record count; raise if the backend is unhealthy."""

    def find_by_cnic(self, cnic: str) -> Optional[dict]:
        """
        Linear scan for the first record whose cnic matches.
        Duplicates are allowed in the store; the earliest one wins.
        """
        for record in self.load():
            if isinstance(record, dict) and record.get("cnic") == cnic:
                return record
        return None


class JsonRecordStore(RecordStore):
    """
    All users in one JSON array on disk.

    Every append is a full read-modify-write of the file. There is no
    locking: two concurrent writers can both read the same list and the
    later write drops the other one's record.
    """

    def __init__(self, path: str, logger: Optional[logging.Logger] = None):
        self.path = path
        self.logger = logger or logging.getLogger(__name__)

    def init_db(self):
        """Create the data file with an empty array if it doesn't exist yet."""
        if os.path.exists(self.path):
            self.logger.info("Data file exists: %s", self.path)
            return

        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write("[]")
        self.logger.info("Created new data file: %s", self.path)

    def load(self) -> List[dict]:
        """
        Read every record. Never raises: a missing, unreadable or corrupt
        file is logged and treated as an empty store.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            self.logger.exception("Error reading data file %s", self.path)
            return []

        if not isinstance(data, list):
            self.logger.error("Data file %s does not contain a JSON array", self.path)
            return []
        return data

    def append(self, record: dict) -> None:
        records = self.load()
        records.append(record)
        self._write(records)

    def check(self) -> int:
        """
        Strict read used by the health route. Unlike load(), a missing or
        corrupt file raises instead of reading as empty.
        """
        with open(self.path, "r", encoding="utf-8") as f:
            records = json.load(f)
        if not isinstance(records, list):
            raise ValueError("data file is not a JSON array")
        return len(records)

    def _write(self, records: List[dict]) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            self.logger.info("Data successfully written to file")
        except Exception:
            self.logger.exception("Error writing to data file %s", self.path)
            raise


def init_db(app) -> JsonRecordStore:
    """
    Build the JSON store for this app and make sure its file exists.
    Runs inside create_app so nothing is served before the file is there.
    """
    store = JsonRecordStore(app.config["DATA_FILE"], logger=app.logger)
    store.init_db()
    app.extensions["record_store"] = store
    return store


def get_store() -> RecordStore:
    from flask import current_app

    return current_app.extensions["record_store"]
