"""Local JSON document store."""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

from ro_track.exceptions import StorageError
from ro_track.models import AppSettings, Customer
from ro_track.sinks.serialization import customer_from_dict, settings_from_dict, to_dict
from ro_track.store.base import CustomerMutator, CustomerStore

logger = logging.getLogger(__name__)


class LocalJsonStore(CustomerStore):
    """Keep customers and settings in one JSON file on disk.

    Every write goes to a temporary file in the same directory and is
    moved over the old file, so readers never see a partial document.
    """

    def __init__(self, path: str | Path, pretty: bool = True) -> None:
        """Initialize local store.

        Parameters
        ----------
        path : str | Path
            JSON document path. Created on first write.
        pretty : bool
            Indent the JSON document.
        """
        self.path = Path(path)
        self.pretty = pretty
        self._lock = threading.RLock()

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {"customers": [], "app_settings": {}}
        try:
            with open(self.path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

    def _write(self, document: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".ro-track-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2 if self.pretty else None, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Cannot write {self.path}: {e}") from e

    def load_customers(self) -> list[Customer]:
        with self._lock:
            document = self._read()
        return [customer_from_dict(c) for c in document.get("customers", [])]

    def save_customers(self, customers: list[Customer]) -> None:
        with self._lock:
            document = self._read()
            document["customers"] = [to_dict(c) for c in customers]
            self._write(document)
        logger.info("Saved %d customers to %s", len(customers), self.path)

    def update_customers(self, mutator: CustomerMutator) -> list[Customer]:
        with self._lock:
            document = self._read()
            current = [customer_from_dict(c) for c in document.get("customers", [])]
            updated = mutator(current)
            document["customers"] = [to_dict(c) for c in updated]
            self._write(document)
        logger.info("Updated customer list in %s (%d customers)", self.path, len(updated))
        return updated

    def load_settings(self) -> AppSettings:
        with self._lock:
            document = self._read()
        return settings_from_dict(document.get("app_settings"))

    def save_settings(self, settings: AppSettings) -> None:
        with self._lock:
            document = self._read()
            document["app_settings"] = to_dict(settings)
            self._write(document)
