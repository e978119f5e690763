"""JSON file implementation of durable local storage."""

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from food_tracker.errors import StorageWriteError
from food_tracker.services.meals import LocalStorage

logger = logging.getLogger(__name__)


@dataclass
class JsonFileStorage(LocalStorage):
    """Key-value storage kept in a single JSON object file."""

    path: Path

    def get_item(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Store a value and flush the whole file atomically."""
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        """Remove a key if present."""
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def _read(self) -> dict[str, object]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError:
            logger.exception(
                "Failed to read storage file", extra={"path": str(self.path)}
            )
            return {}
        except UnicodeDecodeError:
            logger.warning("Storage file is not valid UTF-8: %s", self.path)
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Storage file is not valid JSON: %s", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file does not hold an object: %s", self.path)
            return {}
        return data

    def _write(self, data: dict[str, object]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(data, handle, ensure_ascii=False)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageWriteError(f"Cannot write {self.path}: {exc}") from exc
