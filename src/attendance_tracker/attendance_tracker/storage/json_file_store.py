from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Mapping, Optional

from ..core.exceptions import StorageError
from .repository import KeyValueStore, decode_value, encode_value

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """Keeps every entry in one JSON document on disk.

    Each entry is stored as its encoded string, the same way a browser's
    localStorage keeps values. Writes go to a temp file that replaces the
    document, so a failed write never leaves a half-written file behind.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> Optional[Any]:
        return decode_value(key, self._load_all().get(key))

    def set(self, key: str, value: Any) -> None:
        self.set_many({key: value})

    def set_many(self, values: Mapping[str, Any]) -> None:
        encoded = {k: encode_value(k, v) for k, v in values.items()}
        data = self._load_all(for_write=True)
        data.update(encoded)
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._load_all(for_write=True)
        if key in data:
            del data[key]
            self._write_all(data)

    def keys(self) -> list[str]:
        return sorted(self._load_all())

    def _load_all(self, *, for_write: bool = False) -> dict[str, str]:
        """Read the whole document.

        Reads treat an unreadable document as empty. Writes refuse to replace
        it and raise StorageError.
        """

        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            return self._unreadable(f"unreadable: {e}", for_write)
        if not isinstance(data, dict):
            return self._unreadable("does not hold an object", for_write)
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _unreadable(self, reason: str, for_write: bool) -> dict[str, str]:
        if for_write:
            logger.error("Store file %s is %s; refusing to overwrite it", self._path, reason)
            raise StorageError("Local storage file is damaged; it was left unchanged.")
        logger.warning("Store file %s is %s; treating it as empty", self._path, reason)
        return {}

    def _write_all(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=".store-", suffix=".json", dir=str(self._path.parent))
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self._path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            logger.error("Failed to write store file %s: %s", self._path, e)
            raise StorageError("Could not save data to local storage.") from e
