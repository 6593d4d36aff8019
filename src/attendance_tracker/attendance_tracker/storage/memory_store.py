from __future__ import annotations

from typing import Any, Mapping, Optional

from .repository import KeyValueStore, decode_value, encode_value


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store. Values are kept encoded so reads never share state with callers."""

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        self._data: dict[str, str] = {}
        if initial:
            self.set_many(initial)

    def get(self, key: str) -> Optional[Any]:
        return decode_value(key, self._data.get(key))

    def put_raw(self, key: str, raw: str) -> None:
        self._data[key] = raw

    def set(self, key: str, value: Any) -> None:
        self._data[key] = encode_value(key, value)

    def set_many(self, values: Mapping[str, Any]) -> None:
        encoded = {k: encode_value(k, v) for k, v in values.items()}
        self._data.update(encoded)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)
