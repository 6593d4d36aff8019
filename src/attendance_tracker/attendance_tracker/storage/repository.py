from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional, Protocol

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Giao diện kho key-value (tương đương localStorage của trình duyệt).

    Lưu ý (DIP): repository phụ thuộc vào interface này, không phụ thuộc backend cụ thể.
    """

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def set_many(self, values: Mapping[str, Any]) -> None:
        """Write every entry or none of them."""

        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def keys(self) -> list[str]:
        raise NotImplementedError


def encode_value(key: str, value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error("Failed to serialize value for %r: %s", key, e)
        raise StorageError(f"Could not save data for {key}.") from e


def decode_value(key: str, raw: Optional[str]) -> Optional[Any]:
    """Parse a stored value; unreadable entries count as missing."""

    if raw is None:
        return None
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning("Ignoring unreadable value stored under %r: %s", key, e)
        return None
