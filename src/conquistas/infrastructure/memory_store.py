"""In-memory implementation of PersistenceAdapter (no disk)."""

import copy
from typing import Any

from conquistas.infrastructure import codec


class InMemoryKeyValueStore:
    """Keeps the encoded (JSON-compatible) form of each value, like a device store would."""

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def load(self, key: str, default: Any) -> Any:
        if key not in self._data:
            return default
        return codec.decode(key, copy.deepcopy(self._data[key]))

    def save(self, key: str, value: Any) -> None:
        self._data[key] = codec.encode(key, value)

    def raw(self, key: str) -> Any:
        """Return the encoded value stored under key, or None."""
        return copy.deepcopy(self._data.get(key))
