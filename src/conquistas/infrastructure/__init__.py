"""Infrastructure layer: concrete implementations of application ports."""

from conquistas.infrastructure.json_file_store import JsonFileKeyValueStore
from conquistas.infrastructure.memory_store import InMemoryKeyValueStore
from conquistas.infrastructure.phone import dial_uri, format_phone, normalize_phone

__all__ = [
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "dial_uri",
    "format_phone",
    "normalize_phone",
]
