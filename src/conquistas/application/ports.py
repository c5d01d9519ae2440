"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Any, Protocol

CONTACTS_KEY = "contacts"
ENCOUNTERS_KEY = "encounters"


class PersistenceAdapter(Protocol):
    """Durable per-device key/value storage.

    Values are whole collections (lists of Contact or Encounter). The adapter
    owns (de)serialization, so callers always get real datetimes back.
    """

    def load(self, key: str, default: Any) -> Any:
        """Return the value stored under key, or default if there is none."""
        ...

    def save(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        ...
