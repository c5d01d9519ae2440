"""File-backed implementation of PersistenceAdapter: one <key>.json per key."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from conquistas.infrastructure import codec

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """Stores each key as a JSON document under data_dir.

    A missing file yields the default. A file that cannot be read or decoded
    is logged and also yields the default, so the app starts empty instead of
    failing.
    """

    def __init__(self, data_dir: str | Path) -> None:
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, key: str) -> Path:
        return self._data_dir / f"{key}.json"

    def load(self, key: str, default: Any) -> Any:
        path = self.path_for(key)
        if not path.exists():
            return default
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return codec.decode(key, data)
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Could not load %s from %s: %s", key, path, e)
            return default

    def save(self, key: str, value: Any) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(codec.encode(key, value), ensure_ascii=False, indent=2)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
