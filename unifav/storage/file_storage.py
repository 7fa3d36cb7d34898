"""JSON file storage backend -- one file holding every key."""

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from unifav.errors import CorruptStateError
from unifav.storage.base import KeyValueStorage
from unifav.utils.config import settings
from unifav.utils.logger import get_logger

log = get_logger(__name__)


class FileStorage(KeyValueStorage):
    """Keeps a ``{key: value}`` JSON object on disk.

    Writes go to a uniquely named sibling temp file that is then renamed over the target,
    so the file is always either the old or the new content.
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path or settings.favorites_file)

    async def get(self, key: str) -> Optional[str]:
        data = await asyncio.to_thread(self._read)
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise CorruptStateError(f"Value under {key!r} in {self.path} is not a string")
        return value

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._update, key, value)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._update, key, None)

    # -- File I/O -----------------------------------------------------------

    def _read(self) -> Dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            raise CorruptStateError(f"Storage file {self.path} is not valid JSON") from exc
        if not isinstance(data, dict):
            raise CorruptStateError(f"Storage file {self.path} does not hold an object")
        return data

    def _update(self, key: str, value: Optional[str]) -> None:
        data = self._read()
        if value is None:
            if key not in data:
                return
            del data[key]
        else:
            data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=self.path.name + ".", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        finally:
            if os.path.exists(tmp):
                os.unlink(tmp)
        log.debug("Wrote %s (%d key(s))", self.path, len(data))
