from __future__ import annotations

import json
import os
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, TextIO

from loguru import logger

from ..core.exceptions import PersistenceError


@dataclass
class DataDirConfig:
    data_dir: Path


@contextmanager
def atomic_writer(path: Path) -> Iterator[TextIO]:
    """Write to a temp file next to ``path`` and swap it in on success.

    The previous file stays untouched if anything fails before the replace.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            yield fh
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


class JsonFileStore:
    """One JSON array file holding a whole collection.

    Loaded wholesale, rewritten wholesale on every save.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[Dict[str, Any]]:
        if not self._path.exists():
            logger.debug("No data file at {}, starting empty", self._path)
            return []
        try:
            with self._path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            logger.warning("Could not read {} ({}), starting empty", self._path, e)
            return []
        if not isinstance(data, list):
            logger.warning("Unexpected content in {}, starting empty", self._path)
            return []
        rows = [r for r in data if isinstance(r, dict)]
        logger.debug("Loaded {} records from {}", len(rows), self._path)
        return rows

    def save(self, rows: List[Dict[str, Any]]) -> None:
        try:
            with atomic_writer(self._path) as fh:
                json.dump(rows, fh, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to write {}: {}", self._path, e)
            raise PersistenceError(f"Could not save {self._path.name}: {e}") from e
