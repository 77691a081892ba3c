"""Whole-document JSON persistence with per-file writer locks."""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager, suppress
from pathlib import Path
from typing import Any, Dict, Iterator

logger = logging.getLogger(__name__)

_LOCKS: Dict[Path, threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _LOCKS_GUARD:
        lock = _LOCKS.get(path)
        if lock is None:
            lock = _LOCKS[path] = threading.RLock()
        return lock


class JSONFileStore:
    """A single JSON document on disk, read and written as a whole.

    Every read goes back to the file. Writers hold a lock shared by all stores
    pointing at the same path for the duration of their read-modify-write, and
    replace the file atomically so readers never observe a partial write.
    """

    def __init__(self, path: Path | str, default: Dict[str, Any]) -> None:
        self.path = Path(path).resolve()
        self._default = default
        self._lock = _lock_for(self.path)

    def read(self) -> Dict[str, Any]:
        with self._lock:
            self._ensure_file()
            with open(self.path, "r", encoding="utf-8") as handle:
                return json.load(handle)

    @contextmanager
    def transaction(self) -> Iterator[Dict[str, Any]]:
        """Yield the current document for in-place mutation and persist it if it changed."""

        with self._lock:
            document = self.read()
            original = copy.deepcopy(document)
            yield document
            if document != original:
                self._write(document)

    def _ensure_file(self) -> None:
        if self.path.exists():
            return
        logger.info("Creating data file %s", self.path)
        self._write(copy.deepcopy(self._default))

    def _write(self, document: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=2, ensure_ascii=False)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            with suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise

