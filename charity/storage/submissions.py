"""File-backed storage for public form submissions."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from charity.storage.json_file import JSONFileStore

logger = logging.getLogger(__name__)

BENEFICIARIES = "beneficiaries"
JOBS = "jobs"
CONTACTS = "contacts"
VOLUNTEERS = "volunteers"

SUBMISSION_KINDS = (BENEFICIARIES, JOBS, CONTACTS, VOLUNTEERS)


class SubmissionStore:
    """One kind of submission, stored as ``{"<kind>": [...], "nextId": n}``."""

    def __init__(self, kind: str, path: Path | str) -> None:
        self.kind = kind
        self._store = JSONFileStore(path, default={kind: [], "nextId": 1})

    def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        with self._store.transaction() as document:
            records = document.setdefault(self.kind, [])
            next_id = int(document.get("nextId") or len(records) + 1)
            record = {
                **payload,
                "id": next_id,
                "createdAt": datetime.now(timezone.utc).isoformat(),
            }
            records.append(record)
            document["nextId"] = next_id + 1

        logger.info("Stored %s submission %s", self.kind, record["id"])
        return record

    def count(self) -> int:
        return len(self._store.read().get(self.kind) or [])

    def recent(self, limit: int = 5) -> List[Dict[str, Any]]:
        records = self._store.read().get(self.kind) or []
        ordered = sorted(records, key=lambda item: (item.get("createdAt", ""), item.get("id", 0)), reverse=True)
        return ordered[: max(limit, 0)]


class SubmissionRepository:
    """Submission stores for every public form, rooted in one data directory."""

    def __init__(self, data_dir: Path | str) -> None:
        root = Path(data_dir)
        self._stores = {kind: SubmissionStore(kind, root / f"{kind}.json") for kind in SUBMISSION_KINDS}

    def __getitem__(self, kind: str) -> SubmissionStore:
        return self._stores[kind]

    def counts(self) -> Dict[str, int]:
        return {kind: store.count() for kind, store in self._stores.items()}

    def recent(self, limit: int = 5) -> Dict[str, List[Dict[str, Any]]]:
        return {kind: store.recent(limit) for kind, store in self._stores.items()}
