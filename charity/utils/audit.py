"""Audit logging utilities."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from charity.models.audit import AuditEntry
from charity.storage.employees import generate_id
from charity.storage.json_file import JSONFileStore

logger = logging.getLogger("charity.audit")


class AuditLog:
    """Newest-first audit trail persisted to a JSON file and mirrored to the log."""

    def __init__(self, path: Path | str, *, max_entries: int = 500) -> None:
        self._store = JSONFileStore(path, default={"entries": []})
        self.max_entries = max_entries

    def record(
        self,
        action: str,
        actor: str,
        details: Optional[Dict[str, Any]] = None,
        *,
        timestamp: Optional[str] = None,
    ) -> AuditEntry:
        entry = AuditEntry(
            id=generate_id(),
            actor=actor,
            action=action,
            details=details,
            timestamp=timestamp or datetime.now(timezone.utc).isoformat(),
        )
        with self._store.transaction() as document:
            entries = document.setdefault("entries", [])
            entries.insert(0, entry.model_dump(exclude_none=True))
            del entries[self.max_entries :]

        logger.info(json.dumps(entry.model_dump(exclude_none=True), ensure_ascii=False, default=str))
        return entry

    def entries(
        self,
        limit: int = 100,
        *,
        action: Optional[str] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> List[AuditEntry]:
        raw = self._store.read().get("entries") or []
        selected: List[AuditEntry] = []
        for item in raw[: max(limit, 0)]:
            entry = AuditEntry.model_validate(item)
            if action and entry.action != action:
                continue
            if since and _aware(entry.occurred_at) < _aware(since):
                continue
            if until and _aware(entry.occurred_at) > _aware(until):
                continue
            selected.append(entry)
        return selected


def _aware(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


__all__ = ["AuditLog"]
