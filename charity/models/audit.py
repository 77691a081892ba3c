from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel


class AuditEntry(BaseModel):
    id: str
    actor: str
    action: str
    details: Optional[Dict[str, Any]] = None
    timestamp: str

    @property
    def occurred_at(self) -> datetime:
        return datetime.fromisoformat(self.timestamp.replace("Z", "+00:00"))
