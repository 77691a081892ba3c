"""Staff dashboard endpoints."""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from charity.api.dependencies import get_current_employee, get_submissions
from charity.models import Employee
from charity.storage import SubmissionRepository
from charity.utils.validators import parse_limit

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats")
async def dashboard_stats(
    _: Employee = Depends(get_current_employee),
    submissions: SubmissionRepository = Depends(get_submissions),
) -> Dict[str, int]:
    """Submission counts per form plus the overall total."""

    stats = await asyncio.to_thread(submissions.counts)
    stats["total"] = sum(stats.values())
    return stats


@router.get("/recent")
async def dashboard_recent(
    limit: Optional[str] = None,
    _: Employee = Depends(get_current_employee),
    submissions: SubmissionRepository = Depends(get_submissions),
) -> Dict[str, List[Dict[str, Any]]]:
    """Newest submissions per form; an unreadable ``limit`` means 5."""

    return await asyncio.to_thread(submissions.recent, parse_limit(limit, 5))
