"""Public form intake endpoints."""

from __future__ import annotations

import asyncio
from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from charity.api.dependencies import get_audit_log, get_submissions
from charity.models import BeneficiaryInput, ContactMessageInput, JobApplicationInput, VolunteerInput
from charity.models.forms import FormPayload
from charity.storage import SubmissionRepository
from charity.storage.submissions import BENEFICIARIES, CONTACTS, JOBS, VOLUNTEERS
from charity.utils.audit import AuditLog
from charity.utils.monitoring import observe_submission

router = APIRouter(tags=["forms"])


async def _accept(
    kind: str,
    action: str,
    payload: FormPayload,
    audit_details: Dict[str, Any],
    submissions: SubmissionRepository,
    audit_log: AuditLog,
) -> Dict[str, Any]:
    record = await asyncio.to_thread(submissions[kind].create, payload.to_wire())
    await asyncio.to_thread(audit_log.record, action, f"{kind}:{audit_details['email']}", audit_details)
    observe_submission(kind)
    return record


@router.post("/beneficiaries", status_code=status.HTTP_201_CREATED)
async def create_beneficiary(
    payload: BeneficiaryInput,
    submissions: SubmissionRepository = Depends(get_submissions),
    audit_log: AuditLog = Depends(get_audit_log),
) -> Dict[str, Any]:
    """Register a request for assistance."""

    details = {
        "fullName": payload.full_name,
        "email": payload.email,
        "phone": payload.phone,
        "assistanceType": payload.assistance_type,
    }
    return await _accept(BENEFICIARIES, "create_beneficiary", payload, details, submissions, audit_log)


@router.post("/jobs/apply", status_code=status.HTTP_201_CREATED)
async def apply_job(
    payload: JobApplicationInput,
    submissions: SubmissionRepository = Depends(get_submissions),
    audit_log: AuditLog = Depends(get_audit_log),
) -> Dict[str, Any]:
    details = {
        "fullName": payload.full_name,
        "email": payload.email,
        "phone": payload.phone,
        "qualifications": payload.qualifications,
    }
    return await _accept(JOBS, "create_job", payload, details, submissions, audit_log)


@router.post("/contact", status_code=status.HTTP_201_CREATED)
async def send_contact_message(
    payload: ContactMessageInput,
    submissions: SubmissionRepository = Depends(get_submissions),
    audit_log: AuditLog = Depends(get_audit_log),
) -> Dict[str, Any]:
    details = {"name": payload.name, "email": payload.email, "phone": payload.phone}
    return await _accept(CONTACTS, "create_contact", payload, details, submissions, audit_log)


@router.post("/volunteers", status_code=status.HTTP_201_CREATED)
async def register_volunteer(
    payload: VolunteerInput,
    submissions: SubmissionRepository = Depends(get_submissions),
    audit_log: AuditLog = Depends(get_audit_log),
) -> Dict[str, Any]:
    details = {
        "name": payload.name,
        "email": payload.email,
        "phone": payload.phone,
        "opportunityTitle": payload.opportunity_title,
    }
    return await _accept(VOLUNTEERS, "create_volunteer", payload, details, submissions, audit_log)
