"""Form submission client.

Every public form goes through the same pipeline: validate locally against the
form's schema, POST the payload as JSON, normalise whatever the server sent
back, and tell the user how it went.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Type, Union

import httpx
from pydantic import ValidationError

from charity.client.notifications import LoggingNotifier, Notifier, Toast, ToastVariant
from charity.core.config import settings
from charity.models import BeneficiaryInput, ContactMessageInput, JobApplicationInput, VolunteerInput
from charity.models.forms import FormPayload
from charity.utils.validators import first_error

logger = logging.getLogger(__name__)

Payload = Union[Mapping[str, Any], FormPayload]


class SubmissionError(Exception):
    """A form submission that was rejected locally, by the server, or in transit."""

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        status_code: Optional[int] = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.status_code = status_code
        self.body = body


def parse_response_body(response: httpx.Response) -> Any:
    """Empty body -> ``None``; JSON when it parses; otherwise ``{"message": <text>}``."""

    text = response.text
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return {"message": text}


@dataclass(frozen=True)
class FormMutation:
    schema: Type[FormPayload]
    path: str
    success: Toast
    failure_title: str
    fallback_message: str

    async def submit(self, client: httpx.AsyncClient, notifier: Notifier, data: Payload) -> Any:
        try:
            body = await self._execute(client, data)
        except SubmissionError as exc:
            notifier.notify(Toast(self.failure_title, exc.message, ToastVariant.DESTRUCTIVE))
            raise
        notifier.notify(self.success)
        return body

    async def _execute(self, client: httpx.AsyncClient, data: Payload) -> Any:
        payload: Dict[str, Any] = data.to_wire() if isinstance(data, FormPayload) else dict(data)

        try:
            self.schema.model_validate(payload)
        except ValidationError as exc:
            message, field = first_error(exc)
            raise SubmissionError(message, field=field) from exc

        try:
            response = await client.post(self.path, json=payload)
        except httpx.TransportError as exc:
            logger.warning("POST %s failed: %s", self.path, exc)
            raise SubmissionError(self.fallback_message) from exc

        body = parse_response_body(response)
        if not response.is_success:
            message = body.get("message") if isinstance(body, dict) else None
            raise SubmissionError(
                str(message) if message else self.fallback_message,
                status_code=response.status_code,
                body=body,
            )
        return body


BENEFICIARY_MUTATION = FormMutation(
    schema=BeneficiaryInput,
    path="/api/beneficiaries",
    success=Toast("Submitted successfully", "We received the beneficiary details and will review them shortly."),
    failure_title="Something went wrong",
    fallback_message="Failed to submit the beneficiary details",
)

JOB_APPLICATION_MUTATION = FormMutation(
    schema=JobApplicationInput,
    path="/api/jobs/apply",
    success=Toast(
        "Application received",
        "Thank you for your interest in joining us. We will contact you if your qualifications match.",
    ),
    failure_title="Submission error",
    fallback_message="Failed to submit the application",
)

CONTACT_MESSAGE_MUTATION = FormMutation(
    schema=ContactMessageInput,
    path="/api/contact",
    success=Toast("Message sent", "Thank you for reaching out. We will reply soon."),
    failure_title="Error",
    fallback_message="Failed to send the message",
)

VOLUNTEER_MUTATION = FormMutation(
    schema=VolunteerInput,
    path="/api/volunteers",
    success=Toast("Request received", "Thank you for volunteering with us. We will be in touch soon."),
    failure_title="Submission error",
    fallback_message="Failed to submit the volunteer application",
)


class CharityClient:
    """Async client for the public forms."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        notifier: Optional[Notifier] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout or settings.CLIENT_TIMEOUT_SECONDS,
        )
        self.notifier = notifier or LoggingNotifier()

    async def create_beneficiary(self, data: Payload) -> Any:
        return await BENEFICIARY_MUTATION.submit(self._client, self.notifier, data)

    async def apply_job(self, data: Payload) -> Any:
        return await JOB_APPLICATION_MUTATION.submit(self._client, self.notifier, data)

    async def send_contact_message(self, data: Payload) -> Any:
        return await CONTACT_MESSAGE_MUTATION.submit(self._client, self.notifier, data)

    async def register_volunteer(self, data: Payload) -> Any:
        return await VOLUNTEER_MUTATION.submit(self._client, self.notifier, data)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "CharityClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
