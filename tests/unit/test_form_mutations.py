import json

import httpx
import pytest

from charity.client import (
    BENEFICIARY_MUTATION,
    CONTACT_MESSAGE_MUTATION,
    JOB_APPLICATION_MUTATION,
    VOLUNTEER_MUTATION,
    CharityClient,
    SubmissionError,
    ToastQueue,
    ToastVariant,
    parse_response_body,
)
from charity.models import ContactMessageInput

CONTACT = {
    "name": "Ali",
    "email": "ali@example.com",
    "phone": "0501234567",
    "message": "I would like to donate clothes.",
}


class StubServer:
    """Records requests and answers each with the same canned response."""

    def __init__(self, status_code=201, content=b"", headers=None, error=None):
        self.status_code = status_code
        self.content = content
        self.headers = headers or {}
        self.error = error
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=self.content, headers=self.headers)


def _client(server, toasts):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(server), base_url="http://testserver")
    return CharityClient(notifier=toasts, http_client=http_client)


def test_parse_response_body_variants():
    request = httpx.Request("POST", "http://testserver/api/contact")

    assert parse_response_body(httpx.Response(200, content=b"", request=request)) is None
    assert parse_response_body(httpx.Response(200, content=b'{"id": 1}', request=request)) == {"id": 1}
    assert parse_response_body(httpx.Response(502, content=b"Bad gateway", request=request)) == {
        "message": "Bad gateway"
    }


def test_fallback_messages_are_form_specific():
    assert BENEFICIARY_MUTATION.fallback_message == "Failed to submit the beneficiary details"
    assert JOB_APPLICATION_MUTATION.fallback_message == "Failed to submit the application"
    assert CONTACT_MESSAGE_MUTATION.fallback_message == "Failed to send the message"
    assert VOLUNTEER_MUTATION.fallback_message == "Failed to submit the volunteer application"


@pytest.mark.asyncio
async def test_posts_json_payload_to_form_endpoint():
    server = StubServer(201, json.dumps({"id": 7}).encode(), {"content-type": "application/json"})
    toasts = ToastQueue()

    async with _client(server, toasts) as client:
        body = await client.send_contact_message(CONTACT)

    assert body == {"id": 7}
    [request] = server.requests
    assert request.method == "POST"
    assert request.url.path == "/api/contact"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == CONTACT
    assert toasts.latest() == CONTACT_MESSAGE_MUTATION.success


@pytest.mark.asyncio
async def test_accepts_model_instances():
    server = StubServer(201, b"{}")
    toasts = ToastQueue()

    async with _client(server, toasts) as client:
        await client.send_contact_message(ContactMessageInput.model_validate(CONTACT))

    assert json.loads(server.requests[0].content) == CONTACT


@pytest.mark.asyncio
async def test_invalid_payload_never_reaches_the_server():
    server = StubServer()
    toasts = ToastQueue()
    payload = {key: value for key, value in CONTACT.items() if key != "message"}

    async with _client(server, toasts) as client:
        with pytest.raises(SubmissionError) as exc_info:
            await client.send_contact_message(payload)

    assert server.requests == []
    assert exc_info.value.message == "Field required"
    assert exc_info.value.field == "message"
    toast = toasts.latest()
    assert toast.variant is ToastVariant.DESTRUCTIVE
    assert toast.description == "Field required"


@pytest.mark.asyncio
async def test_server_error_message_is_surfaced():
    server = StubServer(500, b'{"message": "db down"}', {"content-type": "application/json"})
    toasts = ToastQueue()

    async with _client(server, toasts) as client:
        with pytest.raises(SubmissionError) as exc_info:
            await client.send_contact_message(CONTACT)

    assert exc_info.value.message == "db down"
    assert exc_info.value.status_code == 500
    assert toasts.latest().description == "db down"
    assert toasts.latest().is_error


@pytest.mark.asyncio
async def test_empty_success_body_returns_none():
    server = StubServer(200, b"")
    toasts = ToastQueue()

    async with _client(server, toasts) as client:
        body = await client.register_volunteer(
            {"name": "Sami", "email": "sami@example.com", "phone": "0501234567", "experience": "Weekend food drives"}
        )

    assert body is None
    assert toasts.toasts == [VOLUNTEER_MUTATION.success]
    assert not toasts.latest().is_error


@pytest.mark.asyncio
async def test_plain_text_error_body_becomes_message():
    server = StubServer(502, b"Bad gateway")
    toasts = ToastQueue()

    async with _client(server, toasts) as client:
        with pytest.raises(SubmissionError) as exc_info:
            await client.send_contact_message(CONTACT)

    assert exc_info.value.message == "Bad gateway"
    assert exc_info.value.body == {"message": "Bad gateway"}


@pytest.mark.asyncio
async def test_error_without_message_uses_fallback():
    server = StubServer(400, b"[]")
    toasts = ToastQueue()

    async with _client(server, toasts) as client:
        with pytest.raises(SubmissionError) as exc_info:
            await client.send_contact_message(CONTACT)

    assert exc_info.value.message == "Failed to send the message"


@pytest.mark.asyncio
async def test_transport_failure_uses_fallback():
    server = StubServer(error=httpx.ConnectError("connection refused"))
    toasts = ToastQueue()
    application = {
        "fullName": "Layla Hassan",
        "experience": "Three years of casework",
        "qualifications": "ماجستير",
        "skills": "Case management",
        "email": "layla@example.com",
        "phone": "0501234567",
    }

    async with _client(server, toasts) as client:
        with pytest.raises(SubmissionError) as exc_info:
            await client.apply_job(application)

    assert exc_info.value.message == "Failed to submit the application"
    assert exc_info.value.status_code is None
    assert toasts.latest().title == JOB_APPLICATION_MUTATION.failure_title


@pytest.mark.asyncio
async def test_client_does_not_close_borrowed_http_client():
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(StubServer()), base_url="http://testserver")

    async with CharityClient(http_client=http_client):
        pass

    assert not http_client.is_closed
    await http_client.aclose()
