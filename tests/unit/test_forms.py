import pytest
from pydantic import ValidationError

from charity.models import BeneficiaryInput, ContactMessageInput, EmployeeCreate, JobApplicationInput, VolunteerInput
from charity.utils.validators import first_error

BENEFICIARY = {
    "fullName": "محمد أحمد",
    "nationalId": "1234567890",
    "address": "Riyadh, Olaya street",
    "phone": "0501234567",
    "email": "Beneficiary@Example.com",
    "assistanceType": "food",
}

JOB_APPLICATION = {
    "fullName": "Layla Hassan",
    "experience": "Three years of casework",
    "qualifications": "بكالوريوس",
    "skills": "Arabic, English, Excel",
    "email": "layla@example.com",
    "phone": "0501234567",
}


def _first(schema, payload):
    with pytest.raises(ValidationError) as exc_info:
        schema.model_validate(payload)
    return first_error(exc_info.value)


def test_valid_beneficiary_normalises_email():
    payload = BeneficiaryInput.model_validate(BENEFICIARY)

    assert payload.full_name == "محمد أحمد"
    assert payload.to_wire()["email"] == "beneficiary@example.com"
    assert set(payload.to_wire()) == set(BENEFICIARY)


def test_beneficiary_name_must_be_arabic():
    message, field = _first(BeneficiaryInput, {**BENEFICIARY, "fullName": "John Smith"})

    assert message == "Name must contain Arabic letters only"
    assert field == "fullName"


def test_length_rule_reported_before_script_rule():
    message, _ = _first(BeneficiaryInput, {**BENEFICIARY, "fullName": "J"})

    assert message == "Name must be at least 2 characters"


def test_first_invalid_field_wins():
    message, field = _first(
        BeneficiaryInput,
        {**BENEFICIARY, "nationalId": "123", "email": "not-an-email"},
    )

    assert message == "National ID must be exactly 10 digits"
    assert field == "nationalId"


def test_missing_field_is_reported():
    payload = {"name": "Ali", "email": "ali@example.com", "phone": "0501234567"}

    message, field = _first(ContactMessageInput, payload)

    assert message == "Field required"
    assert field == "message"


def test_contact_message_length():
    payload = {"name": "Ali", "email": "ali@example.com", "phone": "0501234567", "message": "hi"}

    assert _first(ContactMessageInput, payload)[0] == "Message is too short"


def test_job_application_rejects_unknown_qualification():
    message, field = _first(JobApplicationInput, {**JOB_APPLICATION, "qualifications": "PhD"})

    assert message == "Please choose an education level"
    assert field == "qualifications"


@pytest.mark.parametrize("cv_url", [None, ""])
def test_job_application_cv_url_is_optional(cv_url):
    payload = JobApplicationInput.model_validate({**JOB_APPLICATION, "cvUrl": cv_url})

    assert payload.cv_url == cv_url


def test_job_application_rejects_malformed_cv_url():
    message, _ = _first(JobApplicationInput, {**JOB_APPLICATION, "cvUrl": "cv.pdf"})

    assert message == "CV link is invalid"


def test_volunteer_phone_only_checks_length():
    payload = VolunteerInput.model_validate(
        {
            "name": "Sami",
            "email": "SAMI@example.com",
            "phone": "+966 50 123",
            "experience": "Weekend food drives",
        }
    )

    assert payload.phone == "+966 50 123"
    assert payload.email == "sami@example.com"
    assert "opportunityTitle" not in payload.to_wire()


def test_phone_pattern_for_contact_form():
    payload = {"name": "Ali", "email": "ali@example.com", "phone": "05-0123", "message": "Hello there, team"}

    assert _first(ContactMessageInput, payload)[0] == "Phone number is invalid"


@pytest.mark.parametrize("email", ["ali@x..com", "ali@", "ali example@x.com"])
def test_form_email_uses_the_directory_email_rule(email):
    payload = {"name": "Ali", "email": email, "phone": "0501234567", "message": "Hello there, team"}

    message, field = _first(ContactMessageInput, payload)

    assert message == "Email address is invalid"
    assert field == "email"
    with pytest.raises(ValidationError):
        EmployeeCreate(name="Ali", email=email)
