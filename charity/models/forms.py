"""Public form payloads.

Each field validator applies its rules in order and stops at the first one that
fails, so the first reported error is always the most basic problem with the
first invalid field.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from charity.utils.validators import (
    ARABIC_NAME_PATTERN,
    INVALID_EMAIL_MESSAGE,
    NATIONAL_ID_PATTERN,
    PHONE_PATTERN,
    is_email,
    is_url,
    rule,
)

# Accepted education levels, primary school through doctorate.
QUALIFICATIONS: tuple[str, ...] = (
    "ابتدائي",
    "متوسط",
    "ثانوي",
    "دبلوم",
    "بكالوريوس",
    "ماجستير",
    "دكتوراه",
)


class FormPayload(BaseModel):
    """Base for public form payloads; wire names are camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


def _check_name(value: str) -> str:
    rule(len(value) >= 2, "Name must be at least 2 characters")
    rule(len(value) <= 100, "Name is too long")
    return value


def _check_email(value: str) -> str:
    rule(is_email(value), INVALID_EMAIL_MESSAGE)
    return value.lower()


def _check_phone(value: str) -> str:
    rule(bool(PHONE_PATTERN.match(value)), "Phone number is invalid")
    return value


class BeneficiaryInput(FormPayload):
    full_name: str
    national_id: str
    address: str
    phone: str
    email: str
    assistance_type: str

    @field_validator("full_name")
    def _full_name(cls, value: str) -> str:
        _check_name(value)
        rule(bool(ARABIC_NAME_PATTERN.match(value)), "Name must contain Arabic letters only")
        return value

    @field_validator("national_id")
    def _national_id(cls, value: str) -> str:
        rule(len(value) >= 1, "National ID is required")
        rule(bool(NATIONAL_ID_PATTERN.match(value)), "National ID must be exactly 10 digits")
        return value

    @field_validator("address")
    def _address(cls, value: str) -> str:
        rule(len(value) >= 5, "Address is too short")
        rule(len(value) <= 200, "Address is too long")
        return value

    @field_validator("phone")
    def _phone(cls, value: str) -> str:
        return _check_phone(value)

    @field_validator("email")
    def _email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("assistance_type")
    def _assistance_type(cls, value: str) -> str:
        rule(len(value) >= 2, "Assistance type is required")
        rule(len(value) <= 100, "Assistance type is too long")
        return value


class JobApplicationInput(FormPayload):
    full_name: str
    experience: str
    qualifications: str
    skills: str
    email: str
    phone: str
    cv_url: Optional[str] = None

    @field_validator("full_name")
    def _full_name(cls, value: str) -> str:
        return _check_name(value)

    @field_validator("experience")
    def _experience(cls, value: str) -> str:
        rule(len(value) >= 5, "Experience description is too short")
        rule(len(value) <= 1000, "Experience description is too long")
        return value

    @field_validator("qualifications")
    def _qualifications(cls, value: str) -> str:
        rule(value in QUALIFICATIONS, "Please choose an education level")
        return value

    @field_validator("skills")
    def _skills(cls, value: str) -> str:
        rule(len(value) >= 3, "Skills description is too short")
        rule(len(value) <= 500, "Skills description is too long")
        return value

    @field_validator("email")
    def _email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("phone")
    def _phone(cls, value: str) -> str:
        return _check_phone(value)

    @field_validator("cv_url")
    def _cv_url(cls, value: Optional[str]) -> Optional[str]:
        if value:
            rule(is_url(value), "CV link is invalid")
        return value


class ContactMessageInput(FormPayload):
    name: str
    email: str
    phone: str
    message: str

    @field_validator("name")
    def _name(cls, value: str) -> str:
        return _check_name(value)

    @field_validator("email")
    def _email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("phone")
    def _phone(cls, value: str) -> str:
        return _check_phone(value)

    @field_validator("message")
    def _message(cls, value: str) -> str:
        rule(len(value) >= 10, "Message is too short")
        rule(len(value) <= 2000, "Message is too long")
        return value


class VolunteerInput(FormPayload):
    name: str
    email: str
    phone: str
    experience: str
    opportunity_title: Optional[str] = None

    @field_validator("name")
    def _name(cls, value: str) -> str:
        rule(len(value) >= 2, "Name must be at least 2 characters")
        return value

    @field_validator("email")
    def _email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("phone")
    def _phone(cls, value: str) -> str:
        rule(len(value) >= 9, "Phone number is invalid")
        return value

    @field_validator("experience")
    def _experience(cls, value: str) -> str:
        rule(len(value) >= 10, "Experience description is too short")
        return value
