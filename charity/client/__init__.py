from .mutations import (
    BENEFICIARY_MUTATION,
    CONTACT_MESSAGE_MUTATION,
    JOB_APPLICATION_MUTATION,
    VOLUNTEER_MUTATION,
    CharityClient,
    FormMutation,
    SubmissionError,
    parse_response_body,
)
from .notifications import LoggingNotifier, Notifier, Toast, ToastQueue, ToastVariant

__all__ = [
    "BENEFICIARY_MUTATION",
    "CONTACT_MESSAGE_MUTATION",
    "CharityClient",
    "FormMutation",
    "JOB_APPLICATION_MUTATION",
    "LoggingNotifier",
    "Notifier",
    "SubmissionError",
    "Toast",
    "ToastQueue",
    "ToastVariant",
    "VOLUNTEER_MUTATION",
    "parse_response_body",
]
