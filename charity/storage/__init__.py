from .employees import EmployeeDirectory, generate_id
from .json_file import JSONFileStore
from .submissions import SUBMISSION_KINDS, SubmissionRepository, SubmissionStore

__all__ = [
    "EmployeeDirectory",
    "JSONFileStore",
    "SUBMISSION_KINDS",
    "SubmissionRepository",
    "SubmissionStore",
    "generate_id",
]
