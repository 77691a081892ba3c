import pytest

from charity.core.config import settings
from charity.storage import EmployeeDirectory

PRESIDENT_EMAIL = "president@charity.org"
HEAD_KEY = "head-key-for-tests"


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DATA_DIR", tmp_path)
    monkeypatch.setattr(settings, "EMPLOYEES_FILE", None)
    monkeypatch.setattr(settings, "AUDIT_LOG_FILE", None)
    monkeypatch.setattr(settings, "PRESIDENT_EMAIL", None)
    monkeypatch.setattr(settings, "HEAD_KEY", None)
    return tmp_path


@pytest.fixture
def directory(data_dir):
    return EmployeeDirectory(data_dir / "employees.json")


@pytest.fixture
def president_settings(data_dir, monkeypatch):
    monkeypatch.setattr(settings, "PRESIDENT_EMAIL", PRESIDENT_EMAIL)
    monkeypatch.setattr(settings, "HEAD_KEY", HEAD_KEY)
    return settings
