"""Public form intake and staff back office for a charity association."""

__version__ = "0.1.0"
