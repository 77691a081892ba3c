"""User-facing notifications raised by form submissions."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, List, Protocol

logger = logging.getLogger(__name__)


class ToastVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Toast:
    title: str
    description: str
    variant: ToastVariant = ToastVariant.DEFAULT

    @property
    def is_error(self) -> bool:
        return self.variant is ToastVariant.DESTRUCTIVE


class Notifier(Protocol):
    def notify(self, toast: Toast) -> None:
        ...


class ToastQueue:
    """Keeps the most recent toasts for a UI layer to render."""

    def __init__(self, limit: int = 5) -> None:
        self._toasts: Deque[Toast] = deque(maxlen=limit)

    def notify(self, toast: Toast) -> None:
        self._toasts.append(toast)

    @property
    def toasts(self) -> List[Toast]:
        return list(self._toasts)

    def latest(self) -> Toast | None:
        return self._toasts[-1] if self._toasts else None

    def clear(self) -> None:
        self._toasts.clear()


class LoggingNotifier:
    def notify(self, toast: Toast) -> None:
        level = logging.WARNING if toast.is_error else logging.INFO
        logger.log(level, "%s: %s", toast.title, toast.description)
