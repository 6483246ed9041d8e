"""
User-facing notices emitted by cart and checkout operations.

Notices are fire-and-forget: a sink receives each one and nothing it
returns is consumed. Sinks never affect cart state.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class NoticeVariant(str, Enum):
    """Visual weight of a notice."""

    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notice:
    """A single toast-style message for the UI layer."""

    title: str
    description: Optional[str] = None
    variant: NoticeVariant = NoticeVariant.DEFAULT


NotificationSink = Callable[[Notice], None]


class NoticeCollector:
    """Sink that keeps every notice in order. Used by the console demo and tests."""

    def __init__(self) -> None:
        self.notices: list[Notice] = []

    def __call__(self, notice: Notice) -> None:
        self.notices.append(notice)

    @property
    def titles(self) -> list[str]:
        return [n.title for n in self.notices]

    def last(self) -> Optional[Notice]:
        return self.notices[-1] if self.notices else None

    def clear(self) -> None:
        self.notices.clear()


def log_notice(notice: Notice) -> None:
    """Default sink: write the notice to the log."""
    level = logging.WARNING if notice.variant == NoticeVariant.DESTRUCTIVE else logging.INFO
    if notice.description:
        logger.log(level, "%s: %s", notice.title, notice.description)
    else:
        logger.log(level, "%s", notice.title)
