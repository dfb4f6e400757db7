"""Check outcomes and their status icons."""

from __future__ import annotations

from enum import Enum


class Outcome(str, Enum):
    """Closed set of check outcomes."""

    SUCCESS = "success"
    FAILURE = "failure"
    SKIPPED = "skipped"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> "Outcome":
        """Map a raw status string onto an outcome; anything unrecognized is UNKNOWN."""
        text = str(value or "")
        for member in cls:
            if member is not cls.UNKNOWN and member.value == text:
                return member
        return cls.UNKNOWN

    @property
    def icon(self) -> str:
        return _STATUS_ICON[self]

    @property
    def passed(self) -> bool:
        return self is Outcome.SUCCESS


_STATUS_ICON = {
    Outcome.SUCCESS: "✅",
    Outcome.FAILURE: "❌",
    Outcome.SKIPPED: "⏭️",
    Outcome.UNKNOWN: "❓",
}

