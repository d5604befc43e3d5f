"""Value objects for the projects domain."""

from __future__ import annotations

from enum import StrEnum

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 4000


class TaskStatus(StrEnum):
    """Lifecycle status of a task. New tasks start as NEW."""

    NEW = "NEW"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


def validate_title(title: str, kind: str) -> None:
    """Raise ValueError unless the title is 1-255 non-blank characters."""
    if not title or not title.strip() or len(title) > TITLE_MAX_LENGTH:
        raise ValueError(
            f"{kind} title must be between 1 and {TITLE_MAX_LENGTH} characters"
        )


def validate_description(description: str, kind: str) -> None:
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValueError(
            f"{kind} description must be at most {DESCRIPTION_MAX_LENGTH} characters"
        )
