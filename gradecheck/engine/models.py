"""Typed views over Canvas API payloads and the output GradeRecord.

All of these live for a single pipeline run. ``from_api`` constructors read
the Canvas field names; nothing here talks to the network.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp. Naive values are treated as UTC.

    Returns None for missing or unparseable input.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Unparseable timestamp: %r", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class StudentProfile:
    id: Any
    name: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> StudentProfile:
        return cls(id=data.get("id"), name=data.get("name"))


@dataclass(frozen=True)
class Course:
    id: Any
    name: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Course:
        return cls(id=data.get("id"), name=data.get("name"))


@dataclass(frozen=True)
class GradingPeriod:
    id: Any
    title: str | None = None
    end_date: str | None = None

    @property
    def end_at(self) -> datetime | None:
        return parse_timestamp(self.end_date)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> GradingPeriod:
        return cls(
            id=data.get("id"),
            title=data.get("title"),
            end_date=data.get("end_date"),
        )


@dataclass(frozen=True)
class Enrollment:
    current_score: Any = None
    last_activity_at: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Enrollment:
        grades = data.get("grades") or {}
        return cls(
            current_score=grades.get("current_score") if isinstance(grades, dict) else None,
            last_activity_at=data.get("last_activity_at"),
        )


@dataclass(frozen=True)
class GradeRecord:
    """One course's resolved grade for the authenticated student."""

    student_name: str | None
    student_id: Any
    course_name: str | None
    course_id: Any
    current_score: str
    """Raw score with a ``%`` suffix, e.g. ``"92%"`` (``"null%"`` when absent)."""
    current_grade: str
    last_activity: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "studentName": self.student_name,
            "studentId": self.student_id,
            "courseName": self.course_name,
            "courseId": self.course_id,
            "currentScore": self.current_score,
            "currentGrade": self.current_grade,
            "lastActivity": self.last_activity,
        }
