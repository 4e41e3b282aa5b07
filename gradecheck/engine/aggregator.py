"""Per-course aggregation into a GradeRecord."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from gradecheck.config.schema import ScaleTier
from gradecheck.engine.grades import resolve_letter_grade
from gradecheck.engine.models import (
    Course,
    Enrollment,
    GradeRecord,
    GradingPeriod,
    StudentProfile,
)


def format_score(score: Any) -> str:
    """Render the raw score with a ``%`` suffix.

    The raw value is passed through: an absent score becomes ``"null%"``.
    Integral floats drop their ``.0`` so ``92.0`` and ``92`` both render
    as ``"92%"``.
    """
    if score is None:
        return "null%"
    if isinstance(score, float) and score.is_integer():
        score = int(score)
    return f"{score}%"


def build_record(
    course: Course,
    selected_period: GradingPeriod | None,
    enrollments: Any,
    student: StudentProfile,
    scale: Sequence[ScaleTier],
) -> GradeRecord | None:
    """Build the output record for one course, or None to skip it.

    A course is skipped when no grading period was selected or no enrollment
    came back. Only the first enrollment is used.
    """
    if selected_period is None:
        return None
    if not isinstance(enrollments, (list, tuple)) or not enrollments:
        return None

    enrollment = enrollments[0]
    if isinstance(enrollment, dict):
        enrollment = Enrollment.from_api(enrollment)
    elif not isinstance(enrollment, Enrollment):
        return None

    return GradeRecord(
        student_name=student.name,
        student_id=student.id,
        course_name=course.name,
        course_id=course.id,
        current_score=format_score(enrollment.current_score),
        current_grade=resolve_letter_grade(enrollment.current_score, scale),
        last_activity=enrollment.last_activity_at,
    )
