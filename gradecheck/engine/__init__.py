"""Grade-resolution engine.

Public API:
  run_pipeline        : Fetch and resolve current grades -> list[GradeRecord]
  resolve_letter_grade: Map a numeric score onto the letter-grade scale
  select_period       : Pick the most recent grading period for a term
  build_record        : Combine course, period and enrollment into a GradeRecord
  GradesError         : Base of the fatal error hierarchy (see errors.py)
"""

from gradecheck.engine.aggregator import build_record
from gradecheck.engine.errors import (
    AuthError,
    CourseListError,
    ErrorKind,
    GradesError,
    ProfileError,
    TransportError,
)
from gradecheck.engine.grades import resolve_letter_grade
from gradecheck.engine.models import GradeRecord
from gradecheck.engine.periods import select_period
from gradecheck.engine.pipeline import run_pipeline

__all__ = [
    "AuthError",
    "CourseListError",
    "ErrorKind",
    "GradeRecord",
    "GradesError",
    "ProfileError",
    "TransportError",
    "build_record",
    "resolve_letter_grade",
    "run_pipeline",
    "select_period",
]
