"""Fatal error kinds raised while fetching grades.

Every error aborts the run. Callers can branch on the exception class or on
``exc.kind``.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    AUTH = "auth"
    PROFILE = "profile"
    COURSE_LIST = "course_list"
    TRANSPORT = "transport"


class GradesError(Exception):
    """Base class for grade-pipeline errors."""

    kind: ErrorKind


class AuthError(GradesError):
    """Raised when the profile endpoint rejects the access token."""

    kind = ErrorKind.AUTH


class ProfileError(GradesError):
    """Raised when the profile response carries no usable identity."""

    kind = ErrorKind.PROFILE


class CourseListError(GradesError):
    """Raised when the active-course response is not a list."""

    kind = ErrorKind.COURSE_LIST


class TransportError(GradesError):
    """Raised when a request fails or its body cannot be decoded."""

    kind = ErrorKind.TRANSPORT
