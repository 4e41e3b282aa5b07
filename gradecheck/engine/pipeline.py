"""Grade pipeline orchestrator.

Runs one strictly sequential pass for the authenticated student:
  1. Fetch the profile (users/self)
  2. Fetch active courses
  3. Per course, in API order:
       a. fetch grading periods and select the target term's period
       b. fetch the enrollment for that period
       c. aggregate into a GradeRecord
  4. Return records in course order

Any fatal error aborts the whole run; records gathered so far are dropped.
Courses without a matching period or enrollment are skipped silently.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol
from urllib.parse import urlencode

from gradecheck.config.defaults import CANVAS_DEFAULTS, DEFAULT_GRADING_TERM
from gradecheck.config.schema import GradesConfig
from gradecheck.engine.aggregator import build_record
from gradecheck.engine.errors import AuthError, CourseListError, ProfileError
from gradecheck.engine.models import (
    Course,
    Enrollment,
    GradeRecord,
    GradingPeriod,
    StudentProfile,
)
from gradecheck.engine.periods import select_period

logger = logging.getLogger(__name__)


class HttpClient(Protocol):
    """The single transport capability the pipeline depends on."""

    def get(self, url: str, headers: Mapping[str, str]) -> Any: ...


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------

def api_url(domain: str, path: str, **params: Any) -> str:
    """Build ``https://{domain}/api/v1/{path}`` with optional query params.

    ``domain`` may be a bare host or already carry a scheme.
    """
    base = domain.strip().rstrip("/")
    if not base.startswith(("http://", "https://")):
        base = f"https://{base}"
    url = f"{base}{CANVAS_DEFAULTS['api_prefix']}/{path.lstrip('/')}"
    if params:
        url = f"{url}?{urlencode(params)}"
    return url


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _is_invalid_token(payload: Any) -> bool:
    if not isinstance(payload, dict):
        return False
    errors = payload.get("errors")
    if not isinstance(errors, list) or not errors:
        return False
    first = errors[0]
    return (
        isinstance(first, dict)
        and first.get("message") == CANVAS_DEFAULTS["invalid_token_message"]
    )


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------

def _fetch_profile(
    client: HttpClient, domain: str, headers: dict[str, str]
) -> StudentProfile:
    profile = client.get(api_url(domain, "users/self"), headers)

    if _is_invalid_token(profile):
        raise AuthError("The Canvas API token is invalid.")

    if not isinstance(profile, dict) or not profile.get("id"):
        logger.error("Error fetching user profile from Canvas: %r", profile)
        raise ProfileError("Could not fetch user profile from Canvas.")

    return StudentProfile.from_api(profile)


def _fetch_courses(
    client: HttpClient, domain: str, headers: dict[str, str]
) -> list[Course]:
    courses = client.get(
        api_url(domain, "courses", enrollment_state="active"), headers
    )

    if not isinstance(courses, list):
        logger.error("Invalid response when fetching courses: %r", courses)
        raise CourseListError("Did not receive a valid list of courses.")

    return [Course.from_api(c) for c in courses if isinstance(c, dict)]


def _fetch_grading_periods(
    client: HttpClient, domain: str, headers: dict[str, str], course: Course
) -> list[GradingPeriod] | None:
    payload = client.get(
        api_url(domain, f"courses/{course.id}/grading_periods"), headers
    )
    periods = payload.get("grading_periods") if isinstance(payload, dict) else None
    if not isinstance(periods, list):
        return None
    return [GradingPeriod.from_api(p) for p in periods if isinstance(p, dict)]


def _fetch_enrollments(
    client: HttpClient,
    domain: str,
    headers: dict[str, str],
    course: Course,
    student: StudentProfile,
    period: GradingPeriod,
) -> list[Enrollment | Any] | None:
    enrollments = client.get(
        api_url(
            domain,
            f"courses/{course.id}/enrollments",
            user_id=student.id,
            grading_period_id=period.id,
        ),
        headers,
    )
    if not isinstance(enrollments, list):
        return None
    # Malformed entries stay in place so only the first entry is ever used
    return [Enrollment.from_api(e) if isinstance(e, dict) else e for e in enrollments]


# ---------------------------------------------------------------------------
# Main pipeline
# ---------------------------------------------------------------------------

def _collect_grades(
    auth_token: str,
    domain: str,
    config: GradesConfig,
    http_client: HttpClient,
) -> list[GradeRecord]:
    headers = auth_headers(auth_token)

    student = _fetch_profile(http_client, domain, headers)
    courses = _fetch_courses(http_client, domain, headers)

    grading_term = config.grading_term or DEFAULT_GRADING_TERM
    records: list[GradeRecord] = []
    skipped = 0

    logger.info("Getting data...")

    for course in courses:
        periods = _fetch_grading_periods(http_client, domain, headers, course)
        period = select_period(periods, grading_term)
        if period is None:
            skipped += 1
            logger.debug("  %s: no %r grading period", course.name, grading_term)
            continue

        logger.info("Fetching grades for %s (%s)", course.name, period.title)
        enrollments = _fetch_enrollments(
            http_client, domain, headers, course, student, period
        )
        record = build_record(course, period, enrollments, student, config.scale)
        if record is None:
            skipped += 1
            logger.debug("  %s: no enrollment for period %s", course.name, period.id)
            continue

        records.append(record)

    logger.info(
        "%d course(s) processed: %d graded, %d skipped",
        len(courses),
        len(records),
        skipped,
    )
    return records


def run_pipeline(
    auth_token: str,
    domain: str,
    config: GradesConfig,
    http_client: HttpClient,
) -> list[GradeRecord]:
    """Fetch and resolve the student's current grades.

    Parameters:
        auth_token: Canvas access token, sent as a bearer token.
        domain: Canvas host, e.g. ``school.instructure.com``.
        config: Validated GradesConfig (scale + grading_term).
        http_client: Anything with ``get(url, headers) -> decoded JSON``.

    Returns:
        GradeRecords in course order.

    Raises:
        AuthError, ProfileError, CourseListError: fatal response problems.
        TransportError: from the transport; other transport exceptions
            propagate unchanged.
    """
    try:
        return _collect_grades(auth_token, domain, config, http_client)
    except Exception as e:
        logger.error("Failed to fetch grades: %s", e)
        raise
