"""Shared test fixtures for gradecheck.

Provides a scale, a config, and a fake transport that serves canned Canvas
payloads keyed by URL.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from gradecheck.config.schema import GradesConfig, ScaleTier

DOMAIN = "school.test"
BASE = f"https://{DOMAIN}/api/v1"


class FakeHttpClient:
    """In-memory HttpClient: ``routes`` maps full URLs to decoded JSON.

    A route value that is an exception instance is raised instead of
    returned. Every call is recorded in ``calls`` as (url, headers).
    """

    def __init__(self, routes: dict[str, Any]) -> None:
        self.routes = routes
        self.calls: list[tuple[str, dict[str, str]]] = []

    def get(self, url: str, headers: Mapping[str, str]) -> Any:
        self.calls.append((url, dict(headers)))
        if url not in self.routes:
            raise LookupError(f"unexpected URL: {url}")
        payload = self.routes[url]
        if isinstance(payload, Exception):
            raise payload
        return payload

    @property
    def urls(self) -> list[str]:
        return [url for url, _ in self.calls]


# ---------------------------------------------------------------------------
# Scale / config
# ---------------------------------------------------------------------------

@pytest.fixture
def abf_scale() -> list[ScaleTier]:
    """Three-tier scale: A >= 90, B >= 80, F >= 0."""
    return [
        ScaleTier(min_percent=90, letter_grade="A"),
        ScaleTier(min_percent=80, letter_grade="B"),
        ScaleTier(min_percent=0, letter_grade="F"),
    ]


@pytest.fixture
def grades_config(abf_scale) -> GradesConfig:
    return GradesConfig(scale=abf_scale, grading_term="Term 2")


# ---------------------------------------------------------------------------
# Canvas payloads
# ---------------------------------------------------------------------------

@pytest.fixture
def alice_routes() -> dict[str, Any]:
    """One student, one course, two 'Term 2' periods, graded in the later one."""
    return {
        f"{BASE}/users/self": {"id": 1, "name": "Alice"},
        f"{BASE}/courses?enrollment_state=active": [{"id": 10, "name": "Math"}],
        f"{BASE}/courses/10/grading_periods": {
            "grading_periods": [
                {"id": 100, "title": "Term 2", "end_date": "2024-01-10"},
                {"id": 101, "title": "Term 2", "end_date": "2024-03-01"},
            ]
        },
        f"{BASE}/courses/10/enrollments?user_id=1&grading_period_id=101": [
            {"grades": {"current_score": 92}, "last_activity_at": "2024-03-05"},
        ],
    }


@pytest.fixture
def alice_client(alice_routes) -> FakeHttpClient:
    return FakeHttpClient(alice_routes)
