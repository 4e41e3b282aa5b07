"""Default values for grade resolution.

A config file normally supplies its own scale; these apply when it does not.
"""

# ---------------------------------------------------------------------------
# Grading term
# ---------------------------------------------------------------------------
DEFAULT_GRADING_TERM = "Term 2"

# ---------------------------------------------------------------------------
# Letter-grade scale (minpercent -> lettergrade)
# ---------------------------------------------------------------------------
DEFAULT_SCALE = [
    {"minpercent": 90, "lettergrade": "A"},
    {"minpercent": 80, "lettergrade": "B"},
    {"minpercent": 70, "lettergrade": "C"},
    {"minpercent": 60, "lettergrade": "D"},
    {"minpercent": 0, "lettergrade": "F"},
]

# Returned whenever a score cannot be mapped to a tier
NO_GRADE = "N/A"

# ---------------------------------------------------------------------------
# Canvas API
# ---------------------------------------------------------------------------
CANVAS_DEFAULTS = {
    "api_prefix": "/api/v1",
    "timeout": 30.0,
    "invalid_token_message": "Invalid access token.",
}
