"""Pydantic models for config.yaml validation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from gradecheck.config.defaults import (
    CANVAS_DEFAULTS,
    DEFAULT_GRADING_TERM,
    DEFAULT_SCALE,
)


# ---------------------------------------------------------------------------
# Scale
# ---------------------------------------------------------------------------

class ScaleTier(BaseModel):
    """One threshold/label pair of the letter-grade scale."""

    min_percent: float = Field(alias="minpercent", allow_inf_nan=False)
    letter_grade: str = Field(alias="lettergrade")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("letter_grade")
    @classmethod
    def letter_grade_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("lettergrade must not be empty")
        return value


def _default_scale() -> list[ScaleTier]:
    return [ScaleTier.model_validate(tier) for tier in DEFAULT_SCALE]


# ---------------------------------------------------------------------------
# Canvas connection
# ---------------------------------------------------------------------------

class CanvasConfig(BaseModel):
    domain: str = ""
    token: str = ""
    timeout: float = CANVAS_DEFAULTS["timeout"]

    @field_validator("timeout")
    @classmethod
    def timeout_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"timeout must be positive, got {value}")
        return value


# ---------------------------------------------------------------------------
# Top-Level Config
# ---------------------------------------------------------------------------

class GradesConfig(BaseModel):
    """Root configuration model, validated once and passed into the pipeline."""

    scale: list[ScaleTier] = Field(default_factory=_default_scale)
    grading_term: str = DEFAULT_GRADING_TERM
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def coerce_none_to_defaults(cls, data: Any) -> Any:
        """YAML parses empty keys as None. Coerce to proper defaults."""
        if isinstance(data, dict):
            data = dict(data)
            if "scale" in data and data["scale"] is None:
                data["scale"] = []
            if not data.get("grading_term"):
                data.pop("grading_term", None)
            if "canvas" in data and data["canvas"] is None:
                data.pop("canvas")
        return data
