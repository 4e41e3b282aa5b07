"""Configuration loading, validation, and defaults."""

from gradecheck.config.loader import load_config
from gradecheck.config.schema import GradesConfig, ScaleTier

__all__ = ["load_config", "GradesConfig", "ScaleTier"]
