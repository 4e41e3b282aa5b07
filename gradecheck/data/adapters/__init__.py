"""External data sources."""

from gradecheck.data.adapters.canvas_client import CanvasClient

__all__ = ["CanvasClient"]
