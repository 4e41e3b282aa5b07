"""gradecheck -- current Canvas grades with letter-grade resolution."""

__version__ = "0.1.0"
