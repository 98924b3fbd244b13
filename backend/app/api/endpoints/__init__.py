"""API endpoints package."""

from . import (
    certificates,
    courses,
    enrollments,
)

__all__ = [
    "certificates",
    "courses",
    "enrollments",
]
