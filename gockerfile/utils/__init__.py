"""Utilities for gockerfile."""

from .project_detector import ProjectDetector

__all__ = [
    'ProjectDetector'
]
