"""Models for gockerfile."""

from .build import BuildConfig, DependencyMode

__all__ = [
    'BuildConfig',
    'DependencyMode'
]
