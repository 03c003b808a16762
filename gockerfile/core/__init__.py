"""Core functionality for gockerfile."""

from .dockerfile_generator import DockerfileGenerator
from .dockerfile_template import generate_dockerfile

__all__ = [
    'DockerfileGenerator',
    'generate_dockerfile'
]
