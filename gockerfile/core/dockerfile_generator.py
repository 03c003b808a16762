"""Dockerfile generation logic."""

import logging
import os
import tempfile
from pathlib import Path

from .constants import DOCKERFILE_MODE, DOCKERFILE_NAME
from .dockerfile_template import generate_dockerfile
from .exceptions import WriteError
from ..models.build import BuildConfig

logger = logging.getLogger(__name__)


class DockerfileGenerator:
    """Generates Dockerfiles for Go projects."""

    def __init__(self, project_root: Path):
        """Initialize generator."""
        self.project_root = project_root
        self.dockerfile_path = project_root / DOCKERFILE_NAME

    def render(self, config: BuildConfig) -> str:
        """Render the Dockerfile in memory."""
        return generate_dockerfile(config)

    def write(self, config: BuildConfig) -> Path:
        """Render the Dockerfile and replace the one in the project root.

        Rendering completes before the output is touched, so a failed render
        leaves any existing Dockerfile as it was.
        """
        content = self.render(config).encode("utf-8")

        fd, temp_path = None, None
        try:
            fd, temp_path = tempfile.mkstemp(
                prefix=f".{DOCKERFILE_NAME}.", dir=self.project_root
            )
            with os.fdopen(fd, "wb") as f:
                fd = None
                f.write(content)
            os.chmod(temp_path, DOCKERFILE_MODE)
            os.replace(temp_path, self.dockerfile_path)
            temp_path = None
        except OSError as e:
            raise WriteError(f"Cannot write {self.dockerfile_path}: {e}") from e
        finally:
            if fd is not None:
                os.close(fd)
            if temp_path is not None and os.path.exists(temp_path):
                os.unlink(temp_path)

        logger.info("Wrote %s", self.dockerfile_path)
        return self.dockerfile_path
