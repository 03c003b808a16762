"""Detection of a Go project's dependency mode and import path."""

import logging
import os
import re
from pathlib import Path, PurePath
from typing import Optional

from ..core.constants import LEGACY_LOCK_FILE, MODULE_MANIFEST_FILE, WORKSPACE_DELIMITER
from ..core.exceptions import DetectionError, ManifestError
from ..models.build import BuildConfig

logger = logging.getLogger(__name__)

MODULE_DIRECTIVE = re.compile(r'^module\s+(?:"([^"]+)"|(\S+))\s*$')
MAJOR_VERSION_SUFFIX = re.compile(r'^v[0-9]+$')


def get_project_root() -> Path:
    """Return the current working directory as the project root.

    The logical path in $PWD is preferred over the physical one so projects
    symlinked into a GOPATH keep their import path.
    """
    try:
        cwd = os.getcwd()
    except OSError as e:
        raise DetectionError(f"Cannot determine working directory: {e}") from e

    pwd = os.environ.get("PWD")
    if pwd and os.path.isabs(pwd):
        try:
            if os.path.samefile(pwd, cwd):
                return Path(pwd)
        except OSError:
            logger.debug("Ignoring stale PWD %s", pwd)
    return Path(cwd)


def split_workspace_path(path: PurePath) -> str:
    """Return the part of path after the last workspace delimiter segment.

    Paths without a delimiter segment are returned whole, minus their root.
    """
    parts = [part for part in path.parts if part != path.anchor]
    if WORKSPACE_DELIMITER in parts:
        last = len(parts) - 1 - parts[::-1].index(WORKSPACE_DELIMITER)
        parts = parts[last + 1:]
    return "/".join(parts).lstrip("/")


def parse_module_path(content: str) -> Optional[str]:
    """Extract the module path from go.mod content."""
    for line in content.splitlines():
        line = line.split("//", 1)[0].strip()
        match = MODULE_DIRECTIVE.match(line)
        if match:
            return match.group(1) or match.group(2)
    return None


def default_binary_name(import_path: str) -> str:
    """Name go build gives the binary for an import path."""
    segments = [segment for segment in import_path.split("/") if segment]
    if not segments:
        return ""
    # example.com/proj/v2 builds a binary called proj
    if len(segments) > 1 and MAJOR_VERSION_SUFFIX.match(segments[-1]):
        return segments[-2]
    return segments[-1]


class ProjectDetector:
    """Inspects a project directory to build its BuildConfig."""

    def __init__(self, project_root: Path):
        """Initialize detector."""
        self.project_root = project_root

    def _marker_exists(self, name: str) -> bool:
        """Check whether a marker file is present; I/O errors are fatal."""
        path = self.project_root / name
        try:
            path.stat()
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as e:
            raise DetectionError(f"Cannot inspect {path}: {e}") from e
        return True

    def has_module_manifest(self) -> bool:
        """Check whether go.mod is present."""
        return self._marker_exists(MODULE_MANIFEST_FILE)

    def has_legacy_lock(self) -> bool:
        """Check whether a dep Gopkg.toml is present."""
        return self._marker_exists(LEGACY_LOCK_FILE)

    def import_path_from_workspace(self) -> str:
        """Derive the import path from the project's place in a GOPATH."""
        return split_workspace_path(self.project_root.absolute())

    def import_path_from_manifest(self) -> str:
        """Read the import path from the module directive in go.mod."""
        manifest = self.project_root / MODULE_MANIFEST_FILE
        try:
            content = manifest.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestError(f"Cannot read {manifest}: {e}") from e

        module_path = parse_module_path(content)
        if not module_path:
            raise ManifestError(f"No module directive found in {manifest}")
        return module_path

    def detect(self) -> BuildConfig:
        """Probe marker files and derive the project's build configuration."""
        uses_module_manifest = self.has_module_manifest()
        uses_legacy_lock = self.has_legacy_lock()

        if uses_module_manifest:
            import_path = self.import_path_from_manifest()
        else:
            import_path = self.import_path_from_workspace()

        if not import_path:
            raise DetectionError(
                f"Cannot derive an import path from {self.project_root}; "
                f"run from inside a '{WORKSPACE_DELIMITER}' directory or add a {MODULE_MANIFEST_FILE}"
            )

        logger.debug(
            "Detected %s (go.mod=%s, Gopkg.toml=%s)",
            import_path, uses_module_manifest, uses_legacy_lock
        )

        config = BuildConfig(
            import_path=import_path,
            binary_name=default_binary_name(import_path) or import_path,
            entry_package=import_path,
            uses_legacy_lock=uses_legacy_lock,
            uses_module_manifest=uses_module_manifest,
        )
        logger.info("Using %s dependency mode", config.dependency_mode.value)
        return config
