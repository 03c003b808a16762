"""Build configuration models."""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class DependencyMode(Enum):
    """How a Go project manages its dependencies."""
    LEGACY_LOCK = "dep"
    MODULE_MANIFEST = "gomod"
    NONE = "none"


class BuildConfig(BaseModel):
    """Values bound into the Dockerfile template for one project."""
    model_config = ConfigDict(frozen=True)

    import_path: str = Field(min_length=1)
    binary_name: str = Field(min_length=1)
    entry_package: str = Field(min_length=1)
    uses_legacy_lock: bool = False
    uses_module_manifest: bool = False

    @property
    def dependency_mode(self) -> DependencyMode:
        """Resolve the dependency mode; a legacy lock file wins over go.mod."""
        if self.uses_legacy_lock:
            return DependencyMode.LEGACY_LOCK
        if self.uses_module_manifest:
            return DependencyMode.MODULE_MANIFEST
        return DependencyMode.NONE

    def with_binary_name(self, binary_name: str) -> 'BuildConfig':
        """Return a copy with the binary name replaced."""
        return BuildConfig(**{**self.model_dump(), 'binary_name': binary_name})

    def template_params(self) -> Dict[str, Any]:
        """Template substitution points keyed by their public names."""
        return {
            'PackagePath': self.import_path,
            'Dep': self.uses_legacy_lock,
            'GoMod': self.uses_module_manifest,
            'BinaryName': self.binary_name,
            'MainPackage': self.entry_package,
        }
