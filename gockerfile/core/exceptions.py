"""Custom exceptions for gockerfile."""


class GockerfileError(Exception):
    """Base exception for all gockerfile errors."""

    pass


class DetectionError(GockerfileError):
    """Exception raised when the project layout cannot be inspected."""

    pass


class ManifestError(DetectionError):
    """Exception raised when go.mod cannot be read or has no module directive."""

    pass


class TemplateError(GockerfileError):
    """Exception raised when values cannot be bound to the Dockerfile template."""

    pass


class WriteError(GockerfileError):
    """Exception raised when the Dockerfile cannot be written."""

    pass
