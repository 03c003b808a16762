"""Multi-stage Dockerfile template for Go projects."""

from .constants import (
    BUILD_IMAGE,
    BUILD_OUTPUT_DIR,
    DEP_TOOL_PACKAGE,
    GOPATH_SRC,
    LEGACY_LOCK_FILES,
    RUNTIME_BINARY_DIR,
    RUNTIME_IMAGE,
)
from .exceptions import TemplateError
from ..models.build import BuildConfig, DependencyMode

GO_DOCKERFILE = """# Build the binary in docker container
FROM {build_image} AS build
WORKDIR {gopath_src}/{PackagePath}

{dependency_steps}

COPY . ./

RUN CGO_ENABLED=0 GOOS=linux go build -o {build_output_dir}/{BinaryName} -ldflags="-w -s" -v {MainPackage}

FROM {runtime_image} AS final
RUN apk --no-cache add ca-certificates
COPY --from=build {build_output_dir}/{BinaryName} {runtime_binary_dir}/{BinaryName}
"""

DEP_STEPS = f"""RUN go get {DEP_TOOL_PACKAGE}
COPY {' '.join(LEGACY_LOCK_FILES)} ./
RUN dep ensure -v -vendor-only"""

GO_MOD_STEPS = "RUN go mod vendor"

GO_GET_STEPS = "RUN go get -v ./..."

DEPENDENCY_STEPS = {
    DependencyMode.LEGACY_LOCK: DEP_STEPS,
    DependencyMode.MODULE_MANIFEST: GO_MOD_STEPS,
    DependencyMode.NONE: GO_GET_STEPS,
}


def dependency_steps(mode: DependencyMode) -> str:
    """Return the dependency fetching steps for a dependency mode."""
    return DEPENDENCY_STEPS[mode]


def generate_dockerfile(config: BuildConfig) -> str:
    """Generate Dockerfile from configuration."""
    try:
        return GO_DOCKERFILE.format(
            build_image=BUILD_IMAGE,
            runtime_image=RUNTIME_IMAGE,
            gopath_src=GOPATH_SRC,
            build_output_dir=BUILD_OUTPUT_DIR,
            runtime_binary_dir=RUNTIME_BINARY_DIR,
            dependency_steps=dependency_steps(config.dependency_mode),
            **config.template_params()
        )
    except (KeyError, IndexError, ValueError) as e:
        raise TemplateError(f"Binding values to template failed: {e}") from e
