"""Constants used throughout gockerfile."""


# Marker files for dependency mode detection
MODULE_MANIFEST_FILE = "go.mod"
LEGACY_LOCK_FILE = "Gopkg.toml"
LEGACY_LOCK_FILES = ["Gopkg.toml", "Gopkg.lock"]

# Last path segment of this name marks the root of a GOPATH workspace
WORKSPACE_DELIMITER = "src"

# Docker-related constants
BUILD_IMAGE = "golang:1.10.3"
RUNTIME_IMAGE = "alpine:3.8"
GOPATH_SRC = "/go/src"
BUILD_OUTPUT_DIR = "/go/bin"
RUNTIME_BINARY_DIR = "/bin"
DEP_TOOL_PACKAGE = "github.com/golang/dep/cmd/dep"

# Output
DOCKERFILE_NAME = "Dockerfile"
DOCKERFILE_MODE = 0o644

# Environment variable for the binary name override
BINARY_NAME_ENVVAR = "GOCKERFILE_BINARYNAME"
